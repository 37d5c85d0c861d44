"""V0.02 — Container Structure.

Icon content lives in a direct child frame named "Container" that matches the
master frame's size. Helper frames (guides, keylines) are ignored. A wrong
name or size is reported but validation continues; a missing or empty
container stops the run.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.models.nodes import ContainerNode
from iconguard.utils.formatting import format_number

CONTAINER_NAME = "Container"


def find_container(frame: ContainerNode) -> ContainerNode | None:
    """First direct child frame whose name contains "container", any case."""
    for child in frame.children:
        if isinstance(child, ContainerNode) and child.is_frame and "container" in child.name.lower():
            return child
    return None


@check(
    id="V0.02",
    stage=Stage.STRUCTURE,
    dependencies=["V0.01"],
    description="Frame holds a correctly named, sized and non-empty Container",
)
def container_structure(ctx: ValidationContext) -> None:
    frame = ctx.frame

    if not frame.children:
        ctx.error("Frame is empty<br>Expected: Container frame with icon content")
        ctx.halt("V0.02")
        return

    container = find_container(frame)
    if container is None:
        ctx.error(
            'No Container frame found<br>Expected: A frame named "Container" with icon content'
        )
        ctx.halt("V0.02")
        return

    ctx.container = container

    if container.name != CONTAINER_NAME:
        ctx.error(
            f'Container frame should be named "{CONTAINER_NAME}"<br>Found: "{container.name}"'
        )

    if container.width != frame.width or container.height != frame.height:
        ctx.error(
            f"Container size mismatch: "
            f"{format_number(container.width)}x{format_number(container.height)}px<br>"
            f"Expected: {format_number(frame.width)}x{format_number(frame.height)}px "
            f"(same as parent frame)"
        )

    if not container.children:
        ctx.error("Container is empty<br>Expected: Vector paths or shapes")
        ctx.halt("V0.02")
