"""S1.03 — Icon Frame Clearance.

The icon frame (the first frame or group in the container) keeps the safety
zone from every container edge. Outlined components may hold a bare shape
instead, which is measured the same way. Positions are the frame's own
logical box, so a small tolerance absorbs float noise.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.engine.variants import measurable_variants
from iconguard.models.nodes import ContainerNode, ShapeNode
from iconguard.utils.formatting import format_number


def icon_frame(container: ContainerNode, allow_shape: bool) -> ShapeNode | ContainerNode | None:
    for child in container.children:
        if isinstance(child, ContainerNode) and child.type in ("FRAME", "GROUP"):
            return child
    if allow_shape:
        for child in container.children:
            if isinstance(child, ShapeNode):
                return child
    return None


@check(
    id="S1.03",
    stage=Stage.CONTENT,
    dependencies=["S0.02", "S0.03"],
    tags={"component_set", "illustrative_component"},
    description="Icon frame keeps the safety zone inside its container",
)
def frame_clearance(ctx: ValidationContext) -> None:
    zone = ctx.policy.safety_zone
    eps = ctx.config.frame_clearance_tolerance

    for variant in measurable_variants(ctx.variants, ctx.policy):
        container = variant.content_container
        if container is None:
            continue
        frame = icon_frame(container, allow_shape=ctx.policy.outlined_children)
        if frame is None:
            continue

        bounds = frame.bounds
        max_x = container.width - zone
        max_y = container.height - zone
        violations = []
        if bounds.x < zone - eps:
            violations.append(f"left edge at {bounds.x:.2f}px (min: {format_number(zone)}px)")
        if bounds.y < zone - eps:
            violations.append(f"top edge at {bounds.y:.2f}px (min: {format_number(zone)}px)")
        if bounds.right > max_x + eps:
            violations.append(f"right edge at {bounds.right:.2f}px (max: {format_number(max_x)}px)")
        if bounds.bottom > max_y + eps:
            violations.append(f"bottom edge at {bounds.bottom:.2f}px (max: {format_number(max_y)}px)")

        if violations:
            ctx.error(
                f"Icon frame in {variant.label} is too close to container edge:<br>"
                + "<br>".join(violations)
                + f"<br>Frame must be at least {format_number(zone)}px from all edges",
                node=variant.node.name,
            )
