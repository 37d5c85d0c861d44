"""S0.03 — Illustrative Component Size.

An illustrative component and its container frame are both exactly 64px.
The component is measured as its own single variant.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.engine.variants import IconVariant
from iconguard.utils.formatting import format_number


@check(
    id="S0.03",
    stage=Stage.STRUCTURE,
    tags={"illustrative_component"},
    description="Component and container have the illustrative size",
)
def component_size(ctx: ValidationContext) -> None:
    frame = ctx.frame
    (size,) = ctx.policy.required_sizes
    expected = f"{format_number(size)}x{format_number(size)}px"

    if frame.width != size or frame.height != size:
        ctx.error(
            f"Component has incorrect size: "
            f"{format_number(frame.width)}x{format_number(frame.height)}px<br>Expected: {expected}"
        )

    variant = IconVariant(node=frame, size=int(size), variant_type=None, label=frame.name)
    container = variant.container
    if container is not None and (container.width != size or container.height != size):
        ctx.error(
            f"Container has incorrect size: "
            f"{format_number(container.width)}x{format_number(container.height)}px<br>Expected: {expected}"
        )

    ctx.variants = [variant]
