"""V1.05 — Content Size.

The union of every leaf's visual bounds must fit inside the container minus
the safety zone on both sides.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.models.results import ValidationError
from iconguard.utils.formatting import format_number, px2_flagged, strong
from iconguard.utils.geometry import union_bounds


@check(
    id="V1.05",
    stage=Stage.CONTENT,
    dependencies=["V1.01"],
    description="Overall content fits inside the safety zone",
)
def content_size(ctx: ValidationContext) -> None:
    ctx.content_bounds = union_bounds([fact.bounds for fact in ctx.facts])
    if ctx.content_bounds is None:
        return

    width = ctx.content_bounds.width
    height = ctx.content_bounds.height
    max_size = ctx.policy.max_content_size(ctx.container_size)
    too_wide = width > max_size
    too_tall = height > max_size

    if too_wide or too_tall:
        limit = format_number(max_size)
        ctx.placement_errors.append(
            ValidationError(
                message=(
                    f"{strong('Icon size too large:')} "
                    f"{px2_flagged(width, too_wide)} × {px2_flagged(height, too_tall)}<br>"
                    f"Maximum: {limit}px × {limit}px "
                    f"(with {format_number(ctx.policy.safety_zone)}px safety zone)"
                ),
                node=ctx.node_name,
            )
        )
