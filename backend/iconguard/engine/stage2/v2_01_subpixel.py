"""V2.01 — Sub-pixel Content Size.

Functional icons export crisply when the overall content size lands on the
quarter-pixel grid (.00, .25, .50, .75). Off-grid sizes are only noted.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.utils.formatting import px2_flagged, strong
from iconguard.utils.geometry import off_quarter_grid


@check(
    id="V2.01",
    stage=Stage.DIAGNOSTICS,
    dependencies=["V1.05"],
    tags={"functional"},
    description="Content size sits on the quarter-pixel grid",
)
def subpixel(ctx: ValidationContext) -> None:
    if not ctx.policy.reports_subpixel or ctx.content_bounds is None:
        return

    tolerance = ctx.config.subpixel_tolerance
    step = ctx.config.subpixel_step
    width = ctx.content_bounds.width
    height = ctx.content_bounds.height
    bad_width = off_quarter_grid(width, tolerance, step)
    bad_height = off_quarter_grid(height, tolerance, step)

    if not (bad_width or bad_height):
        return

    offending = ", ".join(name for name, bad in (("width", bad_width), ("height", bad_height)) if bad)
    ctx.info(
        f"{strong('Sub-pixel content size:')} "
        f"{px2_flagged(width, bad_width)} × {px2_flagged(height, bad_height)}<br>"
        f"Off-grid: {offending}. Content size should end in .00, .25, .50 or .75"
    )
