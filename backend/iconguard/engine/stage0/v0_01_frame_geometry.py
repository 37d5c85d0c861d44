"""V0.01 — Frame Geometry.

The master frame must be square and one of the policy's sizes. Any failure
here stops the run: nothing downstream is meaningful at the wrong size.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.utils.formatting import format_number, px


@check(
    id="V0.01",
    stage=Stage.STRUCTURE,
    description="Frame is square and has an allowed master size",
)
def frame_geometry(ctx: ValidationContext) -> None:
    frame = ctx.frame
    w = format_number(frame.width)
    h = format_number(frame.height)
    failed = False

    if frame.width != frame.height:
        ctx.error(f"Frame must be square: {w}x{h}px<br>Expected: {w}x{w}px")
        failed = True

    if frame.width not in ctx.policy.allowed_sizes:
        expected = ", ".join(px(s) for s in ctx.policy.allowed_sizes)
        ctx.error(
            f"Invalid frame size: {w}x{h}px<br>"
            f"Expected sizes for {ctx.policy.name}: {expected}"
        )
        failed = True

    if failed:
        ctx.halt("V0.01")
