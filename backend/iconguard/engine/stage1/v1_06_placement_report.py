"""V1.06 — Placement Report.

Safety-zone and size errors are reported together, preceded by a note on how
stroked shapes are measured.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check

MEASUREMENT_NOTE = (
    "<p>Note: For strokes, position is measured from path center, not visual edge. "
    "Size includes visual outer edge.</p>"
)


@check(
    id="V1.06",
    stage=Stage.CONTENT,
    dependencies=["V1.04", "V1.05"],
    description="Report placement errors behind a measurement note",
)
def placement_report(ctx: ValidationContext) -> None:
    if not ctx.placement_errors:
        return
    ctx.error(MEASUREMENT_NOTE)
    ctx.errors.extend(ctx.placement_errors)
