"""V1.02 — Stroke Width.

Functional icons: 2px, with 1.75px and 1.5px tolerated for smaller sizes.
Illustrative icons: 2px only. Comparisons are exact.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.utils.formatting import format_number, strong


@check(
    id="V1.02",
    stage=Stage.CONTENT,
    dependencies=["V1.01"],
    description="Stroke weights follow the stroke-width table",
)
def stroke_width(ctx: ValidationContext) -> None:
    policy = ctx.policy

    for fact in ctx.facts:
        if not fact.has_stroke:
            continue
        weight = fact.stroke_weight

        if weight == policy.required_stroke_width:
            continue

        if weight in policy.tolerated_stroke_widths:
            ctx.warning(
                f'Vector "{fact.name}" has stroke width {format_number(weight)}px. '
                f"Check if the modified stroke width is necessary."
            )
        elif policy.tolerated_stroke_widths:
            tolerated = ", ".join(f"{format_number(w)}px" for w in policy.tolerated_stroke_widths)
            ctx.error(
                f'Vector "{fact.name}" has incorrect stroke width: {format_number(weight)}px<br>'
                f"Expected: {format_number(policy.required_stroke_width)}px "
                f"(or {tolerated} with warning) for {policy.name} icons"
            )
        else:
            ctx.error(
                strong(f'Incorrect stroke width: "{fact.name}" is {weight:.2f}px')
                + f"<br>All strokes must be exactly {format_number(policy.required_stroke_width)}px"
            )
