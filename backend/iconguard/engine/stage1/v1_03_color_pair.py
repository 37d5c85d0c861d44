"""V1.03 — Color Pair.

Illustrative icons are two-tone: at least one black/dark-gray paint and at
least one red paint, counted over every fill and stroke.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.utils.formatting import strong


@check(
    id="V1.03",
    stage=Stage.CONTENT,
    dependencies=["V1.01"],
    tags={"illustrative"},
    description="Icon uses both the black and the red color",
)
def color_pair(ctx: ValidationContext) -> None:
    if not ctx.policy.requires_color_pair:
        return

    colors = [c for fact in ctx.facts for c in fact.colors]
    has_black = any(c.is_black_or_dark_gray() for c in colors)
    has_red = any(c.is_red() for c in colors)

    if not has_black:
        ctx.error(
            strong("Missing black color")
            + "<br>Illustrative icons must contain both black and red vectors"
        )
    if not has_red:
        ctx.error(
            strong("Missing red color")
            + "<br>Illustrative icons must contain both black (or dark gray) and red vectors"
        )
