"""V2.02 — Vector Proximity.

Pairs of leaves that almost touch (``0 < gap < threshold``) usually mean a
misplaced node. Overlapping or touching pairs and pairs at least the
threshold apart are fine. Pairwise, so O(n^2) in the leaf count.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.utils.formatting import format_number, px2, strong
from iconguard.utils.geometry import gap_matrix


@check(
    id="V2.02",
    stage=Stage.DIAGNOSTICS,
    dependencies=["V1.01"],
    description="Flag vectors that nearly touch",
)
def proximity(ctx: ValidationContext) -> None:
    n = len(ctx.facts)
    if n < 2:
        return

    threshold = ctx.config.proximity_threshold
    matrix = gap_matrix([fact.bounds for fact in ctx.facts])

    for i in range(n):
        for j in range(i + 1, n):
            gap = float(matrix[i][j])
            if 0 < gap < threshold:
                ctx.info(
                    f"{strong('Vectors very close together:')} "
                    f'"{ctx.facts[i].name}" and "{ctx.facts[j].name}" are {strong(px2(gap))} apart<br>'
                    f"Vectors should either touch or keep at least {format_number(threshold)}px distance"
                )
