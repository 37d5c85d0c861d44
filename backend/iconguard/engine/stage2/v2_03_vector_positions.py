"""V2.03 — Vector Positions.

Per-leaf position record for the UI inspector: logical (unstroked) position
in container space, the offset inside the direct parent, and distances from
each container edge.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.models.geometry import Bounds
from iconguard.models.results import EdgeDistances, VectorPositionInfo
from iconguard.utils.geometry import edge_distances, round_half_up


@check(
    id="V2.03",
    stage=Stage.DIAGNOSTICS,
    dependencies=["V1.01"],
    description="Collect position diagnostics for painted leaves",
)
def vector_positions(ctx: ValidationContext) -> None:
    for fact in ctx.facts:
        if not (fact.has_stroke or fact.has_fill):
            continue

        logical = Bounds(x=fact.x, y=fact.y, width=fact.width, height=fact.height)
        left, top, right, bottom = (
            round_half_up(d) for d in edge_distances(logical, ctx.container_size)
        )
        ctx.vector_positions.append(
            VectorPositionInfo(
                name=fact.name,
                x=fact.x,
                y=fact.y,
                relative_x=fact.relative_x,
                relative_y=fact.relative_y,
                width=fact.width,
                height=fact.height,
                distance_from_edges=EdgeDistances(left=left, top=top, right=right, bottom=bottom),
                stroke_weight=fact.stroke_weight,
                is_in_frame=fact.parent_frame_name is not None,
                parent_frame_name=fact.parent_frame_name,
                layer_path=list(fact.layer_path),
            )
        )
