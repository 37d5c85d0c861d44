"""V1.04 — Safety Zone.

Clearance between each painted leaf and the container edges. Resolved
bounds include the stroke's outer edge, but the safety zone is measured from
the path center, so stroked leaves get half the stroke weight added back to
each distance and must clear ``safety_zone + stroke_weight / 2``. Fill-only
leaves must clear ``safety_zone``.

Distances are rounded half-up to 2 decimals before the comparison.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.models.results import ValidationError
from iconguard.utils.formatting import format_number, px2, strong
from iconguard.utils.geometry import edge_distances, round_half_up

_EDGES = ("left", "top", "right", "bottom")


@check(
    id="V1.04",
    stage=Stage.CONTENT,
    dependencies=["V1.01"],
    description="Painted leaves keep clear of the safety zone",
)
def safety_zone(ctx: ValidationContext) -> None:
    zone = ctx.policy.safety_zone

    for fact in ctx.facts:
        if not (fact.has_stroke or fact.has_fill):
            continue

        half = fact.half_stroke
        distances = [
            round_half_up(d + half) for d in edge_distances(fact.bounds, ctx.container_size)
        ]
        minimum = zone + half

        violations = [
            f"{edge} edge is in safety area ({strong(px2(d))}, min: {px2(minimum)})"
            for edge, d in zip(_EDGES, distances)
            if d < minimum
        ]
        if violations:
            ctx.placement_errors.append(
                ValidationError(
                    message=(
                        strong(f'Incorrect position: "{fact.name}" ({fact.kind})')
                        + "<br>"
                        + "<br>".join(violations)
                        + f"<br>Safety zone: {format_number(zone)}px"
                    ),
                    node=ctx.node_name,
                )
            )
