"""V1.01 — Vector Presence.

Flattens the container into VectorFacts for every later check. A container
holding only groups, text or empty frames has nothing to validate.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.extractor import extract_vector_facts
from iconguard.engine.registry import Stage, check


@check(
    id="V1.01",
    stage=Stage.CONTENT,
    dependencies=["V0.02"],
    description="Extract leaf shapes from the container",
)
def vector_presence(ctx: ValidationContext) -> None:
    if ctx.container is None:
        return

    ctx.facts = extract_vector_facts(ctx.container, ctx.resolver)

    if not ctx.facts:
        ctx.error(
            "Container has no vector content<br>"
            "Expected: Vector paths, shapes, or groups containing vectors"
        )
        ctx.halt("V1.01")
