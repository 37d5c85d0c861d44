"""S1.01 — Variant Dimensions.

Each measured variant, and the container frame inside it, is square at the
size its name declares.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.engine.variants import measurable_variants
from iconguard.utils.formatting import format_number


def _dims(node) -> str:
    return f"{format_number(node.width)}x{format_number(node.height)}px"


@check(
    id="S1.01",
    stage=Stage.CONTENT,
    dependencies=["S0.02"],
    tags={"component_set"},
    description="Variant and container sizes match the Size property",
)
def variant_dimensions(ctx: ValidationContext) -> None:
    for variant in measurable_variants(ctx.variants, ctx.policy):
        size = variant.size
        expected = f"(expected: {size}x{size}px)"
        node = variant.node

        if node.width != size or node.height != size:
            ctx.error(f"{variant.label} has incorrect size: {_dims(node)} {expected}", node=node.name)

        container = variant.container
        if container.width != size or container.height != size:
            ctx.error(
                f"Container in {variant.label} has incorrect size: {_dims(container)} {expected}",
                node=node.name,
            )
