"""S0.02 — Variant Coverage.

The outlined variant must exist at every required size, and so must the
filled variant once any filled variant exists. Each required variant needs
content inside its container. Without a single outlined variant nothing
further can be measured.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.engine.variants import FILLED, OUTLINED, variant_name
from iconguard.models.nodes import ContainerNode
from iconguard.utils.formatting import px, strong


@check(
    id="S0.02",
    stage=Stage.STRUCTURE,
    dependencies=["S0.01"],
    tags={"component_set"},
    description="Required size variants exist and have content",
)
def variant_coverage(ctx: ValidationContext) -> None:
    required = ctx.policy.required_sizes
    by_name = {v.node.name: v for v in ctx.variants}
    has_outlined = any(f"Variant={OUTLINED}" in name for name in by_name)
    has_filled = any(f"Variant={FILLED}" in name for name in by_name)

    if not has_outlined:
        ctx.error(
            f"No {strong(OUTLINED)} variants found<br>"
            f"Please add the required sizes ({', '.join(px(s) for s in required)}) "
            f"for the {OUTLINED} variant"
        )
        missing = [s for s in required if variant_name(s, FILLED) not in by_name]
        if has_filled and missing:
            ctx.error(
                f"Missing {strong(FILLED)} sizes: {', '.join(px(s) for s in missing)}<br>"
                f"Please add these sizes for the {FILLED} variant"
            )
        ctx.halt("S0.02")
        return

    variant_types = [OUTLINED, FILLED] if has_filled else [OUTLINED]
    for variant_type in variant_types:
        for size in required:
            name = variant_name(size, variant_type)
            label = strong(f"{variant_type}, {px(size)}")
            variant = by_name.get(name)

            if variant is None:
                ctx.error(f"Missing variant: {label}<br>Please create this variant and add content")
            elif not variant.node.children:
                ctx.error(f"Empty variant: {label}<br>Please add vector content to this variant", node=name)
            elif isinstance(variant.container, ContainerNode) and not variant.container.children:
                ctx.error(
                    f"Empty container in variant: {label}<br>Please add vector content to this variant",
                    node=name,
                )
