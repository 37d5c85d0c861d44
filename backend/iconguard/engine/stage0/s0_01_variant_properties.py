"""S0.01 — Variant Properties.

Every variant of a functional component set is named
``Size=<px>, Variant=<type>``. Unknown sizes and variant types are reported
once each for the whole set.
"""

from __future__ import annotations

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.engine.variants import VARIANT_TYPES, parse_variants
from iconguard.utils.formatting import px, strong


@check(
    id="S0.01",
    stage=Stage.STRUCTURE,
    tags={"component_set"},
    description="Variant names carry an allowed Size and Variant",
)
def variant_properties(ctx: ValidationContext) -> None:
    if ctx.frame.type != "COMPONENT_SET":
        ctx.error(f"Expected a component set<br>Found: {ctx.frame.type}")
        ctx.halt("S0.01")
        return

    ctx.variants = parse_variants(ctx.frame)
    allowed = ctx.policy.allowed_sizes

    invalid_sizes = sorted(
        {v.size for v in ctx.variants if v.size is not None and v.size not in allowed},
        reverse=True,
    )
    # Insertion order, duplicates dropped
    invalid_types = list(
        dict.fromkeys(
            v.variant_type
            for v in ctx.variants
            if v.variant_type is not None and v.variant_type not in VARIANT_TYPES
        )
    )

    if invalid_sizes:
        ctx.error(
            f"Invalid size(s): {strong(', '.join(px(s) for s in invalid_sizes))}<br>"
            f"Only sizes {', '.join(f'{s:g}' for s in allowed)} are allowed"
        )
    if invalid_types:
        found = ", ".join(strong(t) for t in invalid_types)
        expected = " and ".join(f'"{strong(t)}"' for t in VARIANT_TYPES)
        ctx.error(f"Invalid variant name(s): {found}<br>Only {expected} are allowed")

    for variant in ctx.variants:
        if variant.size is None:
            ctx.error(
                f'Variant "{variant.node.name}" has no Size property in name',
                node=variant.node.name,
            )
