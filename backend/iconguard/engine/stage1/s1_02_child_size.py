"""S1.02 — Child Size.

Every shape inside a measured variant stays within the size table for that
variant's size. Stroked shapes get the smaller limit, since the stroke's
outer edge adds to their visual size; fill-only shapes get the larger one.

Outlined components (illustrative) are flattened before publishing, so every
shape uses the fill limit, and groups and frames are held to it as well.
Sizes are rounded half-up to 2 decimals before the comparison.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from iconguard.engine.context import ValidationContext
from iconguard.engine.registry import Stage, check
from iconguard.engine.variants import measurable_variants
from iconguard.models.nodes import ContainerNode, ShapeNode
from iconguard.utils.formatting import format_number
from iconguard.utils.geometry import round_half_up

logger = logging.getLogger(__name__)


def sized_nodes(nodes: Sequence, outlined: bool) -> Iterator[ShapeNode | ContainerNode]:
    """Shapes below ``nodes``, walking through groups and frames.

    Outlined walks also yield the groups and frames themselves.
    """
    for node in nodes:
        if isinstance(node, ShapeNode):
            yield node
        elif isinstance(node, ContainerNode) and node.type in ("GROUP", "FRAME"):
            if outlined:
                yield node
            yield from sized_nodes(node.children, outlined)


def shape_kind(node: ShapeNode, outlined: bool) -> str:
    if outlined or (node.has_fill and not node.has_stroke):
        return "fill"
    return "stroke"


@check(
    id="S1.02",
    stage=Stage.CONTENT,
    dependencies=["S0.02", "S0.03"],
    tags={"component_set", "illustrative_component"},
    description="Shapes inside each variant fit the per-size limits",
)
def child_size(ctx: ValidationContext) -> None:
    policy = ctx.policy
    outlined = policy.outlined_children

    for variant in measurable_variants(ctx.variants, policy):
        container = variant.content_container
        limits = policy.child_size_limits.get(variant.size)
        if container is None or limits is None:
            continue

        for node in sized_nodes(container.children, outlined):
            if isinstance(node, ContainerNode):
                what, kind = f'Group "{node.name}"', "fill"
            else:
                what, kind = f'Child element "{node.name}"', shape_kind(node, outlined)

            limit = limits.for_kind(kind)
            logger.debug("%s %s: %sx%s, %s limit %s", variant.label, node.name, node.width, node.height, kind, limit)
            if round_half_up(node.width) > limit or round_half_up(node.height) > limit:
                ctx.error(
                    f"{what} in {variant.label} is too large: {node.width:.2f}x{node.height:.2f}px<br>"
                    f"Max for {kind} at {variant.size}px: {format_number(limit)}x{format_number(limit)}px",
                    node=variant.node.name,
                )
