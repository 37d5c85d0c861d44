"""Vector geometry extraction: flatten a container subtree into VectorFacts.

Bounds for each leaf are resolved through ``BoundsResolver``, which tries
each source in priority order:

1. ``RENDER_BOUNDS``: host-rendered visual bounds. Exact; already includes
   the outer stroke edge.
2. ``BOUNDING_BOX``: host logical bounding box. Excludes the stroke, so a
   stroked leaf appears ``stroke_weight / 2`` smaller on every side.
3. ``SYNTHETIC``: logical position summed over the ancestors below the
   container, outset by half the stroke weight. Correct for unrotated,
   center-aligned strokes; ignores stroke caps, joins and vector network
   overshoot.

Host bounds are absolute (canvas space) and are shifted by the container's
absolute origin. A container without an absolute origin is treated as
sitting at (0, 0).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Union

from iconguard.models.facts import BoundsSource, VectorFact
from iconguard.models.geometry import Bounds, Color, Paint
from iconguard.models.nodes import ContainerNode, ShapeNode, TextNode

logger = logging.getLogger(__name__)

AnyNode = Union[ShapeNode, ContainerNode, TextNode]

DEFAULT_PRIORITY: tuple[BoundsSource, ...] = (
    BoundsSource.RENDER_BOUNDS,
    BoundsSource.BOUNDING_BOX,
    BoundsSource.SYNTHETIC,
)


def _children(node: AnyNode) -> list[AnyNode]:
    if isinstance(node, (ShapeNode, ContainerNode)):
        return node.children
    return []


def has_vector_nodes(node: AnyNode) -> bool:
    """True if ``node`` or any descendant is a leaf shape."""
    if isinstance(node, ShapeNode):
        return True
    return any(has_vector_nodes(child) for child in _children(node))


def collect_leaves(root: AnyNode) -> list[tuple[ShapeNode, tuple[AnyNode, ...]]]:
    """Every leaf shape below ``root`` with its ancestors, ``root`` excluded.

    Document order, depth-first. Boolean operations count as leaves and their
    operands are collected as well.
    """
    return list(_walk(root, (), is_root=True))


def _walk(
    node: AnyNode,
    chain: tuple[AnyNode, ...],
    is_root: bool = False,
) -> Iterator[tuple[ShapeNode, tuple[AnyNode, ...]]]:
    if not is_root and isinstance(node, ShapeNode):
        yield node, chain
    child_chain = chain if is_root else chain + (node,)
    for child in _children(node):
        yield from _walk(child, child_chain)


def _solid_colors(paints: Sequence[Paint]) -> tuple[Color, ...]:
    return tuple(c for c in (p.solid_color for p in paints) if c is not None)


class BoundsResolver:
    """Resolve a leaf's container-space visual bounds from the best available source."""

    def __init__(self, priority: Sequence[BoundsSource] = DEFAULT_PRIORITY) -> None:
        tiers = [s for s in priority if s is not BoundsSource.SYNTHETIC]
        # Synthetic never fails, so it always closes the chain
        self.priority: tuple[BoundsSource, ...] = (*tiers, BoundsSource.SYNTHETIC)

    def resolve(
        self,
        node: ShapeNode,
        logical_x: float,
        logical_y: float,
        origin: tuple[float, float],
    ) -> tuple[Bounds, BoundsSource]:
        ox, oy = origin
        for source in self.priority:
            if source is BoundsSource.RENDER_BOUNDS and node.absolute_render_bounds is not None:
                return node.absolute_render_bounds.translated(-ox, -oy), source
            if source is BoundsSource.BOUNDING_BOX and node.absolute_bounding_box is not None:
                return node.absolute_bounding_box.translated(-ox, -oy), source
            if source is BoundsSource.SYNTHETIC:
                half = node.stroke_weight / 2 if node.has_stroke else 0.0
                logical = Bounds(x=logical_x, y=logical_y, width=node.width, height=node.height)
                return logical.outset(half), source
        raise AssertionError("synthetic tier missing from priority")


def extract_vector_facts(
    container: ContainerNode,
    resolver: BoundsResolver | None = None,
) -> list[VectorFact]:
    """Build one VectorFact per leaf shape below ``container``."""
    resolver = resolver or BoundsResolver()
    origin = (0.0, 0.0)
    if container.absolute_bounding_box is not None:
        origin = (container.absolute_bounding_box.x, container.absolute_bounding_box.y)

    facts: list[VectorFact] = []
    for node, chain in collect_leaves(container):
        logical_x = node.x + sum(p.x for p in chain)
        logical_y = node.y + sum(p.y for p in chain)
        bounds, source = resolver.resolve(node, logical_x, logical_y, origin)

        parent = chain[-1] if chain else None
        parent_frame_name = None
        if (
            isinstance(parent, ContainerNode)
            and parent.is_frame
            and "container" not in parent.name.lower()
        ):
            parent_frame_name = parent.name

        facts.append(
            VectorFact(
                name=node.name,
                bounds=bounds,
                stroke_weight=node.stroke_weight,
                has_stroke=node.has_stroke,
                has_fill=node.has_fill,
                fill_colors=_solid_colors(node.fills),
                stroke_colors=_solid_colors(node.strokes),
                x=logical_x,
                y=logical_y,
                relative_x=node.x,
                relative_y=node.y,
                width=node.width,
                height=node.height,
                layer_path=tuple(p.name for p in chain),
                parent_frame_name=parent_frame_name,
                bounds_source=source,
            )
        )

    logger.debug("Extracted %d vector facts from %s", len(facts), container.name)
    return facts
