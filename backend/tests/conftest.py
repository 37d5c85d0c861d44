"""Shared test fixtures and snapshot builders."""

from __future__ import annotations

import pytest

from iconguard.models.geometry import Bounds, Color, Paint
from iconguard.models.nodes import ContainerNode, ShapeNode

BLACK = Color(r=0.1, g=0.1, b=0.1)
RED = Color(r=0.9, g=0.1, b=0.1)
BLUE = Color(r=0.1, g=0.2, b=0.9)


def vector(
    name: str = "Vector",
    x: float = 0,
    y: float = 0,
    width: float = 10,
    height: float = 10,
    stroke_weight: float = 2,
    stroke: Color | None = BLACK,
    fill: Color | None = None,
    render_bounds: Bounds | None = None,
    bounding_box: Bounds | None = None,
    type: str = "VECTOR",
    children: list | None = None,
) -> ShapeNode:
    return ShapeNode(
        type=type,
        name=name,
        x=x,
        y=y,
        width=width,
        height=height,
        stroke_weight=stroke_weight,
        strokes=[Paint(color=stroke)] if stroke is not None else [],
        fills=[Paint(color=fill)] if fill is not None else [],
        absolute_render_bounds=render_bounds,
        absolute_bounding_box=bounding_box,
        children=children or [],
    )


def filled(name: str, x: float, y: float, width: float, height: float, color: Color = BLACK) -> ShapeNode:
    return vector(name=name, x=x, y=y, width=width, height=height, stroke_weight=0, stroke=None, fill=color)


def group(name: str, children: list, x: float = 0, y: float = 0, type: str = "GROUP") -> ContainerNode:
    return ContainerNode(type=type, name=name, x=x, y=y, children=children)


def master_frame(
    content: list,
    size: float = 24,
    height: float | None = None,
    name: str | None = None,
    container_name: str = "Container",
    container_size: float | None = None,
    extra_children: list | None = None,
) -> ContainerNode:
    """Master template frame with a Container child holding ``content``."""
    inner = container_size if container_size is not None else size
    container = ContainerNode(
        type="FRAME",
        name=container_name,
        width=inner,
        height=inner,
        children=content,
    )
    return ContainerNode(
        type="FRAME",
        name=name or f"Icon {size:g}px",
        width=size,
        height=height if height is not None else size,
        children=[*(extra_children or []), container],
    )


# A 24px functional icon that passes every check: 2px stroke, 3px from each edge.
def clean_functional_frame() -> ContainerNode:
    return master_frame([vector(name="Outline", x=3, y=3, width=18, height=18)], size=24)


# A 64px illustrative icon that passes every check: black stroke + red fill.
def clean_illustrative_frame() -> ContainerNode:
    return master_frame(
        [
            vector(name="Outline", x=10, y=10, width=20, height=20),
            filled("Accent", x=34, y=34, width=20, height=20, color=RED),
        ],
        size=64,
    )


@pytest.fixture
def functional_frame() -> ContainerNode:
    return clean_functional_frame()


@pytest.fixture
def illustrative_frame() -> ContainerNode:
    return clean_illustrative_frame()
