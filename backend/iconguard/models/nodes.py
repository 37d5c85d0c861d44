"""Read-only snapshot of the host document tree.

The host integration layer serializes the live node tree into these models
before any validation runs. Nodes are a tagged variant discriminated on
``type``:

- ``ShapeNode``: drawable leaves (vectors, ellipses, lines, rectangles,
  polygons, stars, boolean operations)
- ``ContainerNode``: frames, groups, components, instances, sections
- ``TextNode``: text layers, never treated as geometry

Field names follow the host API (``strokeWeight``, ``absoluteRenderBounds``)
on the wire and snake_case in Python.
"""

from __future__ import annotations

from typing import Annotated, Literal, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from iconguard.models.geometry import Bounds, Paint

SHAPE_TYPES = (
    "VECTOR",
    "ELLIPSE",
    "LINE",
    "RECTANGLE",
    "POLYGON",
    "STAR",
    "BOOLEAN_OPERATION",
)


@runtime_checkable
class HasBounds(Protocol):
    name: str
    x: float
    y: float
    width: float
    height: float

    @property
    def bounds(self) -> Bounds: ...


@runtime_checkable
class HasStroke(Protocol):
    stroke_weight: float
    strokes: list[Paint]


@runtime_checkable
class HasFill(Protocol):
    fills: list[Paint]


class _SnapshotNode(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = ""
    name: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)

    @property
    def bounds(self) -> Bounds:
        """Position relative to the parent, as the host reports it."""
        return Bounds(x=self.x, y=self.y, width=self.width, height=self.height)


class ShapeNode(_SnapshotNode):
    type: Literal[
        "VECTOR",
        "ELLIPSE",
        "LINE",
        "RECTANGLE",
        "POLYGON",
        "STAR",
        "BOOLEAN_OPERATION",
    ] = "VECTOR"
    stroke_weight: float = 0.0
    strokes: list[Paint] = Field(default_factory=list)
    fills: list[Paint] = Field(default_factory=list)
    # Absolute canvas bounds; None until the host has computed geometry.
    absolute_render_bounds: Bounds | None = None
    absolute_bounding_box: Bounds | None = None
    # Boolean operations keep their operands as children
    children: list[Node] = Field(default_factory=list)

    @property
    def has_stroke(self) -> bool:
        return len(self.strokes) > 0 and self.stroke_weight > 0

    @property
    def has_fill(self) -> bool:
        return len(self.fills) > 0


class ContainerNode(_SnapshotNode):
    type: Literal["FRAME", "GROUP", "COMPONENT", "COMPONENT_SET", "INSTANCE", "SECTION"] = "FRAME"
    absolute_bounding_box: Bounds | None = None
    children: list[Node] = Field(default_factory=list)

    @property
    def is_frame(self) -> bool:
        return self.type == "FRAME"


class TextNode(_SnapshotNode):
    type: Literal["TEXT"] = "TEXT"
    characters: str = ""


Node = Annotated[Union[ShapeNode, ContainerNode, TextNode], Field(discriminator="type")]

ShapeNode.model_rebuild()
ContainerNode.model_rebuild()
