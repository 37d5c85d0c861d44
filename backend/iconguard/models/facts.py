"""Flattened per-leaf fact sheet consumed by the policy checks."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from iconguard.models.geometry import Bounds, Color


class BoundsSource(str, enum.Enum):
    """Where a leaf's resolved bounds came from, best first."""

    RENDER_BOUNDS = "render_bounds"
    BOUNDING_BOX = "bounding_box"
    SYNTHETIC = "synthetic"


class VectorFact(BaseModel):
    """Geometry and paint facts for one leaf shape, in container space.

    ``bounds`` is the visual box (stroke outer edge included). ``x``/``y`` and
    ``width``/``height`` are the logical path geometry as the host reports it,
    with ``x``/``y`` summed over every ancestor below the container.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    bounds: Bounds
    stroke_weight: float = 0.0
    has_stroke: bool = False
    has_fill: bool = False
    fill_colors: tuple[Color, ...] = ()
    stroke_colors: tuple[Color, ...] = ()

    x: float = 0.0
    y: float = 0.0
    relative_x: float = 0.0
    relative_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    layer_path: tuple[str, ...] = Field(default_factory=tuple)
    parent_frame_name: str | None = None
    bounds_source: BoundsSource = BoundsSource.SYNTHETIC

    @property
    def half_stroke(self) -> float:
        return self.stroke_weight / 2 if self.has_stroke else 0.0

    @property
    def colors(self) -> tuple[Color, ...]:
        return self.fill_colors + self.stroke_colors

    @property
    def kind(self) -> str:
        return "stroke" if self.has_stroke else "fill"
