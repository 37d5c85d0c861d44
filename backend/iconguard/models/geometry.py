"""Primitive geometry and paint models shared by every layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Bounds(BaseModel):
    """Axis-aligned rectangle in a single coordinate space."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def translated(self, dx: float, dy: float) -> Bounds:
        return Bounds(x=self.x + dx, y=self.y + dy, width=self.width, height=self.height)

    def outset(self, amount: float) -> Bounds:
        """Grow the box by ``amount`` on every side."""
        if amount == 0:
            return self
        return Bounds(
            x=self.x - amount,
            y=self.y - amount,
            width=self.width + 2 * amount,
            height=self.height + 2 * amount,
        )


class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0, le=1)
    g: float = Field(ge=0, le=1)
    b: float = Field(ge=0, le=1)

    def is_black_or_dark_gray(self) -> bool:
        return self.r < 0.2 and self.g < 0.2 and self.b < 0.2

    def is_red(self) -> bool:
        return self.r > 0.7 and self.g < 0.3 and self.b < 0.3


class Paint(BaseModel):
    """A single fill or stroke entry. Only SOLID paints carry a color, visible or not."""

    model_config = ConfigDict(frozen=True)

    type: str = "SOLID"
    color: Color | None = None
    visible: bool = True

    @property
    def solid_color(self) -> Color | None:
        if self.type == "SOLID" and self.color is not None:
            return self.color
        return None
