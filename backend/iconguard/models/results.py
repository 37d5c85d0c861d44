"""Validation output models. Serialized with camelCase keys for the UI."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class _UiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidationError(_UiModel):
    message: str
    node: str = ""


class ValidationWarning(_UiModel):
    message: str
    node: str = ""
    can_proceed: bool = True


class ValidationInformation(_UiModel):
    message: str
    node: str = ""


class EdgeDistances(_UiModel):
    left: float
    top: float
    right: float
    bottom: float


class VectorPositionInfo(_UiModel):
    name: str
    x: float
    y: float
    relative_x: float
    relative_y: float
    width: float
    height: float
    distance_from_edges: EdgeDistances
    stroke_weight: float | None = None
    is_in_frame: bool = False
    parent_frame_name: str | None = None
    layer_path: list[str] = Field(default_factory=list)


class ValidationResult(_UiModel):
    errors: list[ValidationError] = Field(default_factory=list)
    warnings: list[ValidationWarning] = Field(default_factory=list)
    information: list[ValidationInformation] = Field(default_factory=list)
    vector_positions: list[VectorPositionInfo] = Field(default_factory=list)

    @computed_field(alias="isValid")  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.errors
