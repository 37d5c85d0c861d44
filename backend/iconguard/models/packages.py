"""Package classification models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iconguard.models.geometry import Bounds


class PackageFrame(BaseModel):
    name: str
    bounds: Bounds


class PackageOverlap(BaseModel):
    name: str
    overlap: float


class PackageAssignment(BaseModel):
    package: str = "unknown"
    max_overlap: float = 0.0
    overlapping_packages: list[PackageOverlap] = Field(default_factory=list)
