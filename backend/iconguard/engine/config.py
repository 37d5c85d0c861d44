"""Validator configuration: numeric knobs for the diagnostic checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from iconguard.config import settings


@dataclass
class ValidatorConfig:
    """Tolerances that only affect informational notices, never pass/fail."""

    # Content width/height may sit this far from the quarter-pixel grid
    subpixel_tolerance: float = field(default_factory=lambda: settings.subpixel_tolerance)
    subpixel_step: float = 0.25

    # Vector pairs closer than this (but not touching) get a notice
    proximity_threshold: float = field(default_factory=lambda: settings.proximity_threshold)

    # Icon frames may sit this far inside the component safety zone
    frame_clearance_tolerance: float = 0.1
