"""Design-system policies for icon templates and icon components.

A policy fixes the container sizes it accepts, the safety zone, the stroke
width table and which optional checks apply. The container size itself is
always the validated frame's declared width.

Master policies validate the single master frame an icon is drawn in.
Component policies validate the published component (set): every size
variant and the maximum size of the shapes inside it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChildSizeLimit:
    """Largest allowed width/height of one shape inside a variant."""

    stroke: float
    fill: float

    def for_kind(self, kind: str) -> float:
        return self.fill if kind == "fill" else self.stroke


@dataclass(frozen=True)
class IconPolicy:
    name: str
    allowed_sizes: tuple[float, ...]
    safety_zone: float
    required_stroke_width: float = 2.0
    # Accepted with a warning; empty means anything but the required width errors
    tolerated_stroke_widths: tuple[float, ...] = ()
    requires_color_pair: bool = False
    reports_subpixel: bool = False

    # --- Component policies ---
    # Sizes that must exist per variant type and get their content measured
    required_sizes: tuple[float, ...] = ()
    child_size_limits: Mapping[float, ChildSizeLimit] = field(default_factory=dict, hash=False)
    # Shapes are flattened to fills before publishing; groups and frames are measured too
    outlined_children: bool = False

    def max_content_size(self, container_size: float) -> float:
        return container_size - self.safety_zone * 2


FUNCTIONAL = IconPolicy(
    name="functional",
    allowed_sizes=(32, 24, 20),
    safety_zone=2,
    tolerated_stroke_widths=(1.75, 1.5),
    reports_subpixel=True,
)

ILLUSTRATIVE = IconPolicy(
    name="illustrative",
    allowed_sizes=(64,),
    safety_zone=4,
    requires_color_pair=True,
)

COMPONENT_SET = IconPolicy(
    name="component_set",
    allowed_sizes=(32, 28, 24, 20, 16, 14, 12),
    safety_zone=2,
    required_sizes=(32, 24, 20),
    child_size_limits={
        32: ChildSizeLimit(stroke=26, fill=28),
        28: ChildSizeLimit(stroke=22, fill=24),
        24: ChildSizeLimit(stroke=18, fill=20),
        20: ChildSizeLimit(stroke=14, fill=16),
        16: ChildSizeLimit(stroke=10, fill=12),
        14: ChildSizeLimit(stroke=8, fill=10),
        12: ChildSizeLimit(stroke=6, fill=8),
    },
)

ILLUSTRATIVE_COMPONENT = IconPolicy(
    name="illustrative_component",
    allowed_sizes=(64,),
    safety_zone=4,
    required_sizes=(64,),
    child_size_limits={64: ChildSizeLimit(stroke=54, fill=56)},
    outlined_children=True,
)

POLICIES: dict[str, IconPolicy] = {p.name: p for p in (FUNCTIONAL, ILLUSTRATIVE)}
COMPONENT_POLICIES: dict[str, IconPolicy] = {p.name: p for p in (COMPONENT_SET, ILLUSTRATIVE_COMPONENT)}


def detect_policy(size: float) -> IconPolicy | None:
    """Pick the master policy whose allowed sizes include ``size``."""
    for policy in POLICIES.values():
        if size in policy.allowed_sizes:
            return policy
    return None
