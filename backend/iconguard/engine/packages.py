"""Spatial package classification.

An icon belongs to the named layout frame it overlaps most. Overlap area
rather than containment means icons dragged partly outside a frame still
classify; exact ties go to the alphabetically first name so batch exports
are reproducible.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from iconguard.config import settings
from iconguard.models.geometry import Bounds
from iconguard.models.nodes import ContainerNode, ShapeNode, TextNode
from iconguard.models.packages import PackageAssignment, PackageFrame, PackageOverlap
from iconguard.utils.geometry import overlap_area

logger = logging.getLogger(__name__)

UNKNOWN_PACKAGE = "unknown"


def detect_package_frames(
    candidates: Iterable[ShapeNode | ContainerNode | TextNode],
    known_names: Sequence[str] | None = None,
) -> list[PackageFrame]:
    """Frames whose name exactly matches a known package name, in input order."""
    names = set(known_names if known_names is not None else settings.package_names)
    frames = [
        PackageFrame(name=node.name, bounds=node.bounds)
        for node in candidates
        if isinstance(node, ContainerNode) and node.is_frame and node.name in names
    ]
    logger.debug("Detected %d package frames: %s", len(frames), [f.name for f in frames])
    return frames


def assign_package_with_details(icon_bounds: Bounds, frames: Sequence[PackageFrame]) -> PackageAssignment:
    """Winner plus every frame with positive overlap, for diagnostics."""
    if not frames:
        return PackageAssignment()

    max_overlap: float = 0
    assigned = UNKNOWN_PACKAGE
    overlapping: list[PackageOverlap] = []

    for frame in frames:
        overlap = overlap_area(icon_bounds, frame.bounds)
        if overlap > 0:
            overlapping.append(PackageOverlap(name=frame.name, overlap=overlap))

        # Zero overlap never takes part in the tie-break
        if overlap > max_overlap or (overlap == max_overlap and overlap > 0 and frame.name < assigned):
            max_overlap = overlap
            assigned = frame.name

    if max_overlap == 0:
        assigned = UNKNOWN_PACKAGE

    if len(overlapping) > 1:
        logger.debug(
            "Icon at (%s, %s) overlaps %d packages, assigned %s",
            icon_bounds.x,
            icon_bounds.y,
            len(overlapping),
            assigned,
        )

    return PackageAssignment(
        package=assigned,
        max_overlap=max_overlap,
        overlapping_packages=overlapping,
    )


def assign_package(icon_bounds: Bounds, frames: Sequence[PackageFrame]) -> str:
    return assign_package_with_details(icon_bounds, frames).package


def classify_icon(
    icon: ShapeNode | ContainerNode,
    candidates: Iterable[ShapeNode | ContainerNode | TextNode],
    known_names: Sequence[str] | None = None,
) -> str:
    """Detect package frames among ``candidates`` and assign ``icon`` to one."""
    return assign_package(icon.bounds, detect_package_frames(candidates, known_names))
