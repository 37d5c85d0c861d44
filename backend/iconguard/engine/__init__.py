"""iconguard geometry validation and package classification engine."""

from iconguard.engine.registry import check, Stage, get_registry
from iconguard.engine.context import ValidationContext
from iconguard.engine.extractor import BoundsResolver, extract_vector_facts
from iconguard.engine.packages import assign_package, assign_package_with_details, detect_package_frames
from iconguard.engine.pipeline import (
    ComponentSetValidator,
    IllustrativeComponentValidator,
    FunctionalMasterValidator,
    IllustrativeMasterValidator,
    MasterIconValidator,
    PolicyValidator,
)

__all__ = [
    "check",
    "Stage",
    "get_registry",
    "ValidationContext",
    "BoundsResolver",
    "extract_vector_facts",
    "assign_package",
    "assign_package_with_details",
    "detect_package_frames",
    "ComponentSetValidator",
    "FunctionalMasterValidator",
    "IllustrativeComponentValidator",
    "IllustrativeMasterValidator",
    "MasterIconValidator",
    "PolicyValidator",
]
