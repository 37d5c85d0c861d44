"""ValidationContext: the single mutable state object flowing through all checks.

Created fresh for every ``validate()`` call and discarded afterwards; the
only thing that leaves it is the ``ValidationResult`` built at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from iconguard.engine.config import ValidatorConfig
from iconguard.engine.extractor import BoundsResolver
from iconguard.engine.policies import IconPolicy
from iconguard.engine.variants import IconVariant
from iconguard.models.facts import VectorFact
from iconguard.models.geometry import Bounds
from iconguard.models.nodes import ContainerNode
from iconguard.models.results import (
    ValidationError,
    ValidationInformation,
    ValidationResult,
    ValidationWarning,
    VectorPositionInfo,
)


@dataclass
class ValidationContext:
    frame: ContainerNode
    policy: IconPolicy
    config: ValidatorConfig = field(default_factory=ValidatorConfig)
    resolver: BoundsResolver = field(default_factory=BoundsResolver)

    # --- Populated by structure checks ---
    container: ContainerNode | None = None

    # --- Populated by component structure checks ---
    variants: list[IconVariant] = field(default_factory=list)

    # --- Populated by content checks ---
    facts: list[VectorFact] = field(default_factory=list)
    content_bounds: Bounds | None = None
    # Safety-zone and size errors, reported together behind one note
    placement_errors: list[ValidationError] = field(default_factory=list)

    # --- Findings ---
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    information: list[ValidationInformation] = field(default_factory=list)
    vector_positions: list[VectorPositionInfo] = field(default_factory=list)

    # --- Run metadata ---
    completed_checks: list[str] = field(default_factory=list)
    halted_by: str | None = None

    @property
    def container_size(self) -> float:
        return self.frame.width

    @property
    def node_name(self) -> str:
        return self.frame.name

    @property
    def halted(self) -> bool:
        return self.halted_by is not None

    def error(self, message: str, node: str | None = None) -> None:
        self.errors.append(ValidationError(message=message, node=node or self.node_name))

    def warning(self, message: str) -> None:
        self.warnings.append(ValidationWarning(message=message, node=self.node_name))

    def info(self, message: str) -> None:
        self.information.append(ValidationInformation(message=message, node=self.node_name))

    def halt(self, check_id: str) -> None:
        self.halted_by = check_id

    def to_result(self) -> ValidationResult:
        return ValidationResult(
            errors=list(self.errors),
            warnings=list(self.warnings),
            information=list(self.information),
            vector_positions=list(self.vector_positions),
        )
