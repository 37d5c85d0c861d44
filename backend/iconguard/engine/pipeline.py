"""Validation runner: runs policy checks in dependency order with short-circuiting."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from iconguard.engine.config import ValidatorConfig
from iconguard.engine.context import ValidationContext
from iconguard.engine.extractor import BoundsResolver
from iconguard.engine.policies import (
    COMPONENT_SET,
    FUNCTIONAL,
    ILLUSTRATIVE,
    ILLUSTRATIVE_COMPONENT,
    IconPolicy,
    detect_policy,
)
from iconguard.engine.registry import CheckRegistry, get_registry
from iconguard.models.nodes import ContainerNode
from iconguard.models.results import ValidationError, ValidationResult
from iconguard.utils.formatting import format_number, px

logger = logging.getLogger(__name__)

_CHECK_PACKAGES = ("stage0", "stage1", "stage2")


def register_checks() -> None:
    """Import all check modules so @check decorators fire."""
    for stage_name in _CHECK_PACKAGES:
        package = importlib.import_module(f"iconguard.engine.{stage_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"iconguard.engine.{stage_name}.{module_name}")


class PolicyValidator:
    """Runs every check tagged for one policy against a master frame."""

    def __init__(
        self,
        policy: IconPolicy,
        registry: CheckRegistry | None = None,
        config: ValidatorConfig | None = None,
        resolver: BoundsResolver | None = None,
    ) -> None:
        if registry is None:
            register_checks()
        self.policy = policy
        self.registry = registry or get_registry()
        self.config = config or ValidatorConfig()
        self.resolver = resolver or BoundsResolver()

    def run(self, ctx: ValidationContext) -> ValidationContext:
        """Run the policy's checks on ``ctx`` until one halts."""
        start = time.perf_counter()
        ordered = self.registry.for_policy(self.policy.name)

        for spec in ordered:
            if ctx.halted:
                break
            t0 = time.perf_counter()
            spec.fn(ctx)
            ctx.completed_checks.append(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.2fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Validated %s as %s: %d/%d checks, %d errors, %d warnings in %.1fms%s",
            ctx.frame.name,
            self.policy.name,
            len(ctx.completed_checks),
            len(ordered),
            len(ctx.errors),
            len(ctx.warnings),
            total,
            f" (stopped at {ctx.halted_by})" if ctx.halted else "",
        )
        return ctx

    def validate(self, frame: ContainerNode) -> ValidationResult:
        ctx = ValidationContext(
            frame=frame,
            policy=self.policy,
            config=self.config,
            resolver=self.resolver,
        )
        return self.run(ctx).to_result()


class FunctionalMasterValidator(PolicyValidator):
    """Functional master templates: 32/24/20px, 2px safety zone."""

    def __init__(self, **kwargs) -> None:
        super().__init__(FUNCTIONAL, **kwargs)


class IllustrativeMasterValidator(PolicyValidator):
    """Illustrative master templates: 64px, 4px safety zone, black + red."""

    def __init__(self, **kwargs) -> None:
        super().__init__(ILLUSTRATIVE, **kwargs)


class ComponentSetValidator(PolicyValidator):
    """Published functional component sets: size variants and per-size shape limits."""

    def __init__(self, **kwargs) -> None:
        super().__init__(COMPONENT_SET, **kwargs)


class IllustrativeComponentValidator(PolicyValidator):
    """Published illustrative components: 64px, shapes within 56px."""

    def __init__(self, **kwargs) -> None:
        super().__init__(ILLUSTRATIVE_COMPONENT, **kwargs)


class MasterIconValidator:
    """Detect the icon type from the frame width and delegate."""

    def __init__(self, **kwargs) -> None:
        self._validators: dict[str, PolicyValidator] = {
            FUNCTIONAL.name: FunctionalMasterValidator(**kwargs),
            ILLUSTRATIVE.name: IllustrativeMasterValidator(**kwargs),
        }

    def validate(self, frame: ContainerNode) -> ValidationResult:
        policy = detect_policy(frame.width)
        if policy is None:
            valid = " or ".join(
                f"{', '.join(px(s) for s in v.policy.allowed_sizes)} ({name})"
                for name, v in self._validators.items()
            )
            message = (
                f"Frame size {format_number(frame.width)}x{format_number(frame.height)}px "
                f"is not a valid master icon size<br>Valid sizes: {valid}"
            )
            logger.info("Rejected %s: unsupported size %s", frame.name, frame.width)
            return ValidationResult(errors=[ValidationError(message=message, node=frame.name)])
        return self._validators[policy.name].validate(frame)
