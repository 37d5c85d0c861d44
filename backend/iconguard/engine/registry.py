"""Check registry: every policy check is a standalone function registered via decorator.

Usage:
    @check(id="V1.02", stage=Stage.CONTENT, dependencies=["V1.01"], tags={"functional"})
    def stroke_width(ctx: ValidationContext) -> None:
        for fact in ctx.facts:
            ...

Tags name the policies a check applies to. Adding a new check = creating one
file with the decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from iconguard.engine.context import ValidationContext

logger = logging.getLogger(__name__)

ALL_POLICIES = frozenset({"functional", "illustrative"})


class Stage(enum.IntEnum):
    STRUCTURE = 0
    CONTENT = 1
    DIAGNOSTICS = 2


@dataclass
class CheckSpec:
    id: str
    stage: Stage
    fn: Callable[["ValidationContext"], None]
    dependencies: list[str] = field(default_factory=list)
    tags: frozenset[str] = ALL_POLICIES
    description: str = ""

    def applies_to(self, policy_name: str) -> bool:
        return policy_name in self.tags


class CheckRegistry:
    """Singleton registry of all checks."""

    def __init__(self) -> None:
        self._checks: dict[str, CheckSpec] = {}

    def register(self, spec: CheckSpec) -> None:
        if spec.id in self._checks:
            raise ValueError(f"Duplicate check ID: {spec.id}")
        self._checks[spec.id] = spec
        logger.debug("Registered check %s (%s)", spec.id, spec.stage.name)

    def get(self, check_id: str) -> CheckSpec:
        return self._checks[check_id]

    def get_stage(self, stage: Stage) -> list[CheckSpec]:
        specs = [s for s in self._checks.values() if s.stage == stage]
        return sorted(specs, key=lambda s: s.id)

    def for_policy(self, policy_name: str) -> list[CheckSpec]:
        """Checks tagged for ``policy_name``, in dependency order."""
        requested = {s.id for s in self._checks.values() if s.applies_to(policy_name)}
        return [s for s in self.resolve_order(requested) if s.id in requested]

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[CheckSpec]:
        """Topological sort respecting dependencies. If requested_ids is None, run all.

        Ties are broken by (stage, id) so the order is stable across runs.
        """
        pool = self._checks
        if requested_ids is not None:
            # Expand with transitive dependencies
            expanded: set[str] = set()
            stack = list(requested_ids)
            while stack:
                cid = stack.pop()
                if cid in expanded:
                    continue
                expanded.add(cid)
                spec = pool.get(cid)
                if spec:
                    stack.extend(spec.dependencies)
            pool = {k: v for k, v in pool.items() if k in expanded}

        def _key(cid: str) -> tuple[int, str]:
            return (pool[cid].stage, cid)

        # Kahn's algorithm
        in_degree: dict[str, int] = {cid: 0 for cid in pool}
        for cid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[cid] += 1

        queue = sorted((cid for cid, d in in_degree.items() if d == 0), key=_key)
        ordered: list[CheckSpec] = []

        while queue:
            cid = queue.pop(0)
            ordered.append(pool[cid])
            for other_id, other_spec in pool.items():
                if cid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort(key=_key)

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._checks)


# Module-level singleton
_registry = CheckRegistry()


def get_registry() -> CheckRegistry:
    return _registry


def check(
    *,
    id: str,
    stage: Stage,
    dependencies: list[str] | None = None,
    tags: set[str] | None = None,
    description: str = "",
):
    """Decorator to register a check function."""

    def decorator(fn: Callable[["ValidationContext"], None]):
        spec = CheckSpec(
            id=id,
            stage=stage,
            fn=fn,
            dependencies=dependencies or [],
            tags=frozenset(tags) if tags else ALL_POLICIES,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
