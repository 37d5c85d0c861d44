"""Component variants: parse ``Size=32, Variant=Filled`` style variant names."""

from __future__ import annotations

import re
from dataclasses import dataclass

from iconguard.engine.policies import IconPolicy
from iconguard.models.nodes import ContainerNode

OUTLINED = "(Def) Outlined"
FILLED = "Filled"
VARIANT_TYPES = (OUTLINED, FILLED)

_SIZE_PATTERN = re.compile(r"Size=(\d+)")
_VARIANT_PATTERN = re.compile(r"Variant=(.+)")


@dataclass(frozen=True)
class IconVariant:
    node: ContainerNode
    # None when the name carries no Size property
    size: int | None
    variant_type: str | None
    label: str

    @property
    def container(self):
        """First child of the variant; by convention the container frame."""
        return self.node.children[0] if self.node.children else None

    @property
    def content_container(self) -> ContainerNode | None:
        """The container, if it is a frame-like node holding children."""
        container = self.container
        if isinstance(container, ContainerNode) and container.children:
            return container
        return None


def variant_name(size: float, variant_type: str) -> str:
    return f"Size={size:g}, Variant={variant_type}"


def parse_variant(node: ContainerNode) -> IconVariant:
    size_match = _SIZE_PATTERN.search(node.name)
    type_match = _VARIANT_PATTERN.search(node.name)
    size = int(size_match.group(1)) if size_match else None
    variant_type = type_match.group(1) if type_match else None
    return IconVariant(
        node=node,
        size=size,
        variant_type=variant_type,
        label=f"{variant_type or 'Unknown'}, {size}px",
    )


def parse_variants(component_set: ContainerNode) -> list[IconVariant]:
    return [parse_variant(c) for c in component_set.children if isinstance(c, ContainerNode)]


def measurable_variants(variants: list[IconVariant], policy: IconPolicy) -> list[IconVariant]:
    """Variants whose content is measured: required sizes with something inside."""
    return [v for v in variants if v.size in policy.required_sizes and v.node.children]
