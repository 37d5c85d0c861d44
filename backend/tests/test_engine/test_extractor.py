"""Tests for vector geometry extraction and bounds resolution."""

from iconguard.engine.extractor import (
    BoundsResolver,
    collect_leaves,
    extract_vector_facts,
    has_vector_nodes,
)
from iconguard.models.facts import BoundsSource
from iconguard.models.geometry import Bounds
from iconguard.models.nodes import ContainerNode, TextNode
from tests.conftest import BLACK, RED, filled, group, vector


def _container(children, origin: Bounds | None = None) -> ContainerNode:
    return ContainerNode(
        type="FRAME",
        name="Container",
        width=24,
        height=24,
        absolute_bounding_box=origin,
        children=children,
    )


def test_collect_leaves_parent_chain_excludes_root():
    inner = vector(name="Inner")
    outer = group("Outer", [group("Nested", [inner])])
    container = _container([outer, vector(name="Top")])
    leaves = collect_leaves(container)
    assert [n.name for n, _ in leaves] == ["Inner", "Top"]
    assert [p.name for p in leaves[0][1]] == ["Outer", "Nested"]
    assert leaves[1][1] == ()


def test_boolean_operation_and_operands_are_leaves():
    union = vector(
        name="Union",
        type="BOOLEAN_OPERATION",
        children=[vector(name="A"), vector(name="B")],
    )
    leaves = collect_leaves(_container([union]))
    assert [n.name for n, _ in leaves] == ["Union", "A", "B"]
    assert [p.name for p in leaves[1][1]] == ["Union"]


def test_has_vector_nodes():
    assert not has_vector_nodes(_container([group("Empty", []), TextNode(name="t")]))
    assert has_vector_nodes(_container([group("G", [vector()])]))


def test_synthetic_bounds_sum_ancestor_offsets_and_outset_stroke():
    leaf = vector(name="Leaf", x=1, y=2, width=10, height=6, stroke_weight=2)
    container = _container([group("G", [group("H", [leaf], x=3, y=1)], x=2, y=2)])
    (fact,) = extract_vector_facts(container)
    assert fact.bounds_source is BoundsSource.SYNTHETIC
    assert (fact.x, fact.y) == (6, 5)
    assert (fact.relative_x, fact.relative_y) == (1, 2)
    assert fact.bounds == Bounds(x=5, y=4, width=12, height=8)
    assert fact.layer_path == ("G", "H")


def test_synthetic_bounds_fill_only_not_outset():
    (fact,) = extract_vector_facts(_container([filled("F", 4, 4, 8, 8)]))
    assert fact.bounds == Bounds(x=4, y=4, width=8, height=8)
    assert fact.has_fill and not fact.has_stroke


def test_render_bounds_preferred_and_shifted_to_container_space():
    leaf = vector(
        x=3,
        y=3,
        width=18,
        height=18,
        render_bounds=Bounds(x=102, y=202, width=20, height=20),
        bounding_box=Bounds(x=103, y=203, width=18, height=18),
    )
    (fact,) = extract_vector_facts(_container([leaf], origin=Bounds(x=100, y=200, width=24, height=24)))
    assert fact.bounds_source is BoundsSource.RENDER_BOUNDS
    assert fact.bounds == Bounds(x=2, y=2, width=20, height=20)


def test_bounding_box_used_without_render_bounds():
    leaf = vector(bounding_box=Bounds(x=103, y=203, width=18, height=18))
    (fact,) = extract_vector_facts(_container([leaf], origin=Bounds(x=100, y=200, width=24, height=24)))
    assert fact.bounds_source is BoundsSource.BOUNDING_BOX
    assert fact.bounds == Bounds(x=3, y=3, width=18, height=18)


def test_container_without_origin_treated_as_zero():
    leaf = vector(render_bounds=Bounds(x=2, y=2, width=20, height=20))
    (fact,) = extract_vector_facts(_container([leaf]))
    assert fact.bounds == Bounds(x=2, y=2, width=20, height=20)


def test_custom_priority_skips_render_bounds():
    leaf = vector(
        x=3,
        y=3,
        width=18,
        height=18,
        render_bounds=Bounds(x=0, y=0, width=1, height=1),
    )
    resolver = BoundsResolver(priority=[BoundsSource.BOUNDING_BOX])
    assert resolver.priority == (BoundsSource.BOUNDING_BOX, BoundsSource.SYNTHETIC)
    (fact,) = extract_vector_facts(_container([leaf]), resolver)
    assert fact.bounds_source is BoundsSource.SYNTHETIC
    assert fact.bounds == Bounds(x=2, y=2, width=20, height=20)


def test_colors_and_parent_frame():
    leaf = vector(name="Leaf", stroke=RED, fill=BLACK)
    keyline = ContainerNode(type="FRAME", name="Keyline", children=[leaf])
    (fact,) = extract_vector_facts(_container([keyline]))
    assert fact.stroke_colors == (RED,)
    assert fact.fill_colors == (BLACK,)
    assert fact.parent_frame_name == "Keyline"


def test_group_parent_is_not_a_frame():
    (fact,) = extract_vector_facts(_container([group("G", [vector()])]))
    assert fact.parent_frame_name is None


def test_nested_container_named_frame_is_not_parent_frame():
    inner = ContainerNode(type="FRAME", name="Inner container", children=[vector()])
    (fact,) = extract_vector_facts(_container([inner]))
    assert fact.parent_frame_name is None
