"""Tests for child/sibling placement, push-down and branch colors."""

import pytest

from asciimind.errors import ConfigurationError
from asciimind.map_components.core import DEFAULT_PALETTE, HORIZONTAL_SPACING, ROOT_ID, VERTICAL_SPACING
from asciimind.map_components.diff import diff
from asciimind.map_components.document import Document
from asciimind.map_components.edge import Edge
from asciimind.map_components.layout import LayoutEngine


def _vertical_overlap(a, b) -> bool:
    return a.y < b.bottom and b.y < a.bottom


class TestPlaceChild:
    def test_first_child_aligns_with_parent(self, document: Document) -> None:
        layout = LayoutEngine(document)
        root = document.root
        child = layout.place_child(root, "Child")
        assert child.id == "1"
        assert child.x == root.x + root.width + HORIZONTAL_SPACING
        assert child.y == root.y
        assert child.parent_id == ROOT_ID
        assert document.edges == [Edge(ROOT_ID, "1")]
        assert document.selected == "1"

    def test_next_child_goes_below_lowest_child(self, document: Document) -> None:
        layout = LayoutEngine(document)
        root = document.root
        first = layout.place_child(root, "First\nwith two lines")
        second = layout.place_child(root, "Second")
        assert second.y == first.bottom + VERTICAL_SPACING
        assert second.x == first.x

    def test_push_down_shifts_nodes_at_or_below_insertion(self, document: Document) -> None:
        layout = LayoutEngine(document)
        root = document.root
        branch = layout.place_child(root, "A")
        leaf = layout.place_child(branch, "G")
        below = layout.place_child(root, "B")
        assert below.y == 6.0

        untouched = {node.id: node.y for node in (root, branch, leaf)}
        new_leaf = layout.place_child(branch, "G2")

        assert new_leaf.y == leaf.bottom + VERTICAL_SPACING == 6.0
        assert below.y == 6.0 + new_leaf.height + VERTICAL_SPACING
        for node_id, y in untouched.items():
            assert document.nodes[node_id].y == y

    def test_push_down_uses_the_new_node_height(self, document: Document) -> None:
        layout = LayoutEngine(document)
        root = document.root
        layout.place_child(root, "A")
        layout.place_child(root, "B")
        tall_parent = document.nodes["1"]
        layout.place_child(tall_parent, "x")
        before = document.nodes["2"].y
        tall = layout.place_child(tall_parent, "line one\nline two\nline three")
        assert tall.height == 5
        assert document.nodes["2"].y == before + tall.height + VERTICAL_SPACING

    @pytest.mark.parametrize("count", [1, 2, 5, 9])
    def test_siblings_never_overlap_vertically(self, document: Document, count: int) -> None:
        layout = LayoutEngine(document)
        root = document.root
        for index in range(count):
            text = "\n".join(["line"] * (index % 3 + 1))
            layout.place_child(root, text)
        children = document.children_of(ROOT_ID)
        assert len(children) == count
        for i, a in enumerate(children):
            for b in children[i + 1:]:
                assert not _vertical_overlap(a, b)

    def test_rejects_negative_spacing(self, document: Document) -> None:
        with pytest.raises(ConfigurationError):
            LayoutEngine(document, vertical_spacing=-1)


class TestPlaceSibling:
    def test_sibling_stacks_under_reference(self, document: Document) -> None:
        layout = LayoutEngine(document)
        branch = layout.place_child(document.root, "Branch")
        leaf = layout.place_child(branch, "Leaf")
        sibling = layout.place_sibling(leaf, "Leaf 2")
        assert sibling.x == leaf.x
        assert sibling.y == leaf.bottom + VERTICAL_SPACING
        assert sibling.parent_id == branch.id
        assert Edge(branch.id, sibling.id) in document.edges
        assert document.selected == sibling.id

    def test_sibling_pushes_lower_nodes_down(self, document: Document) -> None:
        layout = LayoutEngine(document)
        first = layout.place_child(document.root, "First")
        second = layout.place_child(document.root, "Second")
        before = second.y
        inserted = layout.place_sibling(first, "Inserted")
        assert inserted.y == first.bottom + VERTICAL_SPACING == before
        assert second.y == before + inserted.height + VERTICAL_SPACING

    def test_sibling_of_root_is_a_child(self) -> None:
        via_sibling = Document()
        via_child = Document()
        LayoutEngine(via_sibling).place_sibling(via_sibling.root, "x")
        LayoutEngine(via_child).place_child(via_child.root, "x")

        assert not diff(via_sibling, via_child).has_changes()
        assert via_sibling.edges == via_child.edges
        assert via_sibling.selected == via_child.selected
        assert via_sibling.next_color_index == via_child.next_color_index
        for node_id, node in via_sibling.nodes.items():
            other = via_child.nodes[node_id]
            assert (node.parent_id, node.color, node.links) == (other.parent_id, other.color, other.links)


class TestColors:
    def test_root_children_cycle_through_palette(self, document: Document) -> None:
        layout = LayoutEngine(document)
        colors = [layout.place_child(document.root, f"c{k}").color for k in range(12)]
        assert colors == [DEFAULT_PALETTE[k % len(DEFAULT_PALETTE)] for k in range(12)]

    def test_siblings_of_root_children_take_new_colors(self, document: Document) -> None:
        layout = LayoutEngine(document)
        first = layout.place_child(document.root, "a")
        second = layout.place_sibling(first, "b")
        assert first.color == DEFAULT_PALETTE[0]
        assert second.color == DEFAULT_PALETTE[1]

    def test_descendants_inherit_branch_color(self, document: Document) -> None:
        layout = LayoutEngine(document)
        layout.place_child(document.root, "a")
        branch = layout.place_child(document.root, "b")
        child = layout.place_child(branch, "b.1")
        grandchild = layout.place_child(child, "b.1.1")
        sibling = layout.place_sibling(child, "b.2")
        assert branch.color == DEFAULT_PALETTE[1]
        assert child.color == grandchild.color == sibling.color == branch.color

    def test_inconsistent_colors_are_inherited_as_is(self, document: Document) -> None:
        layout = LayoutEngine(document)
        branch = layout.place_child(document.root, "a")
        branch.color = "#123456"
        assert layout.place_child(branch, "child").color == "#123456"


class TestPlaceFree:
    def test_first_node_of_empty_document_becomes_root(self, empty_document: Document) -> None:
        node = LayoutEngine(empty_document).place_free("Fresh")
        assert node.id == ROOT_ID
        assert empty_document.selected == ROOT_ID
        assert empty_document.edges == []

    def test_free_node_sits_at_camera_center(self, document: Document) -> None:
        document.camera.x, document.camera.y = 40.0, -8.0
        node = LayoutEngine(document).place_free("Loose")
        assert (node.x, node.y) == (40.0, -8.0)
        assert node.parent_id is None
        assert node.id == "1"
        assert document.edges == []
