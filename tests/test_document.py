"""Tests for the document model: edges, deletion and selection upkeep."""

import pytest

from asciimind.errors import InvalidOperationError
from asciimind.map_components.core import ROOT_ID, ROOT_TEXT
from asciimind.map_components.document import Document
from asciimind.map_components.edge import Edge
from asciimind.map_components.node import Node


def _add(document: Document, node_id: str, text: str = "n") -> Node:
    return document.add_node(Node(node_id, text))


class TestNewDocument:
    def test_starts_with_selected_root(self, document: Document) -> None:
        assert list(document.nodes) == [ROOT_ID]
        assert document.root.text == ROOT_TEXT
        assert (document.root.x, document.root.y) == (0.0, 0.0)
        assert document.selected == ROOT_ID
        assert document.next_id == 1
        assert document.edges == []

    def test_allocate_id_is_monotonic_and_skips_taken_ids(self, document: Document) -> None:
        _add(document, "2")
        assert document.allocate_id() == "1"
        assert document.allocate_id() == "3"
        assert document.next_id == 4

    def test_add_node_rejects_duplicate_ids(self, document: Document) -> None:
        with pytest.raises(InvalidOperationError):
            _add(document, ROOT_ID)


class TestEdges:
    def test_add_edge_records_link_on_source(self, document: Document) -> None:
        _add(document, "1")
        document.add_edge(ROOT_ID, "1")
        assert document.edges == [Edge(ROOT_ID, "1")]
        assert document.root.links == ["1"]

    def test_self_link_is_rejected(self, document: Document) -> None:
        with pytest.raises(InvalidOperationError, match="itself"):
            document.add_edge(ROOT_ID, ROOT_ID)
        assert document.edges == []

    def test_duplicate_edge_is_rejected(self, document: Document) -> None:
        _add(document, "1")
        document.add_edge(ROOT_ID, "1")
        with pytest.raises(InvalidOperationError, match="already exists"):
            document.add_edge(ROOT_ID, "1")
        assert len(document.edges) == 1
        assert document.root.links == ["1"]

    def test_reverse_edge_is_a_different_pair(self, document: Document) -> None:
        _add(document, "1")
        document.add_edge(ROOT_ID, "1")
        document.add_edge("1", ROOT_ID)
        assert len(document.edges) == 2

    def test_dangling_edges_are_stored_but_not_resolved(self, document: Document) -> None:
        _add(document, "1")
        document.add_edge(ROOT_ID, "1")
        document.add_edge(ROOT_ID, "ghost")
        resolved = [(source.id, target.id) for source, target in document.resolved_edges()]
        assert resolved == [(ROOT_ID, "1")]
        assert len(document.edges) == 2


class TestDeletion:
    def _populate(self, document: Document) -> None:
        for node_id in ("1", "2", "3"):
            _add(document, node_id)
        document.add_edge(ROOT_ID, "1")
        document.add_edge(ROOT_ID, "2")
        document.add_edge("1", "3")
        document.add_edge("2", "1")

    def test_root_cannot_be_deleted(self, document: Document) -> None:
        with pytest.raises(InvalidOperationError, match="root"):
            document.delete_node(ROOT_ID)
        assert ROOT_ID in document

    def test_missing_node_is_not_an_error(self, document: Document) -> None:
        assert document.delete_node("404") is False
        assert len(document) == 1

    def test_removes_exactly_the_touching_edges(self, document: Document) -> None:
        self._populate(document)
        assert document.delete_node("1") is True
        assert "1" not in document
        assert document.edges == [Edge(ROOT_ID, "2")]
        assert document.root.links == ["2"]
        assert document.nodes["2"].links == []
        assert set(document.nodes) == {ROOT_ID, "2", "3"}

    def test_does_not_cascade_to_descendants(self, document: Document) -> None:
        self._populate(document)
        document.nodes["3"].parent_id = "1"
        document.delete_node("1")
        assert document.nodes["3"].parent_id == "1"
        assert document.get(document.nodes["3"].parent_id) is None

    def test_selection_moves_when_selected_node_is_deleted(self, document: Document) -> None:
        self._populate(document)
        document.selected = "2"
        document.delete_node("2")
        assert document.selected in document.nodes

    def test_selection_is_kept_when_another_node_is_deleted(self, document: Document) -> None:
        self._populate(document)
        document.selected = "3"
        document.delete_node("2")
        assert document.selected == "3"

    def test_selection_clears_when_document_empties(self, empty_document: Document) -> None:
        _add(empty_document, "5")
        empty_document.selected = "5"
        empty_document.delete_node("5")
        assert empty_document.selected is None
        assert empty_document.selected_node() is None
