"""Tests for directional selection and id-order cycling."""

import pytest

from asciimind.map_components.core import Direction
from asciimind.map_components.document import Document
from asciimind.map_components.node import Node
from asciimind.map_components.selector import (
    cycle_order,
    direction_score,
    select_in_direction,
    select_next,
    select_previous,
    select_toward,
)


@pytest.fixture
def grid(empty_document: Document, centered) -> Document:
    for node_id, cx, cy in (("a", 0, 0), ("b", 5, 0), ("c", 5, 3)):
        empty_document.add_node(centered(node_id, cx, cy))
    empty_document.selected = "a"
    return empty_document


class TestDirectionalSelection:
    def test_prefers_aligned_candidate(self, grid: Document) -> None:
        assert select_in_direction(grid, 1, 0) == "b"
        assert grid.selected == "b"

    def test_perpendicular_offset_costs_double(self, grid: Document, centered) -> None:
        grid.nodes["c"] = centered("c", 3, 0)
        assert select_toward(grid, Direction.RIGHT) == "c"

    def test_score_weights(self, centered) -> None:
        origin = centered("o", 0, 0)
        assert direction_score(origin, centered("t", 4, 2), 1, 0) == 2 * 2 + 4
        assert direction_score(origin, centered("t", 1, -6), 0, -1) == 1 * 2 + 6

    def test_candidates_must_be_strictly_on_that_side(self, empty_document: Document, centered) -> None:
        empty_document.add_node(centered("a", 0, 0))
        empty_document.add_node(centered("above", 0, -5))
        empty_document.selected = "a"
        assert select_toward(empty_document, Direction.RIGHT) is None
        assert select_toward(empty_document, Direction.LEFT) is None
        assert empty_document.selected == "a"
        assert select_toward(empty_document, Direction.UP) == "above"

    def test_nothing_in_direction_keeps_selection(self, grid: Document) -> None:
        assert select_toward(grid, Direction.LEFT) is None
        assert grid.selected == "a"

    def test_down_picks_nearest_below(self, grid: Document) -> None:
        grid.selected = "b"
        assert select_toward(grid, Direction.DOWN) == "c"

    def test_no_selection_is_a_no_op(self, grid: Document) -> None:
        grid.selected = None
        assert select_toward(grid, Direction.RIGHT) is None
        assert grid.selected is None


class TestCycling:
    @pytest.fixture
    def numbered(self, document: Document) -> Document:
        for node_id in ("10", "2", "1", "abc"):
            document.add_node(Node(node_id, node_id))
        return document

    def test_order_is_numeric_then_named(self, numbered: Document) -> None:
        assert cycle_order(numbered) == ["0", "1", "2", "10", "abc"]

    def test_next_wraps_around(self, numbered: Document) -> None:
        numbered.selected = "abc"
        assert select_next(numbered) == "0"
        assert select_next(numbered) == "1"

    def test_previous_wraps_around(self, numbered: Document) -> None:
        assert numbered.selected == "0"
        assert select_previous(numbered) == "abc"
        assert select_previous(numbered) == "10"

    def test_missing_selection_starts_at_an_end(self, numbered: Document) -> None:
        numbered.selected = "gone"
        assert select_next(numbered) == "0"
        numbered.selected = None
        assert select_previous(numbered) == "abc"

    def test_empty_document(self, empty_document: Document) -> None:
        assert select_next(empty_document) is None
        assert select_previous(empty_document) is None
