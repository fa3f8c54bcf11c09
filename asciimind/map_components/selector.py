from typing import List, Optional, Tuple

from .core import Direction
from .document import Document
from .node import Node

PERPENDICULAR_WEIGHT = 2.0


def _direction_distances(
    dx: float, dy: float, rel_x: float, rel_y: float
) -> Optional[Tuple[float, float]]:
    if dx != 0:
        if (dx > 0 and rel_x > 0) or (dx < 0 and rel_x < 0):
            return abs(rel_x), abs(rel_y)
        return None
    if dy != 0:
        if (dy > 0 and rel_y > 0) or (dy < 0 and rel_y < 0):
            return abs(rel_y), abs(rel_x)
    return None


def direction_score(origin: Node, candidate: Node, dx: float, dy: float) -> Optional[float]:
    """Score ``candidate`` for a move from ``origin``; lower is better.

    Returns None when the candidate's center is not strictly on the
    requested side of the origin's center.
    """
    origin_x, origin_y = origin.center()
    cand_x, cand_y = candidate.center()
    distances = _direction_distances(dx, dy, cand_x - origin_x, cand_y - origin_y)
    if distances is None:
        return None
    axial, perpendicular = distances
    return perpendicular * PERPENDICULAR_WEIGHT + axial


def find_in_direction(document: Document, dx: float, dy: float) -> Optional[Node]:
    current = document.selected_node()
    if current is None:
        return None

    best: Optional[Node] = None
    best_score = 0.0
    for node in document.nodes.values():
        if node.id == current.id:
            continue
        score = direction_score(current, node, dx, dy)
        if score is None:
            continue
        if best is None or score < best_score:
            best = node
            best_score = score
    return best


def select_in_direction(document: Document, dx: float, dy: float) -> Optional[str]:
    best = find_in_direction(document, dx, dy)
    if best is None:
        return None
    document.selected = best.id
    return best.id


def select_toward(document: Document, direction: Direction) -> Optional[str]:
    return select_in_direction(document, direction.dx, direction.dy)


def _cycle_key(node_id: str) -> Tuple[int, int, str]:
    if node_id.isdigit():
        return (0, int(node_id), node_id)
    return (1, 0, node_id)


def cycle_order(document: Document) -> List[str]:
    return sorted(document.nodes, key=_cycle_key)


def _step(document: Document, offset: int) -> Optional[str]:
    ids = cycle_order(document)
    if not ids:
        return None
    try:
        index = ids.index(document.selected)
    except ValueError:
        index = -1 if offset > 0 else 0
    document.selected = ids[(index + offset) % len(ids)]
    return document.selected


def select_next(document: Document) -> Optional[str]:
    return _step(document, 1)


def select_previous(document: Document) -> Optional[str]:
    return _step(document, -1)
