import logging
from typing import Optional

from ..errors import ConfigurationError, InvalidOperationError
from .core import HORIZONTAL_SPACING, ROOT_ID, VERTICAL_SPACING
from .document import Document
from .node import Node

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Places new nodes relative to an existing one.

    Children grow to the right of their parent and stack downward; siblings
    stack under the reference node. Room is made by pushing every node at or
    below the insertion row down. Only the y axis is checked, so branches
    that share a row can still collide in x.
    """

    def __init__(
        self,
        document: Document,
        *,
        horizontal_spacing: float = HORIZONTAL_SPACING,
        vertical_spacing: float = VERTICAL_SPACING,
    ) -> None:
        for name, value in (
            ("horizontal_spacing", horizontal_spacing),
            ("vertical_spacing", vertical_spacing),
        ):
            if not isinstance(value, (int, float)) or value < 0:
                raise ConfigurationError(f"{name} must be a non-negative number.")
        self._document = document
        self.h_spacing = float(horizontal_spacing)
        self.v_spacing = float(vertical_spacing)

    def place_child(self, parent: Node, text: str) -> Node:
        document = self._document
        node = Node(document.allocate_id(), text, parent_id=parent.id)
        node.x = parent.x + parent.width + self.h_spacing

        children = document.children_of(parent.id)
        if children:
            lowest = max(children, key=lambda child: child.bottom)
            node.y = lowest.bottom + self.v_spacing
            self._make_room(node)
        else:
            node.y = parent.y

        if parent.id == ROOT_ID:
            node.color = document.next_palette_color()
        else:
            node.color = parent.color

        return self._attach(node, parent.id)

    def place_sibling(self, sibling: Node, text: str) -> Node:
        if sibling.id == ROOT_ID:
            return self.place_child(sibling, text)

        document = self._document
        node = Node(document.allocate_id(), text, parent_id=sibling.parent_id)
        node.x = sibling.x
        node.y = sibling.bottom + self.v_spacing
        self._make_room(node)

        if sibling.parent_id == ROOT_ID:
            node.color = document.next_palette_color()
        else:
            node.color = sibling.color

        return self._attach(node, sibling.parent_id)

    def place_free(self, text: str) -> Node:
        document = self._document
        if not document.nodes:
            node_id = ROOT_ID
        else:
            node_id = document.allocate_id()
        x, y = document.camera.viewport_center()
        node = Node(node_id, text, x, y)
        return self._attach(node, None)

    def _make_room(self, node: Node) -> None:
        amount = node.height + self.v_spacing
        moved = self._document.push_down(node.y, amount)
        if moved:
            logger.debug(
                "Pushed %d node(s) at y >= %.1f down by %.1f", len(moved), node.y, amount
            )

    def _attach(self, node: Node, parent_id: Optional[str]) -> Node:
        document = self._document
        document.add_node(node)
        if parent_id is not None:
            try:
                document.add_edge(parent_id, node.id)
            except InvalidOperationError as exc:
                logger.warning("Skipped edge %s -> %s: %s", parent_id, node.id, exc)
        document.selected = node.id
        logger.debug("Placed %r (parent=%s, color=%s)", node, parent_id, node.color)
        return node
