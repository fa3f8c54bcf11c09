import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..errors import InvalidOperationError
from .camera import Camera
from .core import DEFAULT_PALETTE, ROOT_ID, ROOT_TEXT
from .edge import Edge
from .node import Node

logger = logging.getLogger(__name__)


class Document:
    """In-memory mind map: nodes keyed by id, edges, camera and selection.

    Relations are stored as ids. Deleting a node never cascades, so every
    reader has to tolerate ids that no longer resolve.
    """

    def __init__(
        self,
        *,
        palette: Sequence[str] = DEFAULT_PALETTE,
        with_root: bool = True,
    ) -> None:
        self.nodes: Dict[str, Node] = {}
        self.edges: List[Edge] = []
        self.camera = Camera()
        self.selected: Optional[str] = None
        self.next_id = 1
        self.palette: List[str] = list(palette)
        self.next_color_index = 0

        if with_root:
            self.nodes[ROOT_ID] = Node(ROOT_ID, ROOT_TEXT, 0.0, 0.0)
            self.selected = ROOT_ID

    @property
    def root(self) -> Optional[Node]:
        return self.nodes.get(ROOT_ID)

    def get(self, node_id: Optional[str]) -> Optional[Node]:
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    def selected_node(self) -> Optional[Node]:
        return self.get(self.selected)

    def children_of(self, parent_id: str) -> List[Node]:
        return [node for node in self.nodes.values() if node.parent_id == parent_id]

    def allocate_id(self) -> str:
        node_id = str(self.next_id)
        self.next_id += 1
        while node_id in self.nodes:
            node_id = str(self.next_id)
            self.next_id += 1
        return node_id

    def next_palette_color(self) -> Optional[str]:
        if not self.palette:
            return None
        color = self.palette[self.next_color_index % len(self.palette)]
        self.next_color_index += 1
        return color

    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise InvalidOperationError(f"Node {node.id} already exists")
        self.nodes[node.id] = node
        return node

    def has_edge(self, source_id: str, target_id: str) -> bool:
        return any(
            edge.source_id == source_id and edge.target_id == target_id for edge in self.edges
        )

    def add_edge(self, source_id: str, target_id: str) -> Edge:
        if source_id == target_id:
            raise InvalidOperationError("Cannot link a node to itself")
        if self.has_edge(source_id, target_id):
            raise InvalidOperationError("Edge already exists")

        edge = Edge(source_id, target_id)
        self.edges.append(edge)
        source = self.nodes.get(source_id)
        if source is not None:
            source.links.append(target_id)
        logger.debug("Created edge %s -> %s", source_id, target_id)
        return edge

    def resolved_edges(self) -> Iterator[Tuple[Node, Node]]:
        for edge in self.edges:
            source = self.nodes.get(edge.source_id)
            target = self.nodes.get(edge.target_id)
            if source is None or target is None:
                continue
            yield source, target

    def push_down(self, threshold_y: float, amount: float) -> List[Node]:
        moved: List[Node] = []
        for node in self.nodes.values():
            if node.y >= threshold_y:
                node.y += amount
                moved.append(node)
        return moved

    def delete_node(self, node_id: str) -> bool:
        if node_id == ROOT_ID:
            raise InvalidOperationError("Cannot delete root node")
        if node_id not in self.nodes:
            return False

        del self.nodes[node_id]
        self.edges = [edge for edge in self.edges if not edge.touches(node_id)]
        for node in self.nodes.values():
            if node_id in node.links:
                node.links = [link for link in node.links if link != node_id]

        if self.selected == node_id:
            self.selected = next(iter(self.nodes), None)

        logger.debug("Deleted node %s; selection is now %s", node_id, self.selected)
        return True

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __repr__(self) -> str:
        return f"Document(nodes={len(self.nodes)}, edges={len(self.edges)}, selected={self.selected!r})"
