from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set, Tuple

from .document import Document


@dataclass
class DiffResult:
    added_nodes: List[str]
    removed_nodes: List[str]
    changed_nodes: List[Tuple[str, str, str]]
    moved_nodes: List[str]
    added_edges: List[Tuple[str, str]]
    removed_edges: List[Tuple[str, str]]

    def has_changes(self) -> bool:
        return any(
            [
                self.added_nodes,
                self.removed_nodes,
                self.changed_nodes,
                self.moved_nodes,
                self.added_edges,
                self.removed_edges,
            ]
        )

    def summary(self) -> str:
        parts = []
        if self.added_nodes or self.removed_nodes:
            parts.append(f"+{len(self.added_nodes)} -{len(self.removed_nodes)} nodes")
        if self.changed_nodes:
            parts.append(f"{len(self.changed_nodes)} edited")
        if self.added_edges or self.removed_edges:
            parts.append(f"+{len(self.added_edges)} -{len(self.removed_edges)} links")
        return ", ".join(parts) or "no changes"


def _edge_set(document: Document) -> Set[Tuple[str, str]]:
    return {(edge.source_id, edge.target_id) for edge in document.edges}


def diff(document_a: Document, document_b: Document) -> DiffResult:
    nodes_a = document_a.nodes
    nodes_b = document_b.nodes

    added_nodes = sorted(set(nodes_b) - set(nodes_a))
    removed_nodes = sorted(set(nodes_a) - set(nodes_b))
    changed_nodes: List[Tuple[str, str, str]] = []
    moved_nodes: List[str] = []

    for node_id in sorted(set(nodes_a) & set(nodes_b)):
        node_a = nodes_a[node_id]
        node_b = nodes_b[node_id]
        if node_a.text != node_b.text:
            changed_nodes.append((node_id, node_a.text, node_b.text))
        if (node_a.x, node_a.y) != (node_b.x, node_b.y):
            moved_nodes.append(node_id)

    edges_a = _edge_set(document_a)
    edges_b = _edge_set(document_b)

    return DiffResult(
        added_nodes=added_nodes,
        removed_nodes=removed_nodes,
        changed_nodes=changed_nodes,
        moved_nodes=moved_nodes,
        added_edges=sorted(edges_b - edges_a),
        removed_edges=sorted(edges_a - edges_b),
    )
