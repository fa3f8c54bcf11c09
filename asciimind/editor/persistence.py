import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from ..errors import PersistenceError
from ..map_components.camera import Camera
from ..map_components.core import DEFAULT_PALETTE, ROOT_ID
from ..map_components.document import Document
from ..map_components.edge import Edge
from ..map_components.node import Node
from ..map_components.sizing import calculate_node_size

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _number(payload: Mapping[str, Any], key: str, default: float = 0.0) -> float:
    value = payload.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {value!r}.")
    return float(value)


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass
class NodeRecord:
    node_id: str
    text: str
    x: float = 0.0
    y: float = 0.0
    parent_id: Optional[str] = None
    color: Optional[str] = None
    links: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, node_id: str, payload: Mapping[str, Any]) -> "NodeRecord":
        if not isinstance(payload, Mapping):
            raise ValueError(f"Node '{node_id}' must be an object.")
        if "text" not in payload:
            raise ValueError(f"Node '{node_id}' must include 'text'.")
        links = payload.get("links") or []
        if not isinstance(links, list):
            raise ValueError(f"Node '{node_id}' links must be a list.")
        return cls(
            node_id=node_id,
            text=str(payload["text"]),
            x=_number(payload, "x"),
            y=_number(payload, "y"),
            parent_id=_optional_str(payload.get("parent_id")),
            color=_optional_str(payload.get("color")),
            links=[str(link) for link in links],
        )

    @classmethod
    def from_node(cls, node: Node) -> "NodeRecord":
        return cls(
            node_id=node.id,
            text=node.text,
            x=node.x,
            y=node.y,
            parent_id=node.parent_id,
            color=node.color,
            links=list(node.links),
        )

    def to_dict(self) -> Dict[str, Any]:
        width, height = calculate_node_size(self.text)
        return {
            "id": self.node_id,
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "width": width,
            "height": height,
            "parent_id": self.parent_id or "",
            "color": self.color or "",
            "links": list(self.links),
        }

    def to_node(self) -> Node:
        return Node(
            self.node_id,
            self.text,
            self.x,
            self.y,
            parent_id=self.parent_id,
            color=self.color,
            links=self.links,
        )


@dataclass
class DocumentRecord:
    nodes: Dict[str, NodeRecord] = field(default_factory=dict)
    edges: List[Edge] = field(default_factory=list)
    camera_x: float = 0.0
    camera_y: float = 0.0
    camera_zoom: float = 1.0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "DocumentRecord":
        if not isinstance(payload, Mapping):
            raise ValueError("Mind map file must contain a JSON object.")

        nodes_payload = payload.get("nodes") or {}
        if not isinstance(nodes_payload, Mapping):
            raise ValueError("'nodes' must be an object keyed by node id.")
        nodes = {
            str(node_id): NodeRecord.from_dict(str(node_id), node_payload)
            for node_id, node_payload in nodes_payload.items()
        }

        edges_payload = payload.get("edges") or []
        if not isinstance(edges_payload, list):
            raise ValueError("'edges' must be a list.")
        edges: List[Edge] = []
        for edge_payload in edges_payload:
            if not isinstance(edge_payload, Mapping) or "from" not in edge_payload or "to" not in edge_payload:
                raise ValueError("Each edge must include 'from' and 'to'.")
            edges.append(Edge(str(edge_payload["from"]), str(edge_payload["to"])))

        camera_payload = payload.get("camera") or {}
        if not isinstance(camera_payload, Mapping):
            raise ValueError("'camera' must be an object.")

        return cls(
            nodes=nodes,
            edges=edges,
            camera_x=_number(camera_payload, "x"),
            camera_y=_number(camera_payload, "y"),
            camera_zoom=_number(camera_payload, "zoom", 1.0),
        )

    @classmethod
    def from_document(cls, document: Document) -> "DocumentRecord":
        return cls(
            nodes={node_id: NodeRecord.from_node(node) for node_id, node in document.nodes.items()},
            edges=list(document.edges),
            camera_x=document.camera.x,
            camera_y=document.camera.y,
            camera_zoom=document.camera.zoom,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": {node_id: record.to_dict() for node_id, record in self.nodes.items()},
            "edges": [{"from": edge.source_id, "to": edge.target_id} for edge in self.edges],
            "camera": {"x": self.camera_x, "y": self.camera_y, "zoom": self.camera_zoom},
        }

    def to_document(self, previous: Optional[Document] = None) -> Document:
        palette = previous.palette if previous is not None else DEFAULT_PALETTE
        document = Document(palette=palette, with_root=False)

        for node_id, record in self.nodes.items():
            document.nodes[node_id] = record.to_node()

        for edge in self.edges:
            if document.has_edge(edge.source_id, edge.target_id):
                logger.debug("Dropped duplicate edge %s -> %s", edge.source_id, edge.target_id)
                continue
            document.edges.append(edge)

        document.camera = Camera(self.camera_x, self.camera_y, self.camera_zoom)
        document.camera.anchor()

        max_id = 0
        for node_id in document.nodes:
            try:
                max_id = max(max_id, int(node_id))
            except ValueError:
                continue
        document.next_id = max_id + 1

        if previous is not None:
            document.next_color_index = previous.next_color_index
            if previous.selected in document.nodes:
                document.selected = previous.selected
        if document.selected is None and document.nodes:
            document.selected = ROOT_ID if ROOT_ID in document.nodes else next(iter(document.nodes))

        return document


def dump_document(document: Document) -> str:
    return json.dumps(DocumentRecord.from_document(document).to_dict(), indent=2, ensure_ascii=False)


def parse_document(content: str, previous: Optional[Document] = None) -> Document:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise PersistenceError(f"Invalid JSON: {exc}") from exc
    try:
        record = DocumentRecord.from_dict(data)
    except ValueError as exc:
        raise PersistenceError(str(exc)) from exc
    return record.to_document(previous)


def save_document(document: Document, path: PathLike) -> None:
    target = Path(path)
    try:
        target.write_text(dump_document(document), encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to save %s: %s", target, exc)
        raise PersistenceError(f"{target}: {exc.strerror or exc}") from exc
    logger.debug("Saved %d node(s) to %s", len(document.nodes), target)


def load_document(path: PathLike, previous: Optional[Document] = None) -> Document:
    """Read a document from ``path``; ``previous`` is never modified."""
    source = Path(path)
    try:
        content = source.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PersistenceError(f"{source}: not a UTF-8 text file") from exc
    except OSError as exc:
        logger.warning("Failed to load %s: %s", source, exc)
        raise PersistenceError(f"{source}: {exc.strerror or exc}") from exc
    document = parse_document(content, previous)
    logger.debug("Loaded %d node(s) from %s", len(document.nodes), source)
    return document
