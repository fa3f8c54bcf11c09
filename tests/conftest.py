import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from asciimind.map_components.document import Document
from asciimind.map_components.node import Node


@pytest.fixture
def document() -> Document:
    return Document()


@pytest.fixture
def empty_document() -> Document:
    return Document(with_root=False)


@pytest.fixture
def centered():
    """Factory for nodes positioned by their center point."""

    def make(node_id: str, cx: float, cy: float, text: str = "n") -> Node:
        node = Node(node_id, text)
        node.x = cx - node.width / 2
        node.y = cy - node.height / 2
        return node

    return make
