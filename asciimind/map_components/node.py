from typing import List, Optional, Tuple

from .sizing import calculate_node_size, wrap_text


class Node:
    def __init__(
        self,
        node_id: str,
        text: str,
        x: float = 0.0,
        y: float = 0.0,
        *,
        parent_id: Optional[str] = None,
        color: Optional[str] = None,
        links: Optional[List[str]] = None,
    ) -> None:
        self.id = node_id
        self.x = float(x)
        self.y = float(y)
        self.parent_id = parent_id
        self.color = color
        self.links: List[str] = list(links) if links else []
        self._width = 0
        self._height = 0
        self._text = ""
        self.text = text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._width, self._height = calculate_node_size(value)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def lines(self) -> List[str]:
        return wrap_text(self._text)

    @property
    def bottom(self) -> float:
        return self.y + self._height

    def center(self) -> Tuple[float, float]:
        return self.x + self._width / 2, self.y + self._height / 2

    def __repr__(self) -> str:
        return f"Node[{self.id}: {self._text!r} at ({self.x:.1f}, {self.y:.1f})]"
