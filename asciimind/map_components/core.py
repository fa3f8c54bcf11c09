from dataclasses import dataclass
from enum import Enum
from typing import Tuple


ROOT_ID = "0"
ROOT_TEXT = "Root Idea"

MAX_TEXT_WIDTH = 22
MIN_BOX_WIDTH = 10

HORIZONTAL_SPACING = 5.0
VERTICAL_SPACING = 3.0

MIN_ZOOM = 0.25
MAX_ZOOM = 4.0

DEFAULT_PALETTE: Tuple[str, ...] = (
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#FFA07A",
    "#98D8C8",
    "#F7DC6F",
    "#BB8FCE",
    "#85C1E2",
)


class Direction(Enum):

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class BoxChars:

    top_left: str = "╭"
    top_right: str = "╮"
    bottom_left: str = "╰"
    bottom_right: str = "╯"

    horizontal: str = "─"
    vertical: str = "│"

    @classmethod
    def for_style(cls, style: str) -> "BoxChars":
        key = style.lower().strip()
        if key in {"rounded", "normal"}:
            return cls()
        if key in {"heavy", "selected"}:
            return cls(
                top_left="┏",
                top_right="┓",
                bottom_left="┗",
                bottom_right="┛",
                horizontal="━",
                vertical="┃",
            )
        if key in {"ascii", "plain"}:
            return cls(
                top_left="+",
                top_right="+",
                bottom_left="+",
                bottom_right="+",
                horizontal="-",
                vertical="|",
            )
        raise ValueError(f"Unknown box style: {style}")


@dataclass(frozen=True)
class LineChars:

    horizontal: str = "─"
    vertical: str = "│"
    rising: str = "╱"
    falling: str = "╲"

    marker: str = "●"
    selection: str = "▶"

    def for_slope(self, dx: int, dy: int) -> str:
        abs_dx = abs(dx)
        abs_dy = abs(dy)
        if abs_dx > abs_dy * 2:
            return self.horizontal
        if abs_dy > abs_dx * 2:
            return self.vertical
        if (dx > 0 > dy) or (dx < 0 < dy):
            return self.rising
        return self.falling
