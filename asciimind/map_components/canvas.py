from contextlib import contextmanager
from typing import Iterator, List, NamedTuple, Optional

from rich.text import Text

BLANK = " "


class Cell(NamedTuple):
    char: str
    color: Optional[str] = None


class Canvas:
    """Fixed-size grid of colored character cells for one frame.

    Writes outside the grid are clipped. A glyph two columns wide owns the
    cell to its right, which is stored with width 0 and skipped on output.
    """

    def __init__(self, width: int, height: int):
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.grid = [[BLANK for _ in range(self.width)] for _ in range(self.height)]
        self.colors: List[List[Optional[str]]] = [
            [None for _ in range(self.width)] for _ in range(self.height)
        ]
        self.cell_widths = [[1 for _ in range(self.width)] for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def _clear_glyph_at(self, x: int, y: int) -> None:
        width = self.cell_widths[y][x]
        if width == 0:
            base_x = x - 1
            while base_x >= 0 and self.cell_widths[y][base_x] == 0:
                base_x -= 1
            if base_x < 0:
                return
            x = base_x
            width = self.cell_widths[y][x]
        for i in range(max(width, 1)):
            xi = x + i
            if 0 <= xi < self.width:
                self.grid[y][xi] = BLANK
                self.colors[y][xi] = None
                self.cell_widths[y][xi] = 1

    def set(self, x: int, y: int, char: str, color: Optional[str] = None, width: int = 1) -> bool:
        if not self.in_bounds(x, y):
            return False
        if width < 1:
            width = 1
        if width > 1 and not self.in_bounds(x + width - 1, y):
            return False

        for i in range(width):
            self._clear_glyph_at(x + i, y)

        self.grid[y][x] = char
        self.colors[y][x] = color
        self.cell_widths[y][x] = width
        for i in range(1, width):
            self.grid[y][x + i] = BLANK
            self.colors[y][x + i] = None
            self.cell_widths[y][x + i] = 0
        return True

    def set_if_blank(self, x: int, y: int, char: str, color: Optional[str] = None) -> bool:
        if not self.is_blank(x, y):
            return False
        return self.set(x, y, char, color)

    def is_blank(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.cell_widths[y][x] == 1 and self.grid[y][x] == BLANK

    def get(self, x: int, y: int) -> str:
        if self.in_bounds(x, y):
            if self.cell_widths[y][x] == 0:
                return BLANK
            return self.grid[y][x]
        return BLANK

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            return Cell(BLANK)
        return Cell(self.get(x, y), self.colors[y][x])

    def rows(self) -> List[List[Cell]]:
        rows: List[List[Cell]] = []
        for y in range(self.height):
            row: List[Cell] = []
            for x in range(self.width):
                if self.cell_widths[y][x] == 0:
                    continue
                row.append(Cell(self.grid[y][x], self.colors[y][x]))
            rows.append(row)
        return rows

    def render(self) -> str:
        return "\n".join("".join(cell.char for cell in row) for row in self.rows())

    def to_text(self) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        for index, row in enumerate(self.rows()):
            if index:
                text.append("\n")
            run: List[str] = []
            run_color: Optional[str] = None
            for cell in row:
                if run and cell.color != run_color:
                    text.append("".join(run), style=run_color)
                    run = []
                run.append(cell.char)
                run_color = cell.color
            if run:
                text.append("".join(run), style=run_color)
        return text

    def clear(self) -> None:
        self.grid = []
        self.colors = []
        self.cell_widths = []
        self.width = 0
        self.height = 0


@contextmanager
def render_pass(viewport_width: int, viewport_height: int) -> Iterator[Canvas]:
    """Allocate a canvas for one frame; the last terminal row is left for the status line."""
    canvas = Canvas(viewport_width, viewport_height - 1)
    try:
        yield canvas
    finally:
        canvas.clear()
