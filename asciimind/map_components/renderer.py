import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from rich.text import Text

from .camera import Camera, round_half_away
from .canvas import Canvas, Cell, render_pass
from .core import MAX_TEXT_WIDTH, BoxChars, LineChars
from .document import Document
from .node import Node
from .sizing import char_width, wrap_text

MIN_BOX_WIDTH_ON_SCREEN = 3
MIN_BOX_HEIGHT_ON_SCREEN = 2

CONTROL_OFFSET_RATIO = 0.4
MAX_CONTROL_OFFSET = 30.0
MIN_CURVE_STEPS = 10

Point = Tuple[int, int]


@dataclass
class Frame:
    rows: List[List[Cell]]
    canvas_text: Text
    status: Text = field(default_factory=Text)

    @property
    def plain(self) -> str:
        return "\n".join("".join(cell.char for cell in row) for row in self.rows)

    def to_text(self) -> Text:
        text = self.canvas_text.copy()
        if self.rows:
            text.append("\n")
        text.append_text(self.status)
        return text


def connection_points(source: Node, target: Node) -> Tuple[float, float, float, float]:
    """Border points joining ``source`` to ``target`` in world space.

    Horizontal neighbours connect side to side; only boxes whose centers are
    exactly vertically aligned connect top to bottom.
    """
    from_cx, from_cy = source.center()
    to_cx, to_cy = target.center()

    if to_cx > from_cx:
        return source.x + source.width, from_cy, target.x, to_cy
    if to_cx < from_cx:
        return source.x, from_cy, target.x + target.width, to_cy
    if to_cy > from_cy:
        return from_cx, source.y + source.height, to_cx, target.y
    return from_cx, source.y, to_cx, target.y + target.height


def bezier_points(x1: int, y1: int, x2: int, y2: int) -> List[Point]:
    """Rounded samples of the cubic curve between two screen points.

    Control points sit along the dominant axis of travel, offset by 40% of
    the distance (at most 30 cells), so links leave and enter boxes
    straight before bending.
    """
    dx = float(x2 - x1)
    dy = float(y2 - y1)
    dist = math.hypot(dx, dy)
    offset = min(dist * CONTROL_OFFSET_RATIO, MAX_CONTROL_OFFSET)

    if abs(dy) > abs(dx):
        sign = math.copysign(1.0, dy)
        cp1x, cp1y = float(x1), y1 + offset * sign
        cp2x, cp2y = float(x2), y2 - offset * sign
    else:
        cp1x, cp1y = x1 + offset, float(y1)
        cp2x, cp2y = x2 - offset, float(y2)

    steps = max(MIN_CURVE_STEPS, int(dist * 2))
    points: List[Point] = []
    for i in range(steps + 1):
        t = i / steps
        omt = 1 - t
        a = omt * omt * omt
        b = 3 * omt * omt * t
        c = 3 * omt * t * t
        d = t * t * t
        x = a * x1 + b * cp1x + c * cp2x + d * x2
        y = a * y1 + b * cp1y + c * cp2y + d * y2
        points.append((round_half_away(x), round_half_away(y)))
    return points


def bresenham(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    """Cells from (x1, y1) to (x2, y2) inclusive."""
    abs_dx = abs(x2 - x1)
    abs_dy = abs(y2 - y1)
    step_x = 1 if x1 < x2 else -1
    step_y = 1 if y1 < y2 else -1
    err = abs_dx - abs_dy

    yield x1, y1
    while (x1, y1) != (x2, y2):
        e2 = 2 * err
        if e2 > -abs_dy:
            err -= abs_dy
            x1 += step_x
        if e2 < abs_dx:
            err += abs_dx
            y1 += step_y
        yield x1, y1


def _truncate(text: str, limit: int) -> List[Tuple[str, int]]:
    glyphs: List[Tuple[str, int]] = []
    used = 0
    for char in text:
        width = char_width(char)
        if used + width > limit:
            break
        glyphs.append((char, width))
        used += width
    return glyphs


class Renderer:
    def __init__(
        self,
        *,
        box_chars: Optional[BoxChars] = None,
        selected_chars: Optional[BoxChars] = None,
        line_chars: Optional[LineChars] = None,
        text_width: int = MAX_TEXT_WIDTH,
    ) -> None:
        self.box_chars = box_chars or BoxChars.for_style("normal")
        self.selected_chars = selected_chars or BoxChars.for_style("selected")
        self.line_chars = line_chars or LineChars()
        self.text_width = text_width

    def render(
        self,
        document: Document,
        width: int,
        height: int,
        status: Optional[Text] = None,
    ) -> Frame:
        with render_pass(width, height) as canvas:
            self.paint(canvas, document)
            return Frame(
                rows=canvas.rows(),
                canvas_text=canvas.to_text(),
                status=status if status is not None else Text(),
            )

    def paint(self, canvas: Canvas, document: Document) -> None:
        self._draw_edges(canvas, document)
        self._draw_nodes(canvas, document)

    def _draw_edges(self, canvas: Canvas, document: Document) -> None:
        for source, target in document.resolved_edges():
            self._draw_edge(canvas, document.camera, source, target)

    def _draw_edge(self, canvas: Canvas, camera: Camera, source: Node, target: Node) -> None:
        fx, fy, tx, ty = connection_points(source, target)
        x1, y1 = camera.world_to_screen(fx, fy, canvas.width, canvas.height)
        x2, y2 = camera.world_to_screen(tx, ty, canvas.width, canvas.height)
        self._draw_curve(canvas, x1, y1, x2, y2, target.color)

    def _draw_curve(
        self, canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: Optional[str]
    ) -> None:
        points = bezier_points(x1, y1, x2, y2)
        prev = points[0]
        for point in points[1:]:
            self._draw_segment(canvas, prev, point, color)
            prev = point

    def _draw_segment(
        self, canvas: Canvas, start: Point, end: Point, color: Optional[str]
    ) -> None:
        if start == end:
            return
        glyph = self.line_chars.for_slope(end[0] - start[0], end[1] - start[1])
        for x, y in bresenham(start[0], start[1], end[0], end[1]):
            canvas.set_if_blank(x, y, glyph, color)

    def _draw_nodes(self, canvas: Canvas, document: Document) -> None:
        selected = document.selected_node()
        for node in document.nodes.values():
            if node is selected:
                continue
            self._draw_node(canvas, document.camera, node, False)
        if selected is not None:
            self._draw_node(canvas, document.camera, selected, True)

    def _draw_node(self, canvas: Canvas, camera: Camera, node: Node, is_selected: bool) -> None:
        sx, sy = camera.world_to_screen(node.x, node.y, canvas.width, canvas.height)
        width = int(node.width * camera.zoom)
        height = int(node.height * camera.zoom)

        if width < MIN_BOX_WIDTH_ON_SCREEN or height < MIN_BOX_HEIGHT_ON_SCREEN:
            canvas.set(sx, sy, self.line_chars.marker, node.color)
            return

        right = sx + width - 1
        bottom = sy + height - 1
        if right < 0 or sx - 2 >= canvas.width or bottom < 0 or sy >= canvas.height:
            return

        chars = self.selected_chars if is_selected else self.box_chars
        color = node.color

        if is_selected:
            canvas.set(sx - 2, sy, self.line_chars.selection, color)

        self._draw_border_row(canvas, sx, right, sy, chars.top_left, chars.horizontal, chars.top_right, color)

        lines = wrap_text(node.text, self.text_width)
        text_limit = width - 4
        for i in range(1, height - 1):
            y = sy + i
            canvas.set(sx, y, chars.vertical, color)
            for x in range(sx + 1, right):
                canvas.set(x, y, " ")
            line_index = i - 1
            if line_index < len(lines) and text_limit > 0:
                cursor = sx + 2
                for char, glyph_width in _truncate(lines[line_index], text_limit):
                    canvas.set(cursor, y, char, color, width=glyph_width)
                    cursor += glyph_width
            canvas.set(right, y, chars.vertical, color)

        self._draw_border_row(
            canvas, sx, right, bottom, chars.bottom_left, chars.horizontal, chars.bottom_right, color
        )

    def _draw_border_row(
        self,
        canvas: Canvas,
        left: int,
        right: int,
        y: int,
        left_char: str,
        fill_char: str,
        right_char: str,
        color: Optional[str],
    ) -> None:
        canvas.set(left, y, left_char, color)
        for x in range(left + 1, right):
            canvas.set(x, y, fill_char, color)
        canvas.set(right, y, right_char, color)
