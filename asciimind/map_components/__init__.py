from .core import BoxChars, Direction, LineChars
from .camera import Camera
from .sizing import calculate_node_size, wrap_text
from .edge import Edge
from .node import Node
from .document import Document
from .layout import LayoutEngine
from .selector import select_in_direction, select_next, select_previous
from .canvas import Canvas, Cell, render_pass
from .renderer import Frame, Renderer
from .diff import diff, DiffResult

__all__ = [
    "BoxChars",
    "Direction",
    "LineChars",
    "Camera",
    "calculate_node_size",
    "wrap_text",
    "Edge",
    "Node",
    "Document",
    "LayoutEngine",
    "select_in_direction",
    "select_next",
    "select_previous",
    "Canvas",
    "Cell",
    "render_pass",
    "Frame",
    "Renderer",
    "diff",
    "DiffResult",
]
