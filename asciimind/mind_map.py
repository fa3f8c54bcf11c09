from .editor import Editor, EditorConfig, Event, EventKind, load_document, save_document
from .map_components import Camera, Document, Edge, Frame, LayoutEngine, Node, Renderer

__all__ = [
    "Document",
    "Node",
    "Edge",
    "Camera",
    "LayoutEngine",
    "Renderer",
    "Frame",
    "Editor",
    "EditorConfig",
    "Event",
    "EventKind",
    "load_document",
    "save_document",
]
