from .mind_map import *
from .errors import *

__version__ = "0.1.0"
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
    "MindMapError",
    "ConfigurationError",
    "InvalidOperationError",
    "PersistenceError",
]
