from .config import EditorConfig
from .editor import Editor, Outcome
from .events import Event, EventKind
from .modes import EditIntent, EditMode, LinkMode, NavigationMode
from .persistence import load_document, save_document
from .scheduler import TickScheduler

__all__ = [
    "EditorConfig",
    "Editor",
    "Outcome",
    "Event",
    "EventKind",
    "EditIntent",
    "EditMode",
    "LinkMode",
    "NavigationMode",
    "load_document",
    "save_document",
    "TickScheduler",
]
