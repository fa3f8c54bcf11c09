from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..map_components.core import Direction


class EventKind(Enum):

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"

    PAN_UP = "pan_up"
    PAN_DOWN = "pan_down"
    PAN_LEFT = "pan_left"
    PAN_RIGHT = "pan_right"

    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    RESET_CAMERA = "reset_camera"
    CENTER = "center"

    CREATE_CHILD = "create_child"
    CREATE_SIBLING = "create_sibling"
    EDIT = "edit"
    DELETE = "delete"
    LINK = "link"

    CONFIRM = "confirm"
    CANCEL = "cancel"
    CHAR = "char"
    BACKSPACE = "backspace"

    NEXT = "next"
    PREVIOUS = "previous"

    SAVE = "save"
    LOAD = "load"
    HELP = "help"
    QUIT = "quit"
    RESIZE = "resize"


MOVES = {
    EventKind.MOVE_UP: Direction.UP,
    EventKind.MOVE_DOWN: Direction.DOWN,
    EventKind.MOVE_LEFT: Direction.LEFT,
    EventKind.MOVE_RIGHT: Direction.RIGHT,
}

PANS = {
    EventKind.PAN_UP: Direction.UP,
    EventKind.PAN_DOWN: Direction.DOWN,
    EventKind.PAN_LEFT: Direction.LEFT,
    EventKind.PAN_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Event:
    kind: EventKind
    text: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @classmethod
    def char(cls, text: str) -> "Event":
        return cls(EventKind.CHAR, text=text)

    @classmethod
    def resize(cls, width: int, height: int) -> "Event":
        return cls(EventKind.RESIZE, width=width, height=height)
