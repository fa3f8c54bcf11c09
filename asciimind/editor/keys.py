from typing import Dict, List, Optional

from .events import Event, EventKind
from .modes import EditMode, LinkMode, Mode

ESCAPE_SEQUENCES: Dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[Z": "shift+tab",
    "\x1b[3~": "delete",
}

CONTROL_KEYS: Dict[str, str] = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl+c",
    "\x13": "ctrl+s",
    "\x0f": "ctrl+o",
}

NAVIGATION_KEYS: Dict[str, EventKind] = {
    "ctrl+c": EventKind.QUIT,
    "q": EventKind.QUIT,
    "up": EventKind.MOVE_UP,
    "down": EventKind.MOVE_DOWN,
    "left": EventKind.MOVE_LEFT,
    "right": EventKind.MOVE_RIGHT,
    "w": EventKind.PAN_UP,
    "k": EventKind.PAN_UP,
    "s": EventKind.PAN_DOWN,
    "j": EventKind.PAN_DOWN,
    "a": EventKind.PAN_LEFT,
    "h": EventKind.PAN_LEFT,
    "d": EventKind.PAN_RIGHT,
    "l": EventKind.PAN_RIGHT,
    "+": EventKind.ZOOM_IN,
    "=": EventKind.ZOOM_IN,
    "-": EventKind.ZOOM_OUT,
    "_": EventKind.ZOOM_OUT,
    "0": EventKind.RESET_CAMERA,
    "enter": EventKind.CREATE_SIBLING,
    "tab": EventKind.CREATE_CHILD,
    "e": EventKind.EDIT,
    "x": EventKind.DELETE,
    "delete": EventKind.DELETE,
    "backspace": EventKind.DELETE,
    "L": EventKind.LINK,
    "]": EventKind.NEXT,
    "[": EventKind.PREVIOUS,
    "c": EventKind.CENTER,
    "ctrl+s": EventKind.SAVE,
    "ctrl+o": EventKind.LOAD,
    "?": EventKind.HELP,
}

EDIT_KEYS: Dict[str, EventKind] = {
    "ctrl+c": EventKind.QUIT,
    "esc": EventKind.CANCEL,
    "enter": EventKind.CONFIRM,
    "backspace": EventKind.BACKSPACE,
}

LINK_KEYS: Dict[str, EventKind] = {
    "ctrl+c": EventKind.QUIT,
    "esc": EventKind.CANCEL,
    "enter": EventKind.CONFIRM,
    "tab": EventKind.NEXT,
    "shift+tab": EventKind.PREVIOUS,
    "up": EventKind.MOVE_UP,
    "down": EventKind.MOVE_DOWN,
    "left": EventKind.MOVE_LEFT,
    "right": EventKind.MOVE_RIGHT,
}


def decode_keys(data: str) -> List[str]:
    """Split raw terminal input into key names.

    Printable characters are returned as themselves; unknown escape
    sequences are dropped.
    """
    keys: List[str] = []
    i = 0
    length = len(data)
    while i < length:
        char = data[i]
        if char == "\x1b":
            for sequence, name in ESCAPE_SEQUENCES.items():
                if data.startswith(sequence, i):
                    keys.append(name)
                    i += len(sequence)
                    break
            else:
                if i + 1 < length and data[i + 1] in "[O":
                    end = i + 2
                    while end < length and not data[end].isalpha() and data[end] != "~":
                        end += 1
                    i = end + 1
                else:
                    keys.append("esc")
                    i += 1
            continue
        name = CONTROL_KEYS.get(char)
        if name is not None:
            keys.append(name)
        elif char.isprintable():
            keys.append(char)
        i += 1
    return keys


def event_for_key(mode: Mode, key: str) -> Optional[Event]:
    if isinstance(mode, EditMode):
        kind = EDIT_KEYS.get(key)
        if kind is not None:
            return Event(kind)
        if len(key) == 1 and key.isprintable():
            return Event.char(key)
        return None
    if isinstance(mode, LinkMode):
        kind = LINK_KEYS.get(key)
    else:
        kind = NAVIGATION_KEYS.get(key)
    return Event(kind) if kind is not None else None
