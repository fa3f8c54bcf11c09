from dataclasses import dataclass
from enum import Enum
from typing import Union


class EditIntent(Enum):

    CREATE_CHILD = "child"
    CREATE_SIBLING = "sibling"
    EDIT_TEXT = "edit"


@dataclass(frozen=True)
class NavigationMode:
    @property
    def label(self) -> str:
        return "NORMAL"


@dataclass(frozen=True)
class EditMode:
    intent: EditIntent
    buffer: str = ""

    @property
    def label(self) -> str:
        return f"EDIT: {self.buffer}_"

    def typed(self, text: str) -> "EditMode":
        return EditMode(self.intent, self.buffer + text)

    def erased(self) -> "EditMode":
        return EditMode(self.intent, self.buffer[:-1])


@dataclass(frozen=True)
class LinkMode:
    source_id: str

    @property
    def label(self) -> str:
        return f"LINK: {self.source_id} → ?"


Mode = Union[NavigationMode, EditMode, LinkMode]
