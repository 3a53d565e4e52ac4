"""
models/events.py
----------------
Inbound chat events, the effects the dispatcher derives from them,
and the outbound replies handed back to the Telegram layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Action(str, Enum):
    """The four menu actions."""
    SAVE = "save"
    LIST = "list"
    DELETE = "delete"
    GET = "get"


class Button(str, Enum):
    """Inline button payloads (Telegram callback_data)."""
    SAVE = "save"
    LIST = "list"
    DELETE = "delete"
    GET = "get"
    PREV = "prev"
    NEXT = "next"

    def as_action(self) -> Optional[Action]:
        """The menu action behind this button, or None for paging controls."""
        try:
            return Action(self.value)
        except ValueError:
            return None


class Keyboard(str, Enum):
    MAIN = "main"        # persistent reply keyboard
    MENU = "menu"        # inline menu with the four actions
    PAGING = "paging"    # inline prev / next


# ── Events ────────────────────────────────────────────────

@dataclass(frozen=True)
class Command:
    kind: Action


@dataclass(frozen=True)
class TextReply:
    content: str


@dataclass(frozen=True)
class ButtonPress:
    kind: Button


Event = Union[Command, TextReply, ButtonPress]


# ── Effects ───────────────────────────────────────────────

@dataclass(frozen=True)
class Reply:
    """A message to send back to the chat."""
    text: str
    keyboard: Optional[Keyboard] = None


@dataclass(frozen=True)
class SaveLink:
    text: str


@dataclass(frozen=True)
class ListLinks:
    page: int


@dataclass(frozen=True)
class DeleteLink:
    text: str


@dataclass(frozen=True)
class GetLink:
    text: str


Effect = Union[Reply, SaveLink, ListLinks, DeleteLink, GetLink]
