"""
models/session.py
-----------------
Per-user conversational state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Mode(str, Enum):
    IDLE = "idle"
    AWAITING_SAVE_INPUT = "awaiting_save"
    AWAITING_DELETE_ID = "awaiting_delete"
    AWAITING_GET_ID = "awaiting_get"
    BROWSING_LIST = "browsing_list"


@dataclass(frozen=True)
class Session:
    """
    Immutable snapshot of what the bot is waiting for from one user.

    Attributes:
        mode: Current conversation mode.
        page: Current list page (1-based); only set while browsing.
    """
    mode: Mode = Mode.IDLE
    page: Optional[int] = None

    @classmethod
    def idle(cls) -> "Session":
        return cls()

    @classmethod
    def browsing(cls, page: int) -> "Session":
        return cls(mode=Mode.BROWSING_LIST, page=max(1, page))

    @property
    def is_idle(self) -> bool:
        return self.mode is Mode.IDLE
