"""
models/link.py
--------------
Domain model for a saved link (bookmark).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Link:
    """
    Represents a single saved link.

    Attributes:
        id: Database primary key (None for new records).
        name: Short label chosen by the user.
        url: Absolute URL; unique across all users.
        user_id: Telegram user ID of the owner.
        created_at: Timestamp when the record was created.
    """
    name: str
    url: str
    user_id: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def is_owned_by(self, user_id: int) -> bool:
        """Returns True if `user_id` saved this link."""
        return self.user_id == user_id
