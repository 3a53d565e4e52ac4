"""
services/session_store.py
-------------------------
In-memory conversational state, keyed by Telegram user ID.
"""

from models.session import Session


class SessionStore:
    """
    Mapping from user id to Session.

    A missing entry means the user is idle. Entries are created on demand,
    never expire, and disappear on process restart.
    """

    def __init__(self):
        self._sessions: dict[int, Session] = {}

    def get(self, user_id: int) -> Session:
        return self._sessions.get(user_id, Session.idle())

    def set(self, user_id: int, session: Session) -> None:
        """Store `session`; an idle session removes the entry."""
        if session.is_idle:
            self._sessions.pop(user_id, None)
        else:
            self._sessions[user_id] = session
