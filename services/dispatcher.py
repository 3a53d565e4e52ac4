"""
services/dispatcher.py
----------------------
The conversational state machine.

`transition()` is a pure function from (session, event) to
(new session, effects). `SessionDispatcher` applies it against a
SessionStore and runs the resulting effects through LinkService.
"""

from typing import Optional

from models.events import (
    Action,
    Button,
    ButtonPress,
    Command,
    DeleteLink,
    Effect,
    Event,
    GetLink,
    ListLinks,
    Reply,
    SaveLink,
    TextReply,
)
from models.session import Mode, Session
from services.link_service import LinkService
from services.session_store import SessionStore
from utils import texts
from utils.logger import get_logger

logger = get_logger(__name__)

# What selecting each menu action switches the session to, and the prompt sent.
_PROMPTS = {
    Action.SAVE: (Mode.AWAITING_SAVE_INPUT, texts.PROMPT_SAVE),
    Action.DELETE: (Mode.AWAITING_DELETE_ID, texts.PROMPT_DELETE),
    Action.GET: (Mode.AWAITING_GET_ID, texts.PROMPT_GET),
}

_PENDING_ACTIONS = {
    Mode.AWAITING_SAVE_INPUT: SaveLink,
    Mode.AWAITING_DELETE_ID: DeleteLink,
    Mode.AWAITING_GET_ID: GetLink,
}


def _select(action: Action) -> tuple[Session, list[Effect]]:
    if action is Action.LIST:
        return Session.browsing(1), [ListLinks(page=1)]
    mode, prompt = _PROMPTS[action]
    return Session(mode=mode), [Reply(prompt)]


def transition(session: Session, event: Event) -> tuple[Session, list[Effect]]:
    """
    Compute the next session and the effects for one inbound event.

    Selecting an action always overrides whatever was pending. A text reply
    completes a pending prompt and returns the user to idle. Paging buttons
    only act while a list is being browsed.
    """
    if isinstance(event, Command):
        return _select(event.kind)

    if isinstance(event, ButtonPress):
        action = event.kind.as_action()
        if action is not None:
            return _select(action)
        if session.mode is not Mode.BROWSING_LIST:
            return session, []
        step = -1 if event.kind is Button.PREV else 1
        new_session = Session.browsing((session.page or 1) + step)
        return new_session, [ListLinks(page=new_session.page)]

    if isinstance(event, TextReply):
        effect_type = _PENDING_ACTIONS.get(session.mode)
        if effect_type is None:
            return session, [Reply(texts.UNKNOWN_COMMAND)]
        return Session.idle(), [effect_type(event.content)]

    raise TypeError(f"Unsupported event: {event!r}")


class SessionDispatcher:
    """
    Feeds events through `transition()` and executes the effects.

    The new session is stored before any store call runs, so a failing
    action still leaves the user in a valid state.
    """

    def __init__(self, link_service: Optional[LinkService] = None,
                 sessions: Optional[SessionStore] = None):
        self.link_service = link_service or LinkService()
        self.sessions = sessions if sessions is not None else SessionStore()

    async def dispatch(self, user_id: int, event: Event) -> list[Reply]:
        """
        Handle one event for one user.

        Returns:
            The replies to send, in order.
        """
        current = self.sessions.get(user_id)
        new_session, effects = transition(current, event)
        self.sessions.set(user_id, new_session)
        logger.debug(f"User {user_id}: {current.mode.value} -> {new_session.mode.value} on {event}")

        replies = []
        for effect in effects:
            replies.append(await self._run(user_id, effect))
        return replies

    async def _run(self, user_id: int, effect: Effect) -> Reply:
        if isinstance(effect, Reply):
            return effect
        if isinstance(effect, SaveLink):
            return await self.link_service.save(user_id, effect.text)
        if isinstance(effect, ListLinks):
            return await self.link_service.list_page(user_id, effect.page)
        if isinstance(effect, DeleteLink):
            return await self.link_service.delete(user_id, effect.text)
        if isinstance(effect, GetLink):
            return await self.link_service.get(effect.text)
        raise TypeError(f"Unsupported effect: {effect!r}")
