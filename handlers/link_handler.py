"""
handlers/link_handler.py
-------------------------
Handles plain text messages and inline button presses.
Translates Telegram updates into dispatcher events and sends the replies back.
"""

from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from handlers.keyboards import LABEL_ACTIONS, markup_for
from models.events import Button, ButtonPress, Command, Event, Reply, TextReply
from services.dispatcher import SessionDispatcher
from utils.logger import get_logger

logger = get_logger(__name__)

COMMAND_PREFIX = "/"
DISPATCHER_KEY = "dispatcher"


def text_to_event(text: str) -> Optional[Event]:
    """
    Classify a chat message.

    Returns:
        Command for a main keyboard label, TextReply for anything else,
        or None for slash commands, which belong to the command handlers.
    """
    if not text or text.startswith(COMMAND_PREFIX):
        return None
    action = LABEL_ACTIONS.get(text)
    if action is not None:
        return Command(action)
    return TextReply(text)


def data_to_event(data: Optional[str]) -> Optional[Event]:
    """Map inline button callback_data to a ButtonPress; unknown payloads give None."""
    try:
        return ButtonPress(Button(data))
    except ValueError:
        return None


def _dispatcher(context: ContextTypes.DEFAULT_TYPE) -> SessionDispatcher:
    return context.bot_data[DISPATCHER_KEY]


async def _send(context: ContextTypes.DEFAULT_TYPE, chat_id: int, replies: list[Reply]) -> None:
    for reply in replies:
        await context.bot.send_message(
            chat_id=chat_id,
            text=reply.text,
            reply_markup=markup_for(reply.keyboard),
        )


async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle any plain text message: a keyboard label or a reply to a prompt."""
    message = update.message
    user = update.effective_user
    if message is None or user is None:
        return

    event = text_to_event(message.text or "")
    if event is None:
        return

    replies = await _dispatcher(context).dispatch(user.id, event)
    await _send(context, message.chat_id, replies)


async def handle_button(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle an inline button press, then acknowledge it."""
    query = update.callback_query
    user = update.effective_user
    chat = update.effective_chat
    if query is None or user is None:
        return

    try:
        event = data_to_event(query.data)
        if event is None:
            logger.warning(f"Ignoring unknown button payload {query.data!r} from user {user.id}")
            return
        replies = await _dispatcher(context).dispatch(user.id, event)
        if chat is not None:
            await _send(context, chat.id, replies)
    finally:
        await query.answer()
