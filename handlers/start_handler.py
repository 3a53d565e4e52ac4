"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
Shows the main keyboard and the inline action menu.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.keyboards import markup_for
from models.events import Keyboard, Reply
from utils import texts
from utils.logger import get_logger

logger = get_logger(__name__)

MENU_REPLY = Reply(texts.MENU_TEXT, Keyboard.MENU)
START_REPLIES = [Reply(texts.GREETING, Keyboard.MAIN), MENU_REPLY]


async def _reply(update: Update, replies: list[Reply]) -> None:
    for reply in replies:
        await update.message.reply_text(reply.text, reply_markup=markup_for(reply.keyboard))


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - greet the user and show both keyboards."""
    user = update.effective_user
    if user is not None:
        logger.info(f"User {user.id} ({user.first_name}) started the bot.")

    await _reply(update, START_REPLIES)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show the action menu again."""
    await _reply(update, [MENU_REPLY])
