"""
main.py
-------
Entry point for the LinkKeeper Telegram bot.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Wire the session dispatcher into the bot.
    - Configure and start the Telegram bot with all handlers.
"""

from telegram import BotCommand
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    MessageHandler,
    filters,
)

from config import TELEGRAM_BOT_TOKEN
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from handlers.link_handler import DISPATCHER_KEY, handle_button, handle_text_message
from handlers.start_handler import help_command, start_command
from services.dispatcher import SessionDispatcher
from services.link_service import LinkService
from services.session_store import SessionStore
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "Начать работу с ботом"),
        BotCommand("help", "Список команд"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def build_application(token: str, dispatcher: SessionDispatcher) -> Application:
    """Build the Telegram application with every handler registered."""
    app = Application.builder().token(token).post_init(set_bot_commands).build()
    app.bot_data[DISPATCHER_KEY] = dispatcher

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text_message))
    app.add_handler(CallbackQueryHandler(handle_button))
    return app


def main() -> None:
    """Initialize and run the bot."""
    if not TELEGRAM_BOT_TOKEN:
        logger.error("TELEGRAM_BOT_TOKEN is not set.")
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not defined in environment variables")

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    dispatcher = SessionDispatcher(LinkService(), SessionStore())
    app = build_application(TELEGRAM_BOT_TOKEN, dispatcher)

    # ── 3. Start polling ──────────────────────────────────
    logger.info("LinkKeeper is running! Press Ctrl+C to stop.")
    try:
        app.run_polling(drop_pending_updates=True, allowed_updates=["message", "callback_query"])
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        close_pool()
        logger.info("LinkKeeper stopped.")


if __name__ == "__main__":
    main()
