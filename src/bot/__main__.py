"""
Telegram bot: each text message is one address book command.
Run: python -m bot (from repo root, with .env or env vars set).
"""
import logging
from pathlib import Path

from addressbook.infrastructure.config import STORAGE_NEO4J, Settings, load_env_file

# Repo root: from src/bot/__main__.py go up to repo root (parent.parent.parent when in src layout)
load_env_file(Path(__file__).resolve().parent.parent.parent / ".env")

from neo4j import GraphDatabase
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from addressbook.application import AddressBookService, format_result
from addressbook.infrastructure import (
    InMemoryAddressBookStorage,
    Neo4jAddressBookStorage,
    ensure_address_book_constraint,
)

logger = logging.getLogger(__name__)

SERVICES_KEY = "address_book_services"
STORAGE_FACTORY_KEY = "storage_factory"


def _get_service(context: ContextTypes.DEFAULT_TYPE, chat_id: int) -> AddressBookService:
    """One session per chat, so displayed indices refer to that chat's last listing."""
    services: dict[int, AddressBookService] = context.bot_data.setdefault(SERVICES_KEY, {})
    if chat_id not in services:
        storage = context.bot_data[STORAGE_FACTORY_KEY](str(chat_id))
        services[chat_id] = AddressBookService(storage)
    return services[chat_id]


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text(
        "Send a command to manage your address book, e.g. "
        "'add John Doe p/98765432 e/johnd@gmail.com a/311, Clementi Ave 2'. "
        "Send 'help' to see all commands."
    )


async def handle_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    text = (update.message.text or "").strip()
    service = _get_service(context, update.effective_chat.id)
    result = service.execute(text)
    await update.message.reply_text(format_result(result))


async def other_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text("I only accept text commands. Send 'help' to see them.")


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )
    if not settings.use_polling:
        raise SystemExit(
            "The bot runs with long polling only. Set USE_POLLING=1 and run python -m bot again, "
            "or use the REST API: uvicorn api.main:app"
        )
    if not settings.telegram_bot_token:
        raise SystemExit(
            "Set TELEGRAM_BOT_TOKEN (e.g. in .env). Get a token from @BotFather."
        )
    app = Application.builder().token(settings.telegram_bot_token).build()
    if settings.storage_backend == STORAGE_NEO4J:
        driver = GraphDatabase.driver(
            settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
        )
        ensure_address_book_constraint(driver)
        app.bot_data[STORAGE_FACTORY_KEY] = lambda book_id: Neo4jAddressBookStorage(driver, book_id=book_id)
    else:
        app.bot_data[STORAGE_FACTORY_KEY] = lambda book_id: InMemoryAddressBookStorage()
    app.add_handler(CommandHandler("start", start))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text))
    app.add_handler(
        MessageHandler(
            filters.ALL & ~filters.COMMAND & ~filters.TEXT,
            other_message,
        )
    )
    logger.info("Bot running (polling, storage=%s)", settings.storage_backend)
    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
