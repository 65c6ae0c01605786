"""
Ward AI bot entry point.

Initializes all components and starts the bot.

Run with: python -m ward.main
"""

import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from ward.config import Settings, get_settings
from ward.handlers import setup_routers
from ward.services.factory import ServiceFactory


def setup_logging(level: str) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    # Reduce noise from external libraries
    logging.getLogger("aiogram").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def validate_production_config(settings: Settings) -> None:
    """
    Refuse to run production on mock market data.

    Raises:
        RuntimeError: If production mode is combined with mock services.
    """
    if settings.is_production and settings.use_mock_services:
        raise RuntimeError(
            "USE_MOCK_SERVICES=true is not allowed with ENVIRONMENT=production. "
            "Set USE_MOCK_SERVICES=false to use DexScreener."
        )


async def main() -> None:
    """
    Main application entry point.

    Loads configuration, sets up logging, builds services via the
    factory, wires the dispatcher and starts polling.
    """
    settings = get_settings()

    # Setup logging first (so validation errors are logged)
    setup_logging(settings.log_level)
    validate_production_config(settings)
    logger = logging.getLogger(__name__)

    logger.info("=" * 50)
    logger.info("Ward AI bot starting...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Mock mode: {settings.use_mock_services}")
    logger.info("=" * 50)

    factory = ServiceFactory(settings)
    orchestrator = factory.create_orchestrator()

    bot = Bot(
        token=settings.telegram_bot_token,
        default=DefaultBotProperties(
            parse_mode=ParseMode.HTML,
        ),
    )
    dp = Dispatcher()
    setup_routers(dp, orchestrator)

    async def on_shutdown() -> None:
        logger.info("Shutting down...")
        await bot.session.close()

    dp.shutdown.register(on_shutdown)

    logger.info("Bot is ready. Starting polling...")

    try:
        await dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types(),
        )
    except Exception as e:
        logger.exception(f"Bot stopped with error: {e}")
        raise
    finally:
        logger.info("Bot stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nBot stopped by user.")
