"""
Router setup and configuration.

Registers all handlers and middleware with the dispatcher.
Order matters - command handlers are registered before catch-all.
"""

from aiogram import Dispatcher

from ward.handlers import (
    alerts_handler,
    audit_handler,
    common_handler,
    token_handler,
    trending_handler,
)
from ward.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from ward.services.orchestrator import AnalyzerOrchestrator


def setup_routers(
    dp: Dispatcher,
    orchestrator: AnalyzerOrchestrator,
) -> None:
    """
    Configure dispatcher with all routers and middleware.

    Sets up:
    1. Global middleware (logging, error handling)
    2. Command handlers (/start, /help, /audit, /alerts, /trending)
    3. Token analysis handler (catch-all)

    Args:
        dp: Aiogram dispatcher
        orchestrator: Analyzer service for injection into handlers
    """
    # First registered = outermost; logging sees errors before they are handled
    dp.update.middleware(LoggingMiddleware())
    dp.update.middleware(ErrorHandlerMiddleware())

    # Available as a handler argument
    dp["orchestrator"] = orchestrator

    # Commands must be matched before the catch-all token handler
    dp.include_router(common_handler.router)
    dp.include_router(audit_handler.router)
    dp.include_router(alerts_handler.router)
    dp.include_router(trending_handler.router)
    dp.include_router(token_handler.router)
