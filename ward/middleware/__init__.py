"""Middleware for aiogram."""

from ward.middleware.error_handler import ErrorHandlerMiddleware
from ward.middleware.logging import LoggingMiddleware

__all__ = ["ErrorHandlerMiddleware", "LoggingMiddleware"]
