"""Telegram handlers and router setup."""

from ward.handlers.router import setup_routers

__all__ = ["setup_routers"]
