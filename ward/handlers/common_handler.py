"""
Common handlers for basic bot commands.

Handles:
- /start - Welcome message
- /help - Usage instructions
"""

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from ward.templates.messages import HELP, WELCOME

router = Router(name="common")


@router.message(Command("start"))
async def handle_start(message: Message) -> None:
    """Send the welcome message."""
    await message.answer(WELCOME)


@router.message(Command("help"))
async def handle_help(message: Message) -> None:
    """Send usage instructions and the list of commands."""
    await message.answer(HELP)
