"""
Trending tokens command.

/trending lists the boosted Solana tokens with the most 24h volume.
"""

from aiogram import Router
from aiogram.enums import ChatAction
from aiogram.filters import Command
from aiogram.types import Message

from ward.services.orchestrator import AnalyzerOrchestrator
from ward.utils.formatters import format_trending

router = Router(name="trending")


@router.message(Command("trending"))
async def handle_trending(
    message: Message,
    orchestrator: AnalyzerOrchestrator,
) -> None:
    await message.bot.send_chat_action(
        chat_id=message.chat.id,
        action=ChatAction.TYPING,
    )

    tokens = await orchestrator.trending()
    await message.answer(format_trending(tokens))
