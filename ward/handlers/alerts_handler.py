"""
Live alerts command.

/alerts scans the currently boosted Solana tokens and replies with
up to a handful of alerts. Tokens alerted recently are skipped.
"""

from aiogram import Router
from aiogram.enums import ChatAction
from aiogram.filters import Command
from aiogram.types import Message

from ward.services.orchestrator import AnalyzerOrchestrator
from ward.utils.formatters import format_alerts

router = Router(name="alerts")


@router.message(Command("alerts"))
async def handle_alerts(
    message: Message,
    orchestrator: AnalyzerOrchestrator,
) -> None:
    await message.bot.send_chat_action(
        chat_id=message.chat.id,
        action=ChatAction.TYPING,
    )

    alerts = await orchestrator.live_alerts()
    await message.answer(format_alerts(alerts))
