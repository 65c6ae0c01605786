"""
Contract audit command.

/audit <address> runs the eight audit checks on the token's
market snapshot and replies with the checklist.
"""

from aiogram import Router
from aiogram.enums import ChatAction
from aiogram.filters import Command, CommandObject
from aiogram.types import Message

from ward.services.orchestrator import AnalyzerOrchestrator
from ward.templates.messages import MISSING_ADDRESS
from ward.utils.formatters import format_audit_report
from ward.utils.validators import require_solana_address, sanitize_input

router = Router(name="audit")


@router.message(Command("audit"))
async def handle_audit(
    message: Message,
    command: CommandObject,
    orchestrator: AnalyzerOrchestrator,
) -> None:
    address = sanitize_input(command.args)
    if address is None:
        await message.answer(MISSING_ADDRESS)
        return

    require_solana_address(address)

    await message.bot.send_chat_action(
        chat_id=message.chat.id,
        action=ChatAction.TYPING,
    )

    # Errors are caught by ErrorHandlerMiddleware
    report = await orchestrator.audit(address)
    await message.answer(format_audit_report(report))
