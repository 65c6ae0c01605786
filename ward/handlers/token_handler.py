"""
Token analysis handler.

Handles messages containing Solana token addresses.
Main workflow:
1. Sanitize input
2. Validate address format
3. Call orchestrator for analysis
4. Format and send result
"""

from aiogram import Router
from aiogram.enums import ChatAction
from aiogram.types import Message

from ward.services.orchestrator import AnalyzerOrchestrator
from ward.templates.messages import INVALID_ADDRESS
from ward.utils.formatters import format_token_report
from ward.utils.validators import require_solana_address, sanitize_input

router = Router(name="token")


@router.message()
async def handle_message(
    message: Message,
    orchestrator: AnalyzerOrchestrator,
) -> None:
    """
    Handle any text message as potential token address.

    This is a catch-all handler for messages that don't match
    any commands.

    Args:
        message: Incoming Telegram message
        orchestrator: Injected analyzer orchestrator
    """
    address = sanitize_input(message.text)
    if address is None:
        await message.answer(INVALID_ADDRESS)
        return

    # Raises ValidationError, answered by ErrorHandlerMiddleware
    require_solana_address(address)

    # Show typing indicator while analyzing
    await message.bot.send_chat_action(
        chat_id=message.chat.id,
        action=ChatAction.TYPING,
    )

    # Errors are caught by ErrorHandlerMiddleware
    report = await orchestrator.analyze(address)
    await message.answer(format_token_report(report))
