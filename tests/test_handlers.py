"""
Tests for Telegram handlers.

Handlers are called directly with mocked messages and orchestrator,
the way the dispatcher calls them after injection.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.filters import CommandObject

from ward.core.exceptions import ValidationError
from ward.handlers.audit_handler import handle_audit
from ward.handlers.token_handler import handle_message
from ward.handlers.trending_handler import handle_trending
from ward.services.orchestrator import AnalyzerOrchestrator
from ward.templates.messages import INVALID_ADDRESS, MISSING_ADDRESS
from ward.utils.formatters import format_token_report, format_trending


class MockMessage:
    """Mock aiogram Message object."""

    def __init__(self, text: str | None = None):
        self.text = text
        self.chat = MagicMock()
        self.chat.id = 42
        self.bot = MagicMock()
        self.bot.send_chat_action = AsyncMock()
        self.answer = AsyncMock()


@pytest.fixture
def spy_orchestrator(orchestrator: AnalyzerOrchestrator) -> MagicMock:
    """Real orchestrator wrapped so calls can be asserted."""
    spy = MagicMock(wraps=orchestrator)
    spy.analyze = AsyncMock(wraps=orchestrator.analyze)
    spy.audit = AsyncMock(wraps=orchestrator.audit)
    spy.trending = AsyncMock(wraps=orchestrator.trending)
    return spy


class TestTokenHandler:
    @pytest.mark.asyncio
    async def test_invalid_address_raises_before_fetch(
        self,
        spy_orchestrator: MagicMock,
    ) -> None:
        message = MockMessage("0x742d35Cc6634C0532925a3b844Bc9e7595f8fE21")

        with pytest.raises(ValidationError) as exc_info:
            await handle_message(message, spy_orchestrator)

        assert exc_info.value.message == INVALID_ADDRESS
        spy_orchestrator.analyze.assert_not_awaited()
        message.answer.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_text_answers_invalid(self, spy_orchestrator: MagicMock) -> None:
        message = MockMessage("   ")

        await handle_message(message, spy_orchestrator)

        message.answer.assert_awaited_once_with(INVALID_ADDRESS)
        spy_orchestrator.analyze.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_valid_address_answers_report(
        self,
        spy_orchestrator: MagicMock,
        orchestrator: AnalyzerOrchestrator,
        valid_solana_address: str,
    ) -> None:
        message = MockMessage(f"  {valid_solana_address}\n")

        await handle_message(message, spy_orchestrator)

        spy_orchestrator.analyze.assert_awaited_once_with(valid_solana_address)
        message.bot.send_chat_action.assert_awaited_once()
        expected = format_token_report(await orchestrator.analyze(valid_solana_address))
        message.answer.assert_awaited_once_with(expected)


class TestAuditHandler:
    @pytest.mark.asyncio
    async def test_missing_argument(self, spy_orchestrator: MagicMock) -> None:
        message = MockMessage("/audit")
        command = CommandObject(prefix="/", command="audit", args=None)

        await handle_audit(message, command, spy_orchestrator)

        message.answer.assert_awaited_once_with(MISSING_ADDRESS)
        spy_orchestrator.audit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_argument_raises(self, spy_orchestrator: MagicMock) -> None:
        message = MockMessage("/audit not-an-address")
        command = CommandObject(prefix="/", command="audit", args="not-an-address")

        with pytest.raises(ValidationError):
            await handle_audit(message, command, spy_orchestrator)

        spy_orchestrator.audit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_valid_argument_answers_checklist(
        self,
        spy_orchestrator: MagicMock,
        orchestrator: AnalyzerOrchestrator,
        valid_solana_address: str,
    ) -> None:
        message = MockMessage(f"/audit {valid_solana_address}")
        command = CommandObject(prefix="/", command="audit", args=valid_solana_address)

        await handle_audit(message, command, spy_orchestrator)

        spy_orchestrator.audit.assert_awaited_once_with(valid_solana_address)
        report = await orchestrator.audit(valid_solana_address)
        text = message.answer.await_args.args[0]
        assert f"Score: <b>{report.overall_score}/100</b>" in text
        assert text.count("<b>") == len(report.checks) + 2


class TestTrendingHandler:
    @pytest.mark.asyncio
    async def test_answers_trending_list(
        self,
        spy_orchestrator: MagicMock,
        orchestrator: AnalyzerOrchestrator,
    ) -> None:
        message = MockMessage("/trending")

        await handle_trending(message, spy_orchestrator)

        spy_orchestrator.trending.assert_awaited_once()
        message.bot.send_chat_action.assert_awaited_once()
        message.answer.assert_awaited_once_with(format_trending(await orchestrator.trending()))
