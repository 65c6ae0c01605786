"""
Tests for middleware components.

Tests error handling and logging middleware behavior.
Uses mock objects to simulate aiogram updates.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ward.core.exceptions import (
    DataFetchError,
    RateLimitError,
    TokenNotFoundError,
    ValidationError,
    WardError,
)
from ward.middleware.error_handler import ErrorHandlerMiddleware
from ward.middleware.logging import LoggingMiddleware


class MockUpdate:
    """Mock aiogram Update object."""

    def __init__(self, text: str = "test message", user_id: int = 12345):
        self.message = MagicMock()
        self.message.text = text
        self.message.from_user = MagicMock()
        self.message.from_user.id = user_id
        self.message.from_user.username = "testuser"
        self.message.answer = AsyncMock()
        self.callback_query = None


class TestErrorHandlerMiddleware:
    """Tests for ErrorHandlerMiddleware."""

    @pytest.fixture
    def middleware(self) -> ErrorHandlerMiddleware:
        return ErrorHandlerMiddleware()

    @pytest.fixture
    def mock_update(self) -> MockUpdate:
        return MockUpdate()

    @pytest.mark.asyncio
    async def test_passes_through_on_success(
        self,
        middleware: ErrorHandlerMiddleware,
        mock_update: MockUpdate,
    ) -> None:
        handler = AsyncMock(return_value="success")

        result = await middleware(handler, mock_update, {})

        assert result == "success"
        handler.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            ValidationError(),
            DataFetchError(),
            RateLimitError(),
            TokenNotFoundError(),
            WardError(),
            RuntimeError("Unknown"),
        ],
    )
    async def test_catches_and_replies(
        self,
        middleware: ErrorHandlerMiddleware,
        mock_update: MockUpdate,
        error: Exception,
    ) -> None:
        """Every error is swallowed and answered once."""
        handler = AsyncMock(side_effect=error)

        result = await middleware(handler, mock_update, {})

        assert result is None
        mock_update.message.answer.assert_called_once()

    @pytest.mark.asyncio
    async def test_uses_error_message(
        self,
        middleware: ErrorHandlerMiddleware,
        mock_update: MockUpdate,
    ) -> None:
        custom_message = "Custom error message"
        handler = AsyncMock(side_effect=ValidationError(custom_message))

        await middleware(handler, mock_update, {})

        call_args = mock_update.message.answer.call_args
        assert custom_message in call_args[0][0]

    @pytest.mark.asyncio
    async def test_rate_limit_message(
        self,
        middleware: ErrorHandlerMiddleware,
        mock_update: MockUpdate,
    ) -> None:
        handler = AsyncMock(side_effect=RateLimitError())

        await middleware(handler, mock_update, {})

        assert "60 seconds" in mock_update.message.answer.call_args[0][0]

    @pytest.mark.asyncio
    async def test_technical_message_is_not_shown(
        self,
        middleware: ErrorHandlerMiddleware,
        mock_update: MockUpdate,
    ) -> None:
        handler = AsyncMock(
            side_effect=DataFetchError(technical_message="DexScreener API error: 502")
        )

        await middleware(handler, mock_update, {})

        assert "502" not in mock_update.message.answer.call_args[0][0]

    @pytest.mark.asyncio
    async def test_reply_failure_is_logged(
        self,
        middleware: ErrorHandlerMiddleware,
        mock_update: MockUpdate,
    ) -> None:
        mock_update.message.answer.side_effect = RuntimeError("chat gone")
        handler = AsyncMock(side_effect=DataFetchError())

        with patch("ward.middleware.error_handler.logger") as mock_logger:
            result = await middleware(handler, mock_update, {})

        assert result is None
        assert mock_logger.error.call_count == 2


class TestLoggingMiddleware:
    """Tests for LoggingMiddleware."""

    @pytest.fixture
    def middleware(self) -> LoggingMiddleware:
        return LoggingMiddleware()

    @pytest.fixture
    def mock_update(self) -> MockUpdate:
        return MockUpdate(text="test token address")

    @pytest.mark.asyncio
    async def test_passes_through_result(
        self,
        middleware: LoggingMiddleware,
        mock_update: MockUpdate,
    ) -> None:
        handler = AsyncMock(return_value="result")

        result = await middleware(handler, mock_update, {})

        assert result == "result"

    @pytest.mark.asyncio
    async def test_logs_incoming_message(
        self,
        middleware: LoggingMiddleware,
        mock_update: MockUpdate,
    ) -> None:
        handler = AsyncMock(return_value=None)

        with patch("ward.middleware.logging.logger") as mock_logger:
            await middleware(handler, mock_update, {})

            mock_logger.info.assert_called()

    @pytest.mark.asyncio
    async def test_logs_error_on_exception(
        self,
        middleware: LoggingMiddleware,
        mock_update: MockUpdate,
    ) -> None:
        handler = AsyncMock(side_effect=RuntimeError("test error"))

        with patch("ward.middleware.logging.logger") as mock_logger:
            with pytest.raises(RuntimeError):
                await middleware(handler, mock_update, {})

            mock_logger.error.assert_called()

    def test_truncates_long_messages(self, middleware: LoggingMiddleware) -> None:
        long_text = "a" * 200
        info = middleware._get_message_info(MockUpdate(text=long_text))

        assert len(info) < len(long_text) + 20
        assert info.endswith('..."')

    def test_commands_logged_by_name(self, middleware: LoggingMiddleware) -> None:
        info = middleware._get_message_info(MockUpdate(text="/audit So1111111111"))
        assert info == "command=/audit"
