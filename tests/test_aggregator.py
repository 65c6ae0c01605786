"""
Tests for TokenDataAggregator.

Tests cover:
- Snapshot caching with expiry
- Timeouts
- Error wrapping
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from ward.core.exceptions import DataFetchError, RateLimitError
from ward.core.models import TokenBoost, TokenSnapshot
from ward.services.store import InMemoryTTLStore
from ward.services.token_data.aggregator import TokenDataAggregator


def _provider(snapshot: TokenSnapshot | None = None, error: Exception | None = None) -> AsyncMock:
    provider = AsyncMock()
    if error is not None:
        provider.get_token_snapshot.side_effect = error
    else:
        provider.get_token_snapshot.return_value = snapshot
    provider.get_boosted_tokens.return_value = ["A", "B"]
    return provider


class TestAggregatorCache:
    """Snapshots are reused until the TTL passes."""

    @pytest.mark.asyncio
    async def test_cache_hit_skips_provider(
        self,
        low_risk_snapshot: TokenSnapshot,
        store: InMemoryTTLStore,
    ) -> None:
        provider = _provider(low_risk_snapshot)
        aggregator = TokenDataAggregator(provider, cache=store, cache_ttl=30)

        first = await aggregator.get_snapshot(low_risk_snapshot.address)
        second = await aggregator.get_snapshot(low_risk_snapshot.address)

        assert first is second
        provider.get_token_snapshot.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_expired_entry_is_refetched(
        self,
        low_risk_snapshot: TokenSnapshot,
        store: InMemoryTTLStore,
        clock,
    ) -> None:
        provider = _provider(low_risk_snapshot)
        aggregator = TokenDataAggregator(provider, cache=store, cache_ttl=30)

        await aggregator.get_snapshot(low_risk_snapshot.address)
        clock.advance(31)
        await aggregator.get_snapshot(low_risk_snapshot.address)

        assert provider.get_token_snapshot.await_count == 2

    @pytest.mark.asyncio
    async def test_no_cache_always_fetches(self, low_risk_snapshot: TokenSnapshot) -> None:
        provider = _provider(low_risk_snapshot)
        aggregator = TokenDataAggregator(provider)

        await aggregator.get_snapshot(low_risk_snapshot.address)
        await aggregator.get_snapshot(low_risk_snapshot.address)

        assert provider.get_token_snapshot.await_count == 2

    @pytest.mark.asyncio
    async def test_errors_are_not_cached(
        self,
        low_risk_snapshot: TokenSnapshot,
        store: InMemoryTTLStore,
    ) -> None:
        provider = _provider(error=DataFetchError())
        aggregator = TokenDataAggregator(provider, cache=store)

        with pytest.raises(DataFetchError):
            await aggregator.get_snapshot(low_risk_snapshot.address)

        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_expired_entries_are_purged(
        self,
        low_risk_snapshot: TokenSnapshot,
        store: InMemoryTTLStore,
        clock,
    ) -> None:
        """Addresses looked up once do not pile up in the cache."""
        provider = _provider(low_risk_snapshot)
        aggregator = TokenDataAggregator(provider, cache=store, cache_ttl=30)

        for i in range(500):
            await aggregator.get_snapshot(f"Token{i}")
        assert len(store) == 500

        clock.advance(3600)
        await aggregator.get_snapshot("LateToken")

        assert len(store) == 1
        assert store.get("snapshot:LateToken") is low_risk_snapshot

    @pytest.mark.asyncio
    async def test_liquid_snapshots_are_cached_separately(
        self,
        low_risk_snapshot: TokenSnapshot,
        store: InMemoryTTLStore,
    ) -> None:
        provider = _provider(low_risk_snapshot)
        aggregator = TokenDataAggregator(provider, cache=store)

        await aggregator.get_snapshot("addr")
        await aggregator.get_snapshot("addr", prefer_liquid=True)

        assert provider.get_token_snapshot.await_args_list[0].kwargs == {"prefer_liquid": False}
        assert provider.get_token_snapshot.await_args_list[1].kwargs == {"prefer_liquid": True}


class TestAggregatorErrors:
    """Timeouts and unexpected errors become DataFetchError."""

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        async def slow(address: str, **kwargs) -> TokenSnapshot:
            await asyncio.sleep(1)
            raise AssertionError("should have timed out")

        provider = AsyncMock()
        provider.get_token_snapshot.side_effect = slow
        aggregator = TokenDataAggregator(provider, timeout=0.01)

        with pytest.raises(DataFetchError) as exc_info:
            await aggregator.get_snapshot("addr")

        assert "too long" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_own_errors_pass_through(self) -> None:
        aggregator = TokenDataAggregator(_provider(error=RateLimitError()))

        with pytest.raises(RateLimitError):
            await aggregator.get_snapshot("addr")

    @pytest.mark.asyncio
    async def test_unexpected_error_is_wrapped(self) -> None:
        aggregator = TokenDataAggregator(_provider(error=KeyError("pairs")))

        with pytest.raises(DataFetchError) as exc_info:
            await aggregator.get_snapshot("addr")

        assert "KeyError" in exc_info.value.technical_message

    @pytest.mark.asyncio
    async def test_boosted_tokens_pass_through(self) -> None:
        provider = _provider()
        aggregator = TokenDataAggregator(provider)

        assert await aggregator.get_boosted_tokens() == ["A", "B"]
        provider.get_boosted_tokens.assert_awaited_once_with("solana")

    @pytest.mark.asyncio
    async def test_token_boosts_pass_through(self) -> None:
        boosts = [TokenBoost(address="A", total_amount=50)]
        provider = _provider()
        provider.get_token_boosts.return_value = boosts
        aggregator = TokenDataAggregator(provider)

        assert await aggregator.get_token_boosts() == boosts
        provider.get_token_boosts.assert_awaited_once_with("solana")
