"""
Protocol definitions (interfaces) for external services and shared state.

Using typing.Protocol instead of ABC because:
1. Supports duck typing (no inheritance required)
2. Lighter weight
3. Better for dependency injection
4. Easier to mock in tests

Each protocol defines the contract that implementations must follow.
"""

from typing import Any, Protocol, runtime_checkable

from ward.core.models import TokenBoost, TokenSnapshot


@runtime_checkable
class TokenDataProvider(Protocol):
    """
    Protocol for market-data providers.

    Implementations fetch trading-pair data from external sources like
    DexScreener and normalize it into TokenSnapshot.

    For development, MockTokenDataProvider returns fake data.
    """

    async def get_token_snapshot(
        self,
        address: str,
        prefer_liquid: bool = False,
    ) -> TokenSnapshot:
        """
        Fetch the current snapshot for a token.

        Args:
            address: Token address (validated)
            prefer_liquid: Use the deepest pair instead of the upstream's
                first-ranked pair

        Returns:
            TokenSnapshot with every numeric field populated (0 if unknown)

        Raises:
            RateLimitError: If the upstream API is rate limiting us
            TokenNotFoundError: If the token has no trading pairs
            DataFetchError: If fetching fails for any other reason
        """
        ...

    async def get_boosted_tokens(self, chain_id: str = "solana") -> list[str]:
        """
        Fetch addresses of currently boosted tokens on a chain.

        Raises:
            DataFetchError: If fetching fails
        """
        ...

    async def get_token_boosts(self, chain_id: str = "solana") -> list[TokenBoost]:
        """
        Fetch boosted tokens on a chain together with their boost amounts.

        Raises:
            DataFetchError: If fetching fails
        """
        ...


@runtime_checkable
class TTLStore(Protocol):
    """
    Key-value store whose entries expire after a time-to-live.

    Replaces process-wide mutable maps (caches, alert cooldowns) so that
    lifetime is explicit and the store can be swapped or reset in tests.
    """

    def get(self, key: str) -> Any | None:
        """Return the value for key, or None if missing or expired."""
        ...

    def put(self, key: str, value: Any, ttl: float) -> None:
        """Store value under key for ttl seconds."""
        ...

    def evict(self, key: str) -> None:
        """Remove key if present."""
        ...

    def purge_expired(self) -> int:
        """Drop all expired entries and return how many were removed."""
        ...
