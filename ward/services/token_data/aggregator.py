"""
Token data aggregator service.

Responsible for fetching snapshots from a provider and handing them
to the rest of the application in a uniform way.

This service:
1. Delegates data fetching to TokenDataProvider
2. Enforces a timeout on every provider call
3. Caches snapshots for a short time in an injectable TTL store
"""

import asyncio
import logging

from ward.core.exceptions import DataFetchError, WardError
from ward.core.models import TokenBoost, TokenSnapshot
from ward.core.protocols import TokenDataProvider, TTLStore

logger = logging.getLogger(__name__)

# Default timeout for provider calls (seconds)
DEFAULT_TIMEOUT = 10.0

# Default snapshot lifetime in the cache (seconds)
DEFAULT_CACHE_TTL = 30.0


class TokenDataAggregator:
    """
    Fetches token snapshots through a provider.

    The aggregator's responsibility is to:
    1. Call the provider to fetch data
    2. Serve recent snapshots from cache
    3. Handle errors and timeouts uniformly
    4. Log operations for debugging

    It does NOT:
    - Score risk (that's RiskService's job)
    - Format output (that's the handlers' job)
    """

    def __init__(
        self,
        provider: TokenDataProvider,
        timeout: float = DEFAULT_TIMEOUT,
        cache: TTLStore | None = None,
        cache_ttl: float = DEFAULT_CACHE_TTL,
    ):
        """
        Initialize aggregator with a data provider.

        Args:
            provider: TokenDataProvider implementation (mock or real)
            timeout: Timeout for provider calls in seconds
            cache: Optional store for recent snapshots (no caching if None)
            cache_ttl: Lifetime of cached snapshots in seconds
        """
        self._provider = provider
        self._timeout = timeout
        self._cache = cache
        self._cache_ttl = cache_ttl

    async def get_snapshot(
        self,
        address: str,
        prefer_liquid: bool = False,
    ) -> TokenSnapshot:
        """
        Fetch a token snapshot, from cache when fresh.

        Expired cache entries are purged on every call, so the store
        never holds more than one TTL window of snapshots.

        Args:
            address: Validated token address
            prefer_liquid: Snapshot the deepest pair instead of the first one

        Returns:
            TokenSnapshot for the token

        Raises:
            DataFetchError: If fetching fails (including subclasses)
        """
        cache_key = f"snapshot:{address}:liquid" if prefer_liquid else f"snapshot:{address}"
        if self._cache is not None:
            self._cache.purge_expired()
            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Cache hit for {address[:8]}")
                return cached

        logger.info(f"Fetching token snapshot for: {address[:8]}...")
        snapshot = await self._call(
            self._provider.get_token_snapshot(address, prefer_liquid=prefer_liquid)
        )
        logger.debug(
            f"Snapshot received: {snapshot.symbol}, "
            f"liquidity=${snapshot.liquidity_usd:,.2f}"
        )

        if self._cache is not None:
            self._cache.put(cache_key, snapshot, self._cache_ttl)
        return snapshot

    async def get_boosted_tokens(self, chain_id: str = "solana") -> list[str]:
        """
        Fetch boosted token addresses.

        Raises:
            DataFetchError: If fetching fails
        """
        return await self._call(self._provider.get_boosted_tokens(chain_id))

    async def get_token_boosts(self, chain_id: str = "solana") -> list[TokenBoost]:
        """Fetch boosted tokens with their boost amounts."""
        return await self._call(self._provider.get_token_boosts(chain_id))

    async def _call(self, coro):
        """Await a provider coroutine with timeout and error wrapping."""
        try:
            return await asyncio.wait_for(coro, timeout=self._timeout)

        except TimeoutError:
            logger.error(f"Provider timeout after {self._timeout}s")
            raise DataFetchError(
                message="Request took too long. Please try again later.",
                technical_message=f"Provider timeout after {self._timeout}s",
            ) from None

        except WardError:
            # Re-raise our own exceptions
            raise

        except Exception as e:
            # Wrap unexpected errors
            logger.exception(f"Unexpected error fetching token data: {e}")
            raise DataFetchError(
                technical_message=f"Provider error: {type(e).__name__}: {e}",
            ) from e
