"""
Trending tokens service.

Ranks the currently boosted tokens by 24h trading volume. Each token is
represented by its deepest pair; tokens whose deepest pair holds less
than the minimum liquidity are left out as untradeable.
"""

import asyncio
import logging

from ward.core.exceptions import DataFetchError
from ward.core.models import TrendingToken
from ward.services.token_data.aggregator import TokenDataAggregator

logger = logging.getLogger(__name__)

DEFAULT_SCAN_LIMIT = 20
DEFAULT_MIN_LIQUIDITY = 1_000.0
DEFAULT_LIMIT = 10


class TrendingService:
    """
    Service listing boosted tokens ordered by volume.

    Usage:
        service = TrendingService()
        tokens = await service.top(aggregator)
    """

    def __init__(
        self,
        scan_limit: int = DEFAULT_SCAN_LIMIT,
        min_liquidity: float = DEFAULT_MIN_LIQUIDITY,
        limit: int = DEFAULT_LIMIT,
    ):
        """
        Args:
            scan_limit: How many boosted tokens to look at
            min_liquidity: Smallest USD liquidity a listed token may have
            limit: How many tokens to return at most
        """
        self._scan_limit = scan_limit
        self._min_liquidity = min_liquidity
        self._limit = limit

    async def top(
        self,
        aggregator: TokenDataAggregator,
        chain_id: str = "solana",
    ) -> list[TrendingToken]:
        """
        Rank boosted tokens by 24h volume, highest first.

        Tokens whose snapshot cannot be fetched are skipped.

        Raises:
            DataFetchError: If the boosted token list is unavailable
        """
        boosts = (await aggregator.get_token_boosts(chain_id))[: self._scan_limit]

        results = await asyncio.gather(
            *(aggregator.get_snapshot(b.address, prefer_liquid=True) for b in boosts),
            return_exceptions=True,
        )

        tokens: list[TrendingToken] = []
        for boost, result in zip(boosts, results):
            if isinstance(result, DataFetchError):
                logger.warning(f"Skipping {boost.address[:8]}: {result.technical_message}")
                continue
            if isinstance(result, BaseException):
                raise result
            if result.liquidity_usd < self._min_liquidity:
                logger.debug(
                    f"Skipping {boost.address[:8]}: liquidity ${result.liquidity_usd:,.0f}"
                )
                continue
            tokens.append(TrendingToken(token=result, boost_amount=boost.total_amount))

        tokens.sort(key=lambda t: t.token.volume_24h_usd, reverse=True)
        logger.info(f"Trending: {len(tokens)} of {len(boosts)} boosted tokens qualify")
        return tokens[: self._limit]
