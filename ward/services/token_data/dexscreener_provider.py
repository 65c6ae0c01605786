"""
DexScreener token data provider.

Fetches trading-pair data from the public DexScreener API.
This is the real implementation used in production.

Responsibilities:
1. Fetch pairs via /latest/dex/tokens/{address}
2. Pick DexScreener's first-ranked pair, or the deepest one on request
3. Normalize it into TokenSnapshot (missing numbers → 0)
4. Map rate limiting, missing tokens and network failures to our exceptions

NO business logic, NO risk calculation.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from ward.core.exceptions import (
    DataFetchError,
    RateLimitError,
    TokenNotFoundError,
    WardError,
)
from ward.core.models import TokenBoost, TokenSnapshot
from ward.services.token_data.dexscreener_models import (
    DexScreenerBoost,
    DexScreenerPair,
)

logger = logging.getLogger(__name__)

DEXSCREENER_API_URL = "https://api.dexscreener.com"

DEFAULT_TIMEOUT = 10.0

MS_PER_DAY = 1000 * 60 * 60 * 24


class DexScreenerProvider:
    """
    Real implementation of TokenDataProvider using DexScreener.

    Uses:
    - /latest/dex/tokens/{address} for pair snapshots
    - /token-boosts/top/v1 for boosted tokens

    No API key required. DexScreener rate-limits aggressively and sometimes
    answers with an HTML page instead of JSON; both cases raise RateLimitError.
    """

    def __init__(
        self,
        base_url: str = DEXSCREENER_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize DexScreener provider.

        Args:
            base_url: API root (overridable for tests)
            timeout: Request timeout in seconds
            clock: Wall-clock seconds, used to compute pair age
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._clock = clock

    async def get_token_snapshot(
        self,
        address: str,
        prefer_liquid: bool = False,
    ) -> TokenSnapshot:
        """
        Fetch the snapshot of one pair for a token.

        Args:
            address: Token mint address
            prefer_liquid: Pick the pair with the deepest USD liquidity
                instead of DexScreener's first-ranked pair

        Returns:
            TokenSnapshot built from the chosen pair

        Raises:
            RateLimitError: HTTP 429 or non-JSON body
            TokenNotFoundError: No pairs for the token
            DataFetchError: Any other failure
        """
        logger.info(f"Fetching pairs from DexScreener: {address[:8]}...")

        data = await self._fetch_json(f"{self._base_url}/latest/dex/tokens/{address}")

        raw_pairs = data.get("pairs") if isinstance(data, dict) else None
        if not raw_pairs:
            raise TokenNotFoundError(
                technical_message=f"DexScreener returned no pairs for {address}"
            )

        try:
            pairs = [DexScreenerPair.model_validate(p) for p in raw_pairs]
        except PydanticValidationError as e:
            raise DataFetchError(
                technical_message=f"Malformed DexScreener pair: {e}"
            ) from e

        if prefer_liquid:
            # max() keeps the first pair on ties, which is DexScreener's own ranking
            chosen = max(pairs, key=lambda p: p.liquidity_usd)
        else:
            chosen = pairs[0]
        logger.debug(
            f"Selected pair {chosen.pairAddress} on {chosen.dexId} "
            f"(liquidity=${chosen.liquidity_usd:,.0f}, {len(pairs)} pairs)"
        )
        return self._build_snapshot(address, chosen)

    async def get_boosted_tokens(self, chain_id: str = "solana") -> list[str]:
        """Addresses of top boosted tokens on a chain, in feed order."""
        return [boost.address for boost in await self.get_token_boosts(chain_id)]

    async def get_token_boosts(self, chain_id: str = "solana") -> list[TokenBoost]:
        """
        Fetch top boosted tokens on a chain.

        Order from DexScreener is preserved; repeated addresses keep
        their first entry.
        """
        data = await self._fetch_json(f"{self._base_url}/token-boosts/top/v1")
        if not isinstance(data, list):
            raise DataFetchError(
                technical_message=f"Unexpected boosts payload: {type(data).__name__}"
            )

        boosts: dict[str, TokenBoost] = {}
        for item in data:
            try:
                entry = DexScreenerBoost.model_validate(item)
                if entry.chainId != chain_id or not entry.tokenAddress:
                    continue
                boost = TokenBoost(
                    address=entry.tokenAddress,
                    chain_id=entry.chainId,
                    total_amount=entry.totalAmount or 0.0,
                )
            except PydanticValidationError:
                logger.debug(f"Skipping malformed boost entry: {item!r}")
                continue
            boosts.setdefault(boost.address, boost)

        logger.info(f"Fetched {len(boosts)} boosted {chain_id} tokens")
        return list(boosts.values())

    async def _fetch_json(self, url: str) -> Any:
        """GET a DexScreener endpoint and decode JSON, mapping failures."""
        timeout = aiohttp.ClientTimeout(total=self._timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(
                    url, headers={"Accept": "application/json"}
                ) as resp:
                    if resp.status == 429:
                        logger.warning("Rate limited by DexScreener")
                        raise RateLimitError(
                            technical_message=f"DexScreener 429 for {url}"
                        )

                    if resp.status != 200:
                        raise DataFetchError(
                            technical_message=f"DexScreener API error: {resp.status}"
                        )

                    if "application/json" not in (resp.content_type or ""):
                        logger.warning(
                            f"Non-JSON response from DexScreener ({resp.content_type}), "
                            "likely rate limited"
                        )
                        raise RateLimitError(
                            message=(
                                "DexScreener API is temporarily unavailable. "
                                "Please try again in 60 seconds."
                            ),
                            technical_message=f"Non-JSON response: {resp.content_type}",
                        )

                    try:
                        return await resp.json()
                    except ValueError as e:
                        raise RateLimitError(
                            technical_message=f"Failed to parse DexScreener response: {e}"
                        ) from e

        except WardError:
            raise
        except TimeoutError:
            logger.error(f"DexScreener timeout after {self._timeout}s")
            raise DataFetchError(
                message="Request took too long. Please try again later.",
                technical_message=f"DexScreener timeout after {self._timeout}s",
            ) from None
        except aiohttp.ClientError as e:
            logger.error(f"DexScreener request failed: {e}")
            raise DataFetchError(
                technical_message=f"DexScreener error: {type(e).__name__}: {e}"
            ) from e

    def _build_snapshot(self, address: str, pair: DexScreenerPair) -> TokenSnapshot:
        """
        Build TokenSnapshot from a pair.

        Missing numeric fields become 0. Market cap falls back to FDV.
        A pair without a creation time is treated as brand new (age 0).
        """
        base = pair.baseToken
        txns = pair.txns.h24 if pair.txns and pair.txns.h24 else None

        age_days = 0.0
        if pair.pairCreatedAt:
            now_ms = self._clock() * 1000
            age_days = max(0.0, (now_ms - pair.pairCreatedAt) / MS_PER_DAY)

        fdv = pair.fdv or 0.0

        return TokenSnapshot(
            address=address,
            name=base.name if base else None,
            symbol=base.symbol if base else None,
            chain_id=pair.chainId or "solana",
            dex_id=pair.dexId,
            pair_address=pair.pairAddress,
            price_usd=pair.priceUsd or 0.0,
            price_change_24h=(pair.priceChange.h24 if pair.priceChange else None) or 0.0,
            liquidity_usd=pair.liquidity_usd,
            market_cap_usd=pair.marketCap or fdv,
            fdv_usd=fdv,
            volume_24h_usd=(pair.volume.h24 if pair.volume else None) or 0.0,
            buys_24h=(txns.buys if txns else None) or 0,
            sells_24h=(txns.sells if txns else None) or 0,
            age_days=age_days,
            has_website=bool(pair.info and pair.info.websites),
        )
