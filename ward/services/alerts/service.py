"""
Live alert service.

Scans boosted tokens and raises one alert per token, classified by the
first matching rule (most urgent first):

CRITICAL: |Δ24h| > 150%, liquidity < $3k with volume > $100k,
          liquidity/volume < 0.02 with volume > $50k
WARNING:  |Δ24h| > 80%, buys/sells < 0.3 with > 20 sells,
          liquidity < $10k with volume > $50k, Δ24h > +40%
SUCCESS:  buys/sells > 3 with > 30 buys, +15..+35% with buys/sells > 1.5,
          liquidity > $100k with liquidity/volume > 0.5
INFO:     |Δ24h| > 10%, otherwise "monitoring"

Tokens that produced an alert are put on cooldown in a TTL store so the
same token is not reported again for a while.
"""

import asyncio
import logging
import time
from collections.abc import Callable

from ward.core.exceptions import DataFetchError
from ward.core.models import AlertType, LiveAlert, TokenSnapshot
from ward.core.protocols import TTLStore
from ward.services.token_data.aggregator import TokenDataAggregator

logger = logging.getLogger(__name__)

DEFAULT_COOLDOWN = 120.0
DEFAULT_SCAN_LIMIT = 10
DEFAULT_MAX_ALERTS = 3


def shorten_address(address: str) -> str:
    """'EPjFWdd5...Dt1v' style display form."""
    if len(address) <= 10:
        return address
    return f"{address[:6]}...{address[-4:]}"


class AlertService:
    """
    Service producing live alerts for boosted tokens.

    Usage:
        service = AlertService(cooldowns=InMemoryTTLStore())
        alerts = await service.scan(aggregator)
    """

    def __init__(
        self,
        cooldowns: TTLStore,
        cooldown_seconds: float = DEFAULT_COOLDOWN,
        scan_limit: int = DEFAULT_SCAN_LIMIT,
        max_alerts: int = DEFAULT_MAX_ALERTS,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            cooldowns: Store remembering recently alerted tokens
            cooldown_seconds: How long a token stays silent after an alert
            scan_limit: How many boosted tokens to look at per scan
            max_alerts: How many alerts a scan returns at most
            clock: Wall-clock seconds, used for alert ids
        """
        self._cooldowns = cooldowns
        self._cooldown_seconds = cooldown_seconds
        self._scan_limit = scan_limit
        self._max_alerts = max_alerts
        self._clock = clock

    async def scan(
        self,
        aggregator: TokenDataAggregator,
        chain_id: str = "solana",
    ) -> list[LiveAlert]:
        """
        Classify the current boosted tokens.

        Tokens on cooldown are skipped. A token whose snapshot cannot be
        fetched is skipped as well; the scan itself only fails if the
        boosted list cannot be fetched.

        Raises:
            DataFetchError: If the boosted token list is unavailable
        """
        self._cooldowns.purge_expired()

        boosted = await aggregator.get_boosted_tokens(chain_id)
        candidates = [
            address
            for address in boosted[: self._scan_limit]
            if self._cooldowns.get(self._key(address)) is None
        ]
        logger.info(
            f"Scanning {len(candidates)} of {len(boosted)} boosted tokens "
            f"({len(boosted[: self._scan_limit]) - len(candidates)} on cooldown)"
        )

        results = await asyncio.gather(
            *(aggregator.get_snapshot(address, prefer_liquid=True) for address in candidates),
            return_exceptions=True,
        )

        alerts: list[LiveAlert] = []
        for address, result in zip(candidates, results):
            if isinstance(result, DataFetchError):
                logger.warning(f"Skipping {address[:8]}: {result.technical_message}")
                continue
            if isinstance(result, BaseException):
                raise result

            alerts.append(self.classify(result))
            self._cooldowns.put(self._key(address), True, self._cooldown_seconds)

        logger.info(f"Live scan produced {len(alerts)} alerts")
        return alerts[: self._max_alerts]

    def classify(self, snapshot: TokenSnapshot) -> LiveAlert:
        """
        Build the alert for one snapshot.

        Args:
            snapshot: Market snapshot of a boosted token

        Returns:
            LiveAlert of the first matching rule
        """
        alert_type, message = self._match(snapshot)
        return LiveAlert(
            id=f"{snapshot.address}-{int(self._clock() * 1000)}",
            type=alert_type,
            message=message,
            token=shorten_address(snapshot.address),
            token_address=snapshot.address,
            token_name=snapshot.symbol,
        )

    def _match(self, s: TokenSnapshot) -> tuple[AlertType, str]:
        change = s.price_change_24h
        swing = abs(change)
        volume = s.volume_24h_usd
        liquidity = s.liquidity_usd
        buys, sells = s.buys_24h, s.sells_24h
        buy_sell = buys / (sells or 1)
        liquidity_volume = liquidity / (volume or 1)

        if swing > 150:
            direction = "🚀 PUMP" if change > 0 else "💥 DUMP"
            return AlertType.CRITICAL, f"EXTREME {direction}: {swing:.0f}% swing detected!"
        if liquidity < 3_000 and volume > 100_000:
            return AlertType.CRITICAL, (
                f"🚨 RUG PULL RISK: ${liquidity / 1000:.1f}K liquidity, "
                f"${volume / 1000:.0f}K volume"
            )
        if liquidity_volume < 0.02 and volume > 50_000:
            return AlertType.CRITICAL, (
                "⚠️ MANIPULATION WARNING: Extremely low liquidity vs volume ratio"
            )
        if swing > 80:
            move = "📈 Rapid pump" if change > 0 else "📉 Sharp dump"
            return AlertType.WARNING, f"{move}: {swing:.0f}% in 24h"
        if buy_sell < 0.3 and sells > 20:
            return AlertType.WARNING, (
                f"🔻 SELLING PRESSURE: {sells} sells overwhelming {buys} buys"
            )
        if liquidity < 10_000 and volume > 50_000:
            return AlertType.WARNING, (
                f"⚡ Low liquidity alert: ${liquidity / 1000:.0f}K backing high volume"
            )
        if change > 40:
            return AlertType.WARNING, (
                f"📊 Volatile: +{change:.0f}% price surge - monitor for dump"
            )
        if buy_sell > 3 and buys > 30:
            return AlertType.SUCCESS, (
                f"✅ STRONG BUYING: {buys} buys vs {sells} sells - bullish momentum"
            )
        if 15 < change < 35 and buy_sell > 1.5:
            return AlertType.SUCCESS, (
                f"🟢 Healthy growth: +{change:.0f}% with strong buy support"
            )
        if liquidity > 100_000 and liquidity_volume > 0.5:
            return AlertType.SUCCESS, (
                f"💎 Solid liquidity: ${liquidity / 1000:.0f}K locked - low rug risk"
            )
        if swing > 10:
            return AlertType.INFO, f"📍 Moderate movement: {change:+.1f}% in 24h"

        label = s.symbol or shorten_address(s.address)
        return AlertType.INFO, f"👀 Monitoring {label} - stable trading activity"

    @staticmethod
    def _key(address: str) -> str:
        return f"alerted:{address}"
