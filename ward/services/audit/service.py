"""
Contract audit service.

Runs a fixed list of pass/warning/fail checks over a market snapshot and
reports the share of passed checks. The checks are proxies built from
DexScreener data only; nothing here reads the contract on-chain.

Checks (in order):
- Ownership Renounced:  pair lists a website              → pass, else warning
- Liquidity Locked:     liquidity > $10k                  → pass, else fail
- No Mint Function:     SPL tokens cannot mint arbitrarily → always pass
- Trading Active:       > 10 transactions in 24h          → pass, else warning
- Honeypot Detection:   at least one sell in 24h          → pass, else fail
- Liquidity Ratio:      liquidity / FDV > 5%              → pass, else warning
- Contract Verified:    pair is on Solana                 → pass, else warning
- Buy/Sell Balance:     buys > half of sells              → pass, else warning
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from ward.core.models import AuditCheck, AuditReport, AuditStatus, TokenSnapshot

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AuditThresholds:
    """Threshold values for the audit checks."""

    min_locked_liquidity: float = 10_000
    min_transactions: int = 10
    min_liquidity_fdv_ratio: float = 0.05
    min_buy_to_sell: float = 0.5
    verified_chain: str = "solana"


class AuditService:
    """
    Service for auditing a token from its market snapshot.

    Usage:
        service = AuditService()
        report = service.audit(snapshot)
    """

    def __init__(
        self,
        thresholds: AuditThresholds | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._thresholds = thresholds or AuditThresholds()
        self._clock = clock

    def audit(self, snapshot: TokenSnapshot) -> AuditReport:
        """
        Run all checks against a snapshot.

        Args:
            snapshot: Market snapshot of the token

        Returns:
            AuditReport with checks in fixed order and overall score
        """
        checks = self._run_checks(snapshot)
        passed = sum(1 for c in checks if c.status is AuditStatus.PASS)
        # Half-up: 5 of 8 checks is 63, not 62
        overall_score = math.floor(passed / len(checks) * 100 + 0.5)

        logger.info(
            f"Audit for {snapshot.symbol or snapshot.address[:8]}: "
            f"{passed}/{len(checks)} passed ({overall_score}%)"
        )

        return AuditReport(
            contract_address=snapshot.address,
            overall_score=overall_score,
            checks=checks,
            scanned_at=self._clock(),
            token_name=snapshot.name,
            token_symbol=snapshot.symbol,
            liquidity_usd=snapshot.liquidity_usd,
            fdv_usd=snapshot.fdv_usd,
            volume_24h_usd=snapshot.volume_24h_usd,
        )

    def _run_checks(self, s: TokenSnapshot) -> list[AuditCheck]:
        t = self._thresholds
        total_txns = s.buys_24h + s.sells_24h
        liquidity_fdv = s.liquidity_usd / s.fdv_usd if s.fdv_usd > 0 else 0.0

        def status(ok: bool, otherwise: AuditStatus = AuditStatus.WARNING) -> AuditStatus:
            return AuditStatus.PASS if ok else otherwise

        return [
            AuditCheck(
                name="Ownership Renounced",
                status=status(s.has_website),
                description="Contract ownership status on Solana",
            ),
            AuditCheck(
                name="Liquidity Locked",
                status=status(s.liquidity_usd > t.min_locked_liquidity, AuditStatus.FAIL),
                description=f"Current liquidity: ${s.liquidity_usd:,.0f}",
            ),
            AuditCheck(
                name="No Mint Function",
                status=AuditStatus.PASS,
                description="SPL token standard - no arbitrary minting",
            ),
            AuditCheck(
                name="Trading Active",
                status=status(total_txns > t.min_transactions),
                description=f"{total_txns} transactions in last 24h",
            ),
            AuditCheck(
                name="Honeypot Detection",
                status=status(s.sells_24h > 0, AuditStatus.FAIL),
                description=f"{s.sells_24h} sell transactions detected",
            ),
            AuditCheck(
                name="Liquidity Ratio",
                status=status(liquidity_fdv > t.min_liquidity_fdv_ratio),
                description=f"Liquidity/FDV ratio: {liquidity_fdv * 100:.2f}%",
            ),
            AuditCheck(
                name="Contract Verified",
                status=status(s.chain_id == t.verified_chain),
                description="Token verified on Solana blockchain",
            ),
            AuditCheck(
                name="Buy/Sell Balance",
                status=status(s.buys_24h > s.sells_24h * t.min_buy_to_sell),
                description=f"{s.buys_24h} buys vs {s.sells_24h} sells",
            ),
        ]
