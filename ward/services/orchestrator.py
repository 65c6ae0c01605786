"""
Analyzer orchestrator.

Coordinates the analysis workflows without containing business logic.
This is the entry point for handlers - it calls the services in the
correct order and returns the final result.

Workflows:
- analyze:     TokenDataAggregator → RiskService  → TokenReport
- audit:       TokenDataAggregator → AuditService → AuditReport
- live_alerts: AlertService (boosted tokens via aggregator) → [LiveAlert]
- trending:    TrendingService (boosted tokens via aggregator) → [TrendingToken]
"""

import logging

from ward.core.models import AuditReport, LiveAlert, TokenReport, TrendingToken
from ward.services.alerts.service import AlertService
from ward.services.audit.service import AuditService
from ward.services.risk.service import RiskService
from ward.services.token_data.aggregator import TokenDataAggregator
from ward.services.trending.service import TrendingService

logger = logging.getLogger(__name__)


class AnalyzerOrchestrator:
    """
    Orchestrates the token analysis workflows.

    This class coordinates between services but contains NO business logic.
    Each step is delegated to a specialized service:
    - Data fetching → TokenDataAggregator
    - Risk scoring → RiskService
    - Contract audit → AuditService
    - Live alerts → AlertService
    - Trending tokens → TrendingService

    Usage:
        orchestrator = AnalyzerOrchestrator(
            aggregator, risk_service, audit_service, alert_service, trending_service
        )
        report = await orchestrator.analyze("So111...")
    """

    def __init__(
        self,
        aggregator: TokenDataAggregator,
        risk_service: RiskService,
        audit_service: AuditService,
        alert_service: AlertService,
        trending_service: TrendingService,
    ):
        """
        Initialize orchestrator with all required services.

        Args:
            aggregator: Service for fetching token snapshots
            risk_service: Service for scoring risk
            audit_service: Service for contract audit checks
            alert_service: Service for live alerts
            trending_service: Service ranking boosted tokens by volume
        """
        self._aggregator = aggregator
        self._risk_service = risk_service
        self._audit_service = audit_service
        self._alert_service = alert_service
        self._trending_service = trending_service

    async def analyze(self, token_address: str) -> TokenReport:
        """
        Perform full token risk analysis.

        Args:
            token_address: Validated token address

        Returns:
            TokenReport with snapshot and risk assessment

        Raises:
            DataFetchError: If token data cannot be fetched
        """
        logger.info(f"Starting analysis for token: {token_address[:8]}...")

        snapshot = await self._aggregator.get_snapshot(token_address)
        assessment = self._risk_service.assess(snapshot)

        logger.info(
            f"Analysis complete for {snapshot.symbol}: "
            f"{assessment.risk_level.value} risk, score {assessment.risk_score}"
        )
        return TokenReport(token=snapshot, analysis=assessment)

    async def audit(self, token_address: str) -> AuditReport:
        """
        Run the contract audit for a token.

        Raises:
            DataFetchError: If token data cannot be fetched
        """
        logger.info(f"Starting audit for token: {token_address[:8]}...")
        snapshot = await self._aggregator.get_snapshot(token_address)
        return self._audit_service.audit(snapshot)

    async def live_alerts(self) -> list[LiveAlert]:
        """
        Scan boosted tokens for alerts.

        Raises:
            DataFetchError: If the boosted token list cannot be fetched
        """
        return await self._alert_service.scan(self._aggregator)

    async def trending(self) -> list[TrendingToken]:
        """
        List boosted tokens ordered by 24h volume.

        Raises:
            DataFetchError: If the boosted token list cannot be fetched
        """
        return await self._trending_service.top(self._aggregator)
