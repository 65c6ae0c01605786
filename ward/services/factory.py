"""
Service factory for dependency injection.

Creates and configures all services based on application settings.
Switches between mock and real implementations automatically.

This is the single point of service creation - all services
should be created through this factory.
"""

import logging

from ward.config.settings import Settings
from ward.core.protocols import TokenDataProvider, TTLStore
from ward.services.alerts.service import AlertService
from ward.services.audit.service import AuditService
from ward.services.orchestrator import AnalyzerOrchestrator
from ward.services.risk.service import RiskService
from ward.services.store import InMemoryTTLStore
from ward.services.token_data.aggregator import TokenDataAggregator
from ward.services.token_data.dexscreener_provider import DexScreenerProvider
from ward.services.token_data.mock_provider import MockTokenDataProvider
from ward.services.trending.service import TrendingService

logger = logging.getLogger(__name__)


class ServiceFactory:
    """
    Factory for creating application services.

    Reads configuration and creates appropriate service implementations:
    - Mock provider for development (USE_MOCK_SERVICES=true)
    - DexScreener provider for production (USE_MOCK_SERVICES=false)

    Usage:
        factory = ServiceFactory(settings)
        orchestrator = factory.create_orchestrator()
    """

    def __init__(self, settings: Settings):
        """
        Initialize factory with application settings.

        Args:
            settings: Application configuration
        """
        self._settings = settings
        self._log_mode()

    def _log_mode(self) -> None:
        """Log the current mode for debugging."""
        mode = "MOCK" if self._settings.use_mock_services else "PRODUCTION"
        logger.info(f"ServiceFactory initialized in {mode} mode")

    def create_token_data_provider(self) -> TokenDataProvider:
        """
        Create token data provider.

        Returns:
            TokenDataProvider implementation based on settings
        """
        if self._settings.use_mock_services:
            logger.debug("Creating MockTokenDataProvider")
            return MockTokenDataProvider()

        logger.debug("Creating DexScreenerProvider")
        return DexScreenerProvider(
            base_url=self._settings.dexscreener_base_url,
            timeout=self._settings.api_timeout_seconds,
        )

    def create_store(self) -> TTLStore:
        """Create a fresh in-memory TTL store."""
        return InMemoryTTLStore()

    def create_token_data_aggregator(self) -> TokenDataAggregator:
        """
        Create token data aggregator.

        Returns:
            TokenDataAggregator with provider and snapshot cache
        """
        provider = self.create_token_data_provider()
        logger.debug("Creating TokenDataAggregator")
        return TokenDataAggregator(
            provider,
            # Provider enforces its own per-request timeout; leave headroom
            timeout=self._settings.api_timeout_seconds + 2,
            cache=self.create_store(),
            cache_ttl=self._settings.snapshot_cache_seconds,
        )

    def create_risk_service(self) -> RiskService:
        """
        Create risk scoring service.

        Risk service uses the same logic for both mock and production.

        Returns:
            RiskService with default thresholds
        """
        logger.debug("Creating RiskService")
        return RiskService()

    def create_audit_service(self) -> AuditService:
        logger.debug("Creating AuditService")
        return AuditService()

    def create_alert_service(self) -> AlertService:
        logger.debug("Creating AlertService")
        return AlertService(
            cooldowns=self.create_store(),
            cooldown_seconds=self._settings.alert_cooldown_seconds,
            max_alerts=self._settings.max_alerts,
        )

    def create_trending_service(self) -> TrendingService:
        logger.debug("Creating TrendingService")
        return TrendingService()

    def create_orchestrator(self) -> AnalyzerOrchestrator:
        """
        Create the main analyzer orchestrator.

        This is the primary service used by handlers.
        Creates all dependencies automatically.

        Returns:
            AnalyzerOrchestrator ready for use
        """
        logger.info("Creating AnalyzerOrchestrator with all dependencies")

        return AnalyzerOrchestrator(
            aggregator=self.create_token_data_aggregator(),
            risk_service=self.create_risk_service(),
            audit_service=self.create_audit_service(),
            alert_service=self.create_alert_service(),
            trending_service=self.create_trending_service(),
        )
