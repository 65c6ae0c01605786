"""
Tests for AnalyzerOrchestrator.

Integration tests that verify the full flows over the mock provider:
- Risk analysis
- Contract audit
- Live alerts
- Trending tokens
"""

import pytest

from ward.config.settings import Settings
from ward.core.models import AuditReport, RiskLevel, TokenReport, TrendingToken
from ward.services.factory import ServiceFactory
from ward.services.orchestrator import AnalyzerOrchestrator
from ward.services.token_data.dexscreener_provider import DexScreenerProvider
from ward.services.token_data.mock_provider import MockTokenDataProvider
from ward.utils.validators import validate_solana_address

CRITICAL_PRESET = "CriticaLRiskToken11111111111111111111111111"
MEDIUM_PRESET = "MediumRiskToken1111111111111111111111111111"
LOW_PRESET = "LowRiskToken1111111111111111111111111111111"


class TestOrchestratorAnalysis:
    """Integration tests for analyze method."""

    @pytest.mark.asyncio
    async def test_analyze_returns_report(
        self,
        orchestrator: AnalyzerOrchestrator,
        valid_solana_address: str,
    ) -> None:
        report = await orchestrator.analyze(valid_solana_address)

        assert isinstance(report, TokenReport)
        assert report.token.address == valid_solana_address
        assert 0 <= report.analysis.risk_score <= 100
        assert report.analysis.threats

    @pytest.mark.asyncio
    async def test_analyze_is_deterministic(
        self,
        orchestrator: AnalyzerOrchestrator,
        another_valid_address: str,
    ) -> None:
        first = await orchestrator.analyze(another_valid_address)
        second = await orchestrator.analyze(another_valid_address)

        assert first == second

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "address,score,level",
        [
            (CRITICAL_PRESET, 100, RiskLevel.CRITICAL),
            (MEDIUM_PRESET, 25, RiskLevel.MEDIUM),
            (LOW_PRESET, 0, RiskLevel.LOW),
        ],
    )
    async def test_preset_scenarios(
        self,
        orchestrator: AnalyzerOrchestrator,
        address: str,
        score: int,
        level: RiskLevel,
    ) -> None:
        report = await orchestrator.analyze(address)

        assert report.analysis.risk_score == score
        assert report.analysis.risk_level == level

    @pytest.mark.parametrize("address", list(MockTokenDataProvider.PRESETS))
    def test_preset_addresses_pass_validation(self, address: str) -> None:
        """Presets must survive the same check a chat message goes through."""
        assert validate_solana_address(address) == (True, None)


class TestOrchestratorAudit:
    @pytest.mark.asyncio
    async def test_audit_returns_report(
        self,
        orchestrator: AnalyzerOrchestrator,
        valid_solana_address: str,
    ) -> None:
        report = await orchestrator.audit(valid_solana_address)

        assert isinstance(report, AuditReport)
        assert report.contract_address == valid_solana_address
        assert len(report.checks) == 8


class TestOrchestratorAlerts:
    @pytest.mark.asyncio
    async def test_live_alerts(self, orchestrator: AnalyzerOrchestrator) -> None:
        alerts = await orchestrator.live_alerts()

        assert len(alerts) == 3
        assert {a.token_address for a in alerts} == set(MockTokenDataProvider.PRESETS)


class TestOrchestratorTrending:
    @pytest.mark.asyncio
    async def test_trending_orders_presets_by_volume(
        self,
        orchestrator: AnalyzerOrchestrator,
    ) -> None:
        tokens = await orchestrator.trending()

        assert all(isinstance(t, TrendingToken) for t in tokens)
        assert [t.token.address for t in tokens] == [MEDIUM_PRESET, CRITICAL_PRESET, LOW_PRESET]
        assert [t.boost_amount for t in tokens] == [250, 500, 100]


class TestServiceFactory:
    """Wiring from settings."""

    def _settings(self, **overrides) -> Settings:
        return Settings(_env_file=None, telegram_bot_token="123:test", **overrides)

    def test_production_flag_follows_environment(self) -> None:
        assert self._settings(environment="production").is_production is True
        assert self._settings(environment="development").is_production is False

    def test_mock_mode_uses_mock_provider(self) -> None:
        factory = ServiceFactory(self._settings(use_mock_services=True))
        assert isinstance(factory.create_token_data_provider(), MockTokenDataProvider)

    def test_production_mode_uses_dexscreener(self) -> None:
        factory = ServiceFactory(self._settings(use_mock_services=False))
        assert isinstance(factory.create_token_data_provider(), DexScreenerProvider)

    @pytest.mark.asyncio
    async def test_factory_orchestrator_runs(self, valid_solana_address: str) -> None:
        orchestrator = ServiceFactory(self._settings()).create_orchestrator()

        report = await orchestrator.analyze(valid_solana_address)

        assert report.token.address == valid_solana_address
