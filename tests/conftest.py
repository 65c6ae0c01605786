"""
Pytest configuration and fixtures.

Provides reusable test fixtures for:
- Sample token snapshots
- Services with injectable clocks
- Test orchestrator
"""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from ward.core.models import TokenSnapshot
from ward.services.alerts.service import AlertService
from ward.services.audit.service import AuditService
from ward.services.orchestrator import AnalyzerOrchestrator
from ward.services.risk.service import RiskService
from ward.services.store import InMemoryTTLStore
from ward.services.token_data.aggregator import TokenDataAggregator
from ward.services.token_data.mock_provider import MockTokenDataProvider
from ward.services.trending.service import TrendingService


class FakeClock:
    """Manually advanced clock for TTL and id tests."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# =============================================================================
# Snapshot Fixtures
# =============================================================================


def _snapshot(**overrides) -> TokenSnapshot:
    """Quiet, established token; override fields to trigger rules."""
    values = {
        "address": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
        "name": "Quiet Token",
        "symbol": "QUIET",
        "price_usd": 1.0,
        "price_change_24h": 5.0,
        "liquidity_usd": 200_000.0,
        "market_cap_usd": 1_000_000.0,
        "fdv_usd": 1_000_000.0,
        "volume_24h_usd": 50_000.0,
        "buys_24h": 100,
        "sells_24h": 90,
        "age_days": 60.0,
        "has_website": True,
    }
    values.update(overrides)
    return TokenSnapshot(**values)


@pytest.fixture
def make_snapshot() -> Callable[..., TokenSnapshot]:
    """Factory building a low-risk snapshot with overrides."""
    return _snapshot


@pytest.fixture
def critical_snapshot() -> TokenSnapshot:
    """Pump, thin liquidity, heavy selling, hours old."""
    return _snapshot(
        price_change_24h=120.0,
        liquidity_usd=5_000.0,
        market_cap_usd=500_000.0,
        fdv_usd=500_000.0,
        volume_24h_usd=0.0,
        buys_24h=10,
        sells_24h=50,
        age_days=0.5,
    )


@pytest.fixture
def low_risk_snapshot() -> TokenSnapshot:
    """No rule triggers."""
    return _snapshot()


@pytest.fixture
def no_sells_snapshot() -> TokenSnapshot:
    """Zero sells: buy/sell ratio must use denominator 1."""
    return _snapshot(buys_24h=5, sells_24h=0)


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryTTLStore:
    """TTL store driven by the fake clock."""
    return InMemoryTTLStore(clock=clock)


@pytest.fixture
def risk_service() -> RiskService:
    """RiskService with default thresholds."""
    return RiskService()


@pytest.fixture
def audit_service() -> AuditService:
    """AuditService with a fixed scan time."""
    fixed = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    return AuditService(clock=lambda: fixed)


@pytest.fixture
def alert_service(store: InMemoryTTLStore, clock: FakeClock) -> AlertService:
    """AlertService sharing the fake clock with its cooldown store."""
    return AlertService(cooldowns=store, clock=clock)


@pytest.fixture
def trending_service() -> TrendingService:
    """TrendingService with default limits."""
    return TrendingService()


@pytest.fixture
def mock_token_provider() -> MockTokenDataProvider:
    """Mock token data provider."""
    return MockTokenDataProvider()


@pytest.fixture
def token_aggregator(mock_token_provider: MockTokenDataProvider) -> TokenDataAggregator:
    """Token data aggregator with mock provider and no cache."""
    return TokenDataAggregator(mock_token_provider)


@pytest.fixture
def orchestrator(
    token_aggregator: TokenDataAggregator,
    risk_service: RiskService,
    audit_service: AuditService,
    alert_service: AlertService,
    trending_service: TrendingService,
) -> AnalyzerOrchestrator:
    """Fully configured orchestrator with mock services."""
    return AnalyzerOrchestrator(
        aggregator=token_aggregator,
        risk_service=risk_service,
        audit_service=audit_service,
        alert_service=alert_service,
        trending_service=trending_service,
    )


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def valid_solana_address() -> str:
    """Valid Solana token address (USDC)."""
    return "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


@pytest.fixture
def another_valid_address() -> str:
    """Another valid Solana address (wrapped SOL)."""
    return "So11111111111111111111111111111111111111112"


@pytest.fixture
def invalid_addresses() -> list[str]:
    """List of invalid addresses for testing."""
    return [
        "",  # Empty
        "   ",  # Whitespace
        "abc",  # Too short
        "0x742d35Cc6634C0532925a3b844Bc9e7595f5bEb2",  # Ethereum
        "So11111111111111111111111111111111111111112!",  # Invalid char
        "O0Il" * 11,  # Invalid base58 chars
    ]
