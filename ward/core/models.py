"""
Pydantic models for Ward AI.

All data structures used throughout the application are defined here.
Models provide:
- Type safety
- Automatic validation
- JSON serialization (camelCase keys for the presentation layer)
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class RiskLevel(str, Enum):
    """
    Overall token risk level.

    Derived from the numeric risk score via fixed thresholds.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Severity(str, Enum):
    """Severity of a single threat finding."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AuditStatus(str, Enum):
    """Outcome of one contract audit check."""

    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


class AlertType(str, Enum):
    """Live alert category, ordered from most to least urgent."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class _CamelModel(BaseModel):
    """Base for models exposed to the presentation layer."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class TokenSnapshot(_CamelModel):
    """
    Point-in-time market data for one trading pair.

    Built by a TokenDataProvider. Missing numeric fields are already
    replaced with 0 by the time a snapshot exists, so consumers never
    need to handle None.
    """

    address: str
    """Token address (opaque string)"""

    name: str | None = None
    """Token name (e.g., 'Bonk')"""

    symbol: str | None = None
    """Token symbol (e.g., 'BONK')"""

    chain_id: str = "solana"
    """DexScreener chain id of the pair"""

    dex_id: str | None = None
    """DEX the pair trades on (e.g., 'raydium')"""

    pair_address: str | None = None
    """Pair contract address"""

    price_usd: float = Field(default=0.0, ge=0)
    """Last price in USD"""

    price_change_24h: float = 0.0
    """Signed 24h price change, in percent"""

    liquidity_usd: float = Field(default=0.0, ge=0)
    """Pool liquidity in USD"""

    market_cap_usd: float = Field(default=0.0, ge=0)
    """Market capitalisation in USD"""

    fdv_usd: float = Field(default=0.0, ge=0)
    """Fully diluted valuation in USD"""

    volume_24h_usd: float = Field(default=0.0, ge=0)
    """Traded volume over the last 24h in USD"""

    buys_24h: int = Field(default=0, ge=0)
    """Buy transactions in the last 24h"""

    sells_24h: int = Field(default=0, ge=0)
    """Sell transactions in the last 24h"""

    age_days: float = Field(default=0.0, ge=0)
    """Days since the pair was created"""

    has_website: bool = False
    """Whether the pair lists at least one website"""

    model_config = {"from_attributes": True, "allow_inf_nan": False}


class ThreatFinding(_CamelModel):
    """Output record of one triggered scoring rule."""

    type: str
    """Category label (e.g., 'Extreme Price Volatility')"""

    severity: Severity

    description: str
    """Human-readable, parameterised with the triggering value"""

    confidence: int = Field(ge=0, le=100)
    """Fixed per rule, not a statistical estimate"""


class RiskMetrics(_CamelModel):
    """Display metrics derived alongside the score."""

    insider_activity: float = Field(ge=0, le=100)
    liquidity_health: float = Field(ge=0, le=100)
    holder_concentration: float
    """Placeholder constant; holder data is not fetched"""
    trading_volume: float = Field(ge=0)
    price_volatility: float = Field(ge=0, le=100)


class RiskAssessment(_CamelModel):
    """
    Result of scoring one snapshot.

    JSON example (``to_dict()``):
    {
        "riskScore": 100,
        "riskLevel": "critical",
        "threats": [{"type": "...", "severity": "critical", ...}],
        "metrics": {"insiderActivity": 80.0, ...},
        "recommendations": ["...", "..."]
    }
    """

    risk_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    threats: list[ThreatFinding] = Field(min_length=1)
    metrics: RiskMetrics
    recommendations: list[str]


class TokenReport(_CamelModel):
    """Snapshot together with its assessment, as returned by analyze()."""

    token: TokenSnapshot
    analysis: RiskAssessment


class AuditCheck(_CamelModel):
    """One contract audit check."""

    name: str
    status: AuditStatus
    description: str


class AuditReport(_CamelModel):
    """Contract audit result for one token."""

    contract_address: str
    overall_score: int = Field(ge=0, le=100)
    """Share of passed checks, in percent"""
    checks: list[AuditCheck]
    scanned_at: datetime
    token_name: str | None = None
    token_symbol: str | None = None
    liquidity_usd: float = 0.0
    fdv_usd: float = 0.0
    volume_24h_usd: float = 0.0


class LiveAlert(_CamelModel):
    """Alert raised for a boosted token during a live scan."""

    id: str
    type: AlertType
    message: str
    token: str
    """Shortened address for display (e.g., 'EPjFWd...Dt1v')"""
    token_address: str
    token_name: str | None = None


class TokenBoost(_CamelModel):
    """One entry of the DexScreener boosts feed."""

    address: str
    chain_id: str = "solana"
    total_amount: float = Field(default=0.0, ge=0)
    """Boost units paid for the token"""


class TrendingToken(_CamelModel):
    """Boosted token with the market data of its deepest pair."""

    token: TokenSnapshot
    boost_amount: float = 0.0
