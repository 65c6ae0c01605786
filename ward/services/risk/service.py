"""
Risk scoring engine.

Turns a TokenSnapshot into a RiskAssessment using independent additive rules.
This is the "brain" of Ward AI - a pure, synchronous transform with no I/O.

Rule categories (each contributes at most one finding, categories sum):
- Price volatility:  |24h change| > 100 / 50 / 25          → +35 / +25 / +15
- Liquidity:         liquidity/mcap < 0.02 / 0.05 / 0.10    → +30 / +20 / +10
- Selling pressure:  buys/sells < 0.3 / 0.6 / 0.9           → +25 / +15 / +8
- Token age:         age < 1 / 3 / 7 days                   → +20 / +15 / +10
- Volume:            volume/mcap > 2                        → +15

Score is clamped to [0, 100]. Level: ≥70 CRITICAL, ≥45 HIGH, ≥25 MEDIUM, else LOW.

Every ratio divides by (denominator or 1), so zero market cap or zero sells
never raises and never yields NaN.
"""

import logging
from dataclasses import dataclass

from ward.core.models import (
    RiskAssessment,
    RiskLevel,
    RiskMetrics,
    Severity,
    ThreatFinding,
    TokenSnapshot,
)

logger = logging.getLogger(__name__)

# Not computed: holder data is not part of the snapshot
HOLDER_CONCENTRATION_PLACEHOLDER = 35.0

NO_THREATS_FINDING = ThreatFinding(
    type="No Critical Threats Detected",
    severity=Severity.LOW,
    description=(
        "Token shows relatively normal trading patterns. "
        "Continue monitoring for changes."
    ),
    confidence=70,
)

LEVEL_RECOMMENDATIONS = {
    RiskLevel.CRITICAL: (
        "⚠️ EXTREME CAUTION: This token shows multiple critical red flags. "
        "Avoid or invest only what you can afford to lose completely."
    ),
    RiskLevel.HIGH: (
        "⚠️ HIGH RISK: Exercise extreme caution. "
        "This token shows significant warning signs."
    ),
    RiskLevel.MEDIUM: (
        "⚠️ MODERATE RISK: Monitor closely and be prepared for volatility."
    ),
    RiskLevel.LOW: (
        "✓ Relatively stable patterns detected. Continue monitoring for changes."
    ),
}

LIQUIDITY_LOCK_ADVICE = (
    "Verify liquidity is locked to prevent rug pulls. Check if LP tokens are burned."
)
NEW_TOKEN_ADVICE = (
    "New token - wait for more trading history before making large investments."
)
DUMP_CAUTION_ADVICE = (
    "High selling pressure detected - be cautious of potential dumps."
)
DISCLAIMERS = (
    "Always research the development team and project legitimacy.",
    "Never invest more than you can afford to lose in any cryptocurrency.",
)


@dataclass(frozen=True)
class RiskThresholds:
    """
    Trigger values for every scoring rule.

    Frozen dataclass ensures immutability.
    Tiers within a category are checked from most to least severe.
    """

    # 24h price change, absolute percent (strictly greater than)
    volatility_extreme: float = 100.0
    volatility_high: float = 50.0
    volatility_moderate: float = 25.0

    # Liquidity / market cap (strictly less than)
    liquidity_critical: float = 0.02
    liquidity_low: float = 0.05
    liquidity_moderate: float = 0.10

    # Buys / sells (strictly less than)
    selling_severe: float = 0.3
    selling_high: float = 0.6
    selling_moderate: float = 0.9

    # Token age in days (strictly less than)
    age_launch: float = 1.0
    age_very_new: float = 3.0
    age_new: float = 7.0

    # Volume / market cap (strictly greater than)
    volume_abnormal: float = 2.0

    # Score → level cut-offs (greater or equal)
    level_critical: int = 70
    level_high: int = 45
    level_medium: int = 25

    # Buys / sells below which the dump caution is added
    dump_caution_ratio: float = 0.7


@dataclass(frozen=True)
class RiskWeights:
    """Points added to the score by each rule."""

    volatility_extreme: int = 35
    volatility_high: int = 25
    volatility_moderate: int = 15

    liquidity_critical: int = 30
    liquidity_low: int = 20
    liquidity_moderate: int = 10

    selling_severe: int = 25
    selling_high: int = 15
    selling_moderate: int = 8

    age_launch: int = 20
    age_very_new: int = 15
    age_new: int = 10

    volume_abnormal: int = 15


RuleResult = tuple[int, ThreatFinding | None]


def _ratio(numerator: float, denominator: float) -> float:
    """Divide, substituting 1 for a zero denominator."""
    return numerator / (denominator or 1)


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(max(value, low), high)


class RiskService:
    """
    Service for scoring token risk from a market snapshot.

    Returns RiskAssessment containing:
    - risk_score: 0-100
    - risk_level: LOW/MEDIUM/HIGH/CRITICAL
    - threats: triggered findings in rule order
    - metrics: bounded display values
    - recommendations: advisory strings

    Stateless: the same instance can score snapshots from concurrent
    requests without synchronization.

    Usage:
        service = RiskService()
        assessment = service.assess(snapshot)
    """

    def __init__(
        self,
        thresholds: RiskThresholds | None = None,
        weights: RiskWeights | None = None,
    ):
        """
        Initialize with optional custom thresholds and weights.

        Args:
            thresholds: Custom rule triggers (uses defaults if None)
            weights: Custom rule points (uses defaults if None)
        """
        self._thresholds = thresholds or RiskThresholds()
        self._weights = weights or RiskWeights()

    def assess(self, snapshot: TokenSnapshot) -> RiskAssessment:
        """
        Score a token snapshot.

        Order of evaluation:
        1. Volatility, liquidity, selling pressure, age, volume rules
        2. Clamp score and derive level
        3. Derived metrics
        4. Recommendations

        Args:
            snapshot: Sanitized market snapshot

        Returns:
            RiskAssessment (never raises)
        """
        volatility = abs(snapshot.price_change_24h)
        liquidity_ratio = _ratio(snapshot.liquidity_usd, snapshot.market_cap_usd)
        buy_sell_ratio = _ratio(snapshot.buys_24h, snapshot.sells_24h)
        volume_ratio = _ratio(snapshot.volume_24h_usd, snapshot.market_cap_usd)

        logger.debug(
            f"Scoring {snapshot.symbol or snapshot.address[:8]}: "
            f"volatility={volatility:.1f}%, liquidity_ratio={liquidity_ratio:.4f}, "
            f"buy_sell={buy_sell_ratio:.2f}, age={snapshot.age_days:.1f}d, "
            f"volume_ratio={volume_ratio:.2f}"
        )

        rules = [
            self._volatility_rule(volatility),
            self._liquidity_rule(liquidity_ratio),
            self._selling_rule(buy_sell_ratio, snapshot.buys_24h, snapshot.sells_24h),
            self._age_rule(snapshot.age_days),
            self._volume_rule(volume_ratio),
        ]

        raw_score = sum(points for points, _ in rules)
        threats = [finding for _, finding in rules if finding is not None]
        if not threats:
            threats = [NO_THREATS_FINDING.model_copy()]

        risk_score = int(_clamp(round(raw_score)))
        risk_level = self.level_for_score(risk_score)

        logger.info(
            f"Token {snapshot.symbol or snapshot.address[:8]}: "
            f"{risk_level.value.upper()} risk (score={risk_score}, raw={raw_score})"
        )

        return RiskAssessment(
            risk_score=risk_score,
            risk_level=risk_level,
            threats=threats,
            metrics=self._metrics(snapshot, volatility, liquidity_ratio, buy_sell_ratio),
            recommendations=self._recommendations(
                risk_level, liquidity_ratio, snapshot.age_days, buy_sell_ratio
            ),
        )

    def level_for_score(self, score: int) -> RiskLevel:
        """
        Map a risk score to a level, highest threshold first.

        Args:
            score: Risk score 0-100

        Returns:
            RiskLevel for the score
        """
        t = self._thresholds
        if score >= t.level_critical:
            return RiskLevel.CRITICAL
        if score >= t.level_high:
            return RiskLevel.HIGH
        if score >= t.level_medium:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW

    def _volatility_rule(self, volatility: float) -> RuleResult:
        t, w = self._thresholds, self._weights

        if volatility > t.volatility_extreme:
            return w.volatility_extreme, ThreatFinding(
                type="Extreme Price Volatility",
                severity=Severity.CRITICAL,
                description=(
                    f"Token experienced {volatility:.1f}% price change in 24h. "
                    "This is a strong indicator of pump and dump schemes."
                ),
                confidence=95,
            )
        if volatility > t.volatility_high:
            return w.volatility_high, ThreatFinding(
                type="High Price Volatility",
                severity=Severity.HIGH,
                description=(
                    f"Token experienced {volatility:.1f}% price change in 24h, "
                    "indicating potential manipulation or high speculation."
                ),
                confidence=85,
            )
        if volatility > t.volatility_moderate:
            return w.volatility_moderate, ThreatFinding(
                type="Moderate Price Volatility",
                severity=Severity.MEDIUM,
                description=(
                    f"Token price changed {volatility:.1f}% in 24h. "
                    "Monitor for continued volatility."
                ),
                confidence=75,
            )
        return 0, None

    def _liquidity_rule(self, ratio: float) -> RuleResult:
        t, w = self._thresholds, self._weights
        percent = ratio * 100

        if ratio < t.liquidity_critical:
            return w.liquidity_critical, ThreatFinding(
                type="Critical Liquidity Risk",
                severity=Severity.CRITICAL,
                description=(
                    f"Liquidity is only {percent:.2f}% of market cap. "
                    "Extremely high rug pull risk."
                ),
                confidence=95,
            )
        if ratio < t.liquidity_low:
            return w.liquidity_low, ThreatFinding(
                type="Low Liquidity Risk",
                severity=Severity.HIGH,
                description=(
                    f"Liquidity is {percent:.2f}% of market cap. "
                    "Vulnerable to rug pulls and manipulation."
                ),
                confidence=90,
            )
        if ratio < t.liquidity_moderate:
            return w.liquidity_moderate, ThreatFinding(
                type="Moderate Liquidity Risk",
                severity=Severity.MEDIUM,
                description=(
                    f"Liquidity to market cap ratio is {percent:.2f}%. "
                    "Could be improved for better security."
                ),
                confidence=80,
            )
        return 0, None

    def _selling_rule(self, ratio: float, buys: int, sells: int) -> RuleResult:
        t, w = self._thresholds, self._weights

        if ratio < t.selling_severe:
            return w.selling_severe, ThreatFinding(
                type="Severe Selling Pressure",
                severity=Severity.CRITICAL,
                description=(
                    f"Sells ({sells}) heavily outweigh buys ({buys}). "
                    "Possible insider dumping."
                ),
                confidence=90,
            )
        if ratio < t.selling_high:
            return w.selling_high, ThreatFinding(
                type="High Selling Pressure",
                severity=Severity.HIGH,
                description=(
                    f"Sell transactions ({sells}) exceed buys ({buys}), "
                    "indicating bearish sentiment."
                ),
                confidence=80,
            )
        if ratio < t.selling_moderate:
            return w.selling_moderate, ThreatFinding(
                type="Moderate Selling Pressure",
                severity=Severity.MEDIUM,
                description=(
                    "More sells than buys detected. Monitor for trend continuation."
                ),
                confidence=70,
            )
        return 0, None

    def _age_rule(self, age_days: float) -> RuleResult:
        t, w = self._thresholds, self._weights

        if age_days < t.age_launch:
            return w.age_launch, ThreatFinding(
                type="Newly Launched Token",
                severity=Severity.HIGH,
                description=(
                    "Token launched less than 24 hours ago. "
                    "Extremely high risk period for manipulation."
                ),
                confidence=98,
            )
        if age_days < t.age_very_new:
            return w.age_very_new, ThreatFinding(
                type="Very New Token",
                severity=Severity.HIGH,
                description=(
                    f"Token is only {age_days:.1f} days old. "
                    "High risk for pump and dump schemes."
                ),
                confidence=95,
            )
        if age_days < t.age_new:
            return w.age_new, ThreatFinding(
                type="New Token Risk",
                severity=Severity.MEDIUM,
                description=(
                    f"Token is {age_days:.1f} days old. "
                    "Still in high-risk period for manipulation."
                ),
                confidence=85,
            )
        return 0, None

    def _volume_rule(self, ratio: float) -> RuleResult:
        if ratio > self._thresholds.volume_abnormal:
            return self._weights.volume_abnormal, ThreatFinding(
                type="Abnormal Trading Volume",
                severity=Severity.HIGH,
                description=(
                    f"24h volume is {ratio * 100:.0f}% of market cap. "
                    "May indicate wash trading or bot activity."
                ),
                confidence=80,
            )
        return 0, None

    def _metrics(
        self,
        snapshot: TokenSnapshot,
        volatility: float,
        liquidity_ratio: float,
        buy_sell_ratio: float,
    ) -> RiskMetrics:
        """Bounded 0-100 display values, independent of the score."""
        return RiskMetrics(
            insider_activity=round(_clamp((1 - buy_sell_ratio) * 100), 2),
            liquidity_health=round(_clamp(liquidity_ratio * 500), 2),
            holder_concentration=HOLDER_CONCENTRATION_PLACEHOLDER,
            trading_volume=snapshot.volume_24h_usd,
            price_volatility=round(_clamp(volatility * 1.2), 2),
        )

    def _recommendations(
        self,
        level: RiskLevel,
        liquidity_ratio: float,
        age_days: float,
        buy_sell_ratio: float,
    ) -> list[str]:
        """
        Build advisory strings in fixed order.

        One level advisory, then conditional advice, then two disclaimers.
        """
        t = self._thresholds
        recommendations = [LEVEL_RECOMMENDATIONS[level]]

        if liquidity_ratio < t.liquidity_moderate:
            recommendations.append(LIQUIDITY_LOCK_ADVICE)
        if age_days < t.age_new:
            recommendations.append(NEW_TOKEN_ADVICE)
        if buy_sell_ratio < t.dump_caution_ratio:
            recommendations.append(DUMP_CAUTION_ADVICE)

        recommendations.extend(DISCLAIMERS)
        return recommendations
