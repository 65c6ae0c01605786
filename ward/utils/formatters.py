"""
Output formatters for Telegram messages.

Converts reports into user-friendly Telegram messages.
Uses HTML formatting for better readability.
"""

from html import escape

from ward.core.models import (
    AlertType,
    AuditReport,
    AuditStatus,
    LiveAlert,
    RiskLevel,
    Severity,
    TokenReport,
    TrendingToken,
)

# Emoji mappings for risk levels
RISK_EMOJI = {
    RiskLevel.CRITICAL: "🟣",
    RiskLevel.HIGH: "🔴",
    RiskLevel.MEDIUM: "🟡",
    RiskLevel.LOW: "🟢",
}

SEVERITY_EMOJI = {
    Severity.CRITICAL: "‼️",
    Severity.HIGH: "❗",
    Severity.MEDIUM: "⚠️",
    Severity.LOW: "ℹ️",
}

AUDIT_EMOJI = {
    AuditStatus.PASS: "✅",
    AuditStatus.WARNING: "⚠️",
    AuditStatus.FAIL: "❌",
}

ALERT_EMOJI = {
    AlertType.CRITICAL: "🚨",
    AlertType.WARNING: "⚠️",
    AlertType.INFO: "ℹ️",
    AlertType.SUCCESS: "✅",
}


def format_usd(value: float) -> str:
    """Compact dollar amount: $1.2M, $45.3K, $812."""
    if value >= 1_000_000_000:
        return f"${value / 1_000_000_000:.1f}B"
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${value / 1_000:.1f}K"
    return f"${value:,.0f}"


def format_token_report(report: TokenReport) -> str:
    """
    Format a risk analysis as Telegram message.

    Creates a structured, readable message with:
    - Token header and market line
    - Risk level and score
    - Threat findings
    - Metrics
    - Recommendations

    Args:
        report: Analysis result from orchestrator

    Returns:
        Formatted HTML string for Telegram
    """
    token = report.token
    analysis = report.analysis
    metrics = analysis.metrics

    name = escape(token.name or "Unknown")
    symbol = escape(token.symbol or "?")

    threats = "\n".join(
        f"{SEVERITY_EMOJI[t.severity]} <b>{escape(t.type)}</b> ({t.confidence}%)\n"
        f"   {escape(t.description)}"
        for t in analysis.threats
    )
    recommendations = "\n".join(f"• {escape(r)}" for r in analysis.recommendations)

    message = f"""
<b>{name}</b> ({symbol})
{format_usd(token.market_cap_usd)} mcap · {format_usd(token.liquidity_usd)} liq · {token.price_change_24h:+.1f}% 24h

{format_risk_badge(analysis.risk_level)} <b>Risk score: {analysis.risk_score}/100</b>

<b>Threats:</b>
{threats}

<b>Metrics:</b>
• Insider activity: {metrics.insider_activity:.0f}
• Liquidity health: {metrics.liquidity_health:.0f}
• Price volatility: {metrics.price_volatility:.0f}
• 24h volume: {format_usd(metrics.trading_volume)}

<b>Recommendations:</b>
{recommendations}
""".strip()

    return message


def format_risk_badge(risk: RiskLevel) -> str:
    """
    Format a compact risk badge.

    Args:
        risk: Risk level

    Returns:
        Formatted badge like "🔴 HIGH"
    """
    return f"{RISK_EMOJI[risk]} {risk.value.upper()}"


def format_audit_report(report: AuditReport) -> str:
    """Format contract audit checks as Telegram message."""
    checks = "\n".join(
        f"{AUDIT_EMOJI[c.status]} <b>{escape(c.name)}</b>: {escape(c.description)}"
        for c in report.checks
    )
    label = escape(report.token_symbol or report.contract_address)

    return f"""
<b>Contract audit: {label}</b>
Score: <b>{report.overall_score}/100</b>

{checks}

<i>Scanned {report.scanned_at:%Y-%m-%d %H:%M:%S} UTC</i>
""".strip()


def format_alerts(alerts: list[LiveAlert]) -> str:
    """Format live alerts, one per line."""
    if not alerts:
        return "No new alerts right now. Check back in a couple of minutes."

    lines = []
    for alert in alerts:
        label = f"<code>{escape(alert.token)}</code>"
        if alert.token_name:
            label += f" {escape(alert.token_name)}"
        lines.append(f"{ALERT_EMOJI[alert.type]} {label}\n   {escape(alert.message)}")

    return "<b>Live alerts</b>\n\n" + "\n\n".join(lines)


def format_trending(tokens: list[TrendingToken]) -> str:
    """Format trending tokens as a ranked list."""
    if not tokens:
        return "No trending tokens right now. Check back in a few minutes."

    lines = []
    for rank, item in enumerate(tokens, start=1):
        token = item.token
        symbol = escape(token.symbol or "?")
        name = escape(token.name or "Unknown")
        lines.append(
            f"{rank}. <b>{symbol}</b> {name}\n"
            f"   Vol {format_usd(token.volume_24h_usd)} | "
            f"Liq {format_usd(token.liquidity_usd)} | "
            f"24h {token.price_change_24h:+.1f}% | "
            f"⚡ {item.boost_amount:,.0f}"
        )

    return "<b>Trending tokens</b>\n\n" + "\n\n".join(lines)
