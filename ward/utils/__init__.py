"""Utility functions: address validation and message formatting."""

from ward.utils.formatters import (
    format_alerts,
    format_audit_report,
    format_risk_badge,
    format_token_report,
    format_trending,
    format_usd,
)
from ward.utils.validators import (
    require_solana_address,
    sanitize_input,
    validate_solana_address,
)

__all__ = [
    "format_alerts",
    "format_audit_report",
    "format_risk_badge",
    "format_token_report",
    "format_trending",
    "format_usd",
    "require_solana_address",
    "sanitize_input",
    "validate_solana_address",
]
