"""
Core module - models, protocols, and exceptions.

This module contains the fundamental building blocks of the application:
- Data models (Pydantic)
- Protocol definitions (interfaces)
- Custom exceptions
"""

from ward.core.exceptions import (
    DataFetchError,
    RateLimitError,
    TokenNotFoundError,
    ValidationError,
    WardError,
)
from ward.core.models import (
    AlertType,
    AuditCheck,
    AuditReport,
    AuditStatus,
    LiveAlert,
    TokenBoost,
    TrendingToken,
    RiskAssessment,
    RiskLevel,
    RiskMetrics,
    Severity,
    ThreatFinding,
    TokenReport,
    TokenSnapshot,
)
from ward.core.protocols import TokenDataProvider, TTLStore

__all__ = [
    # Exceptions
    "WardError",
    "ValidationError",
    "DataFetchError",
    "RateLimitError",
    "TokenNotFoundError",
    # Models
    "RiskLevel",
    "Severity",
    "AuditStatus",
    "AlertType",
    "TokenSnapshot",
    "ThreatFinding",
    "RiskMetrics",
    "RiskAssessment",
    "TokenReport",
    "AuditCheck",
    "AuditReport",
    "LiveAlert",
    "TokenBoost",
    "TrendingToken",
    # Protocols
    "TokenDataProvider",
    "TTLStore",
]
