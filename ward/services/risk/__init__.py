"""Risk scoring engine."""

from ward.services.risk.service import RiskService, RiskThresholds, RiskWeights

__all__ = ["RiskService", "RiskThresholds", "RiskWeights"]
