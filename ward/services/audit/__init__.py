"""Contract audit service."""

from ward.services.audit.service import AuditService, AuditThresholds

__all__ = ["AuditService", "AuditThresholds"]
