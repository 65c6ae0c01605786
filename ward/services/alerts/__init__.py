"""Live alert service."""

from ward.services.alerts.service import AlertService

__all__ = ["AlertService"]
