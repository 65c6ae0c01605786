"""
Services module - business logic layer.

Contains all services and the ServiceFactory for dependency injection.
"""

from ward.services.factory import ServiceFactory
from ward.services.orchestrator import AnalyzerOrchestrator

__all__ = ["ServiceFactory", "AnalyzerOrchestrator"]
