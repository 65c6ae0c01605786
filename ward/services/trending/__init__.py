"""Trending tokens service."""

from ward.services.trending.service import TrendingService

__all__ = ["TrendingService"]
