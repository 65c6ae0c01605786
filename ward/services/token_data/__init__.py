"""Token data services."""

from ward.services.token_data.aggregator import TokenDataAggregator
from ward.services.token_data.dexscreener_provider import DexScreenerProvider
from ward.services.token_data.mock_provider import MockTokenDataProvider

__all__ = ["TokenDataAggregator", "DexScreenerProvider", "MockTokenDataProvider"]
