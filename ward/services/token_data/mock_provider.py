"""
Mock token data provider for development.

Generates realistic-looking pair snapshots without making actual API calls.
Uses deterministic random generation based on address for consistent results.
"""

import hashlib
import random

from ward.core.models import TokenBoost, TokenSnapshot


class MockTokenDataProvider:
    """
    Mock implementation of TokenDataProvider protocol.

    Generates fake but realistic market data for development and testing.
    The same address always returns the same data (deterministic).
    Preset addresses return fixed snapshots for specific risk scenarios.

    Usage:
        provider = MockTokenDataProvider()
        snapshot = await provider.get_token_snapshot("So111...")
    """

    # Realistic token name/symbol pairs for mocking
    MOCK_TOKENS = [
        ("Bonk", "BONK"),
        ("Dogwifhat", "WIF"),
        ("Popcat", "POPCAT"),
        ("Myro", "MYRO"),
        ("Ponke", "PONKE"),
        ("Silly Dragon", "SILLY"),
        ("Wen", "WEN"),
        ("Jupiter", "JUP"),
        ("Raydium", "RAY"),
        ("Jito", "JTO"),
    ]

    MOCK_DEXES = ["raydium", "orca", "meteora", "pumpswap"]

    # Preset addresses for testing specific scenarios
    PRESETS = {
        # Critical: pump, thin liquidity, dumping, hours old
        "CriticaLRiskToken11111111111111111111111111": {
            "price_change_24h": 120.0,
            "liquidity_usd": 5_000.0,
            "market_cap_usd": 500_000.0,
            "volume_24h_usd": 80_000.0,
            "buys_24h": 10,
            "sells_24h": 50,
            "age_days": 0.5,
        },
        # Medium: moderate volatility, thin-ish liquidity, established pair
        "MediumRiskToken1111111111111111111111111111": {
            "price_change_24h": -30.0,
            "liquidity_usd": 60_000.0,
            "market_cap_usd": 1_000_000.0,
            "volume_24h_usd": 150_000.0,
            "buys_24h": 400,
            "sells_24h": 420,
            "age_days": 20.0,
        },
        # Low: nothing triggers
        "LowRiskToken1111111111111111111111111111111": {
            "price_change_24h": 5.0,
            "liquidity_usd": 200_000.0,
            "market_cap_usd": 1_000_000.0,
            "volume_24h_usd": 50_000.0,
            "buys_24h": 100,
            "sells_24h": 90,
            "age_days": 60.0,
        },
    }

    # Boost amounts reported for the presets
    PRESET_BOOSTS = [500.0, 250.0, 100.0]

    async def get_token_snapshot(
        self,
        address: str,
        prefer_liquid: bool = False,
    ) -> TokenSnapshot:
        """
        Generate a mock snapshot for the given address.

        Uses hash of address as random seed for deterministic results.
        Mock tokens have a single pair, so prefer_liquid changes nothing.

        Args:
            address: Token address
            prefer_liquid: Ignored

        Returns:
            TokenSnapshot with preset or generated values
        """
        if address in self.PRESETS:
            return TokenSnapshot(
                address=address,
                name="TestToken",
                symbol="TEST",
                dex_id="raydium",
                price_usd=0.01,
                fdv_usd=self.PRESETS[address]["market_cap_usd"],
                has_website=True,
                **self.PRESETS[address],
            )

        # Create deterministic seed from address
        seed = int(hashlib.md5(address.encode()).hexdigest(), 16) % (2**32)
        rng = random.Random(seed)

        name, symbol = rng.choice(self.MOCK_TOKENS)
        market_cap = rng.uniform(50_000, 20_000_000)
        liquidity = market_cap * rng.uniform(0.005, 0.3)

        return TokenSnapshot(
            address=address,
            name=name,
            symbol=symbol,
            dex_id=rng.choice(self.MOCK_DEXES),
            price_usd=round(rng.uniform(0.000001, 2.0), 8),
            price_change_24h=round(rng.uniform(-80, 160), 2),
            liquidity_usd=round(liquidity, 2),
            market_cap_usd=round(market_cap, 2),
            fdv_usd=round(market_cap * rng.uniform(1.0, 1.5), 2),
            volume_24h_usd=round(market_cap * rng.uniform(0.01, 3.0), 2),
            buys_24h=rng.randint(5, 5_000),
            sells_24h=rng.randint(5, 5_000),
            age_days=round(rng.uniform(0.05, 365), 2),
            has_website=rng.random() > 0.4,  # 60% list a website
        )

    async def get_boosted_tokens(self, chain_id: str = "solana") -> list[str]:
        """Return preset addresses as the boosted list."""
        return [boost.address for boost in await self.get_token_boosts(chain_id)]

    async def get_token_boosts(self, chain_id: str = "solana") -> list[TokenBoost]:
        """Return preset addresses with fixed boost amounts."""
        if chain_id != "solana":
            return []
        return [
            TokenBoost(address=address, chain_id=chain_id, total_amount=amount)
            for address, amount in zip(self.PRESETS, self.PRESET_BOOSTS)
        ]
