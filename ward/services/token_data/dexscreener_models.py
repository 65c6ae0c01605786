"""
DexScreener response models.

Only the fields the snapshot needs are declared; everything else is ignored.
Numbers arrive either as JSON numbers or as strings (priceUsd), pydantic's
lax mode coerces both.
"""

from pydantic import BaseModel, Field


class DexScreenerToken(BaseModel):
    address: str = ""
    name: str | None = None
    symbol: str | None = None

    model_config = {"extra": "ignore"}


class DexScreenerTxns(BaseModel):
    buys: int | None = None
    sells: int | None = None

    model_config = {"extra": "ignore"}


class DexScreenerTxnsByPeriod(BaseModel):
    h24: DexScreenerTxns | None = None

    model_config = {"extra": "ignore"}


class DexScreenerPeriodValues(BaseModel):
    """Shape shared by `volume` and `priceChange`."""

    h24: float | None = None

    model_config = {"extra": "ignore"}


class DexScreenerLiquidity(BaseModel):
    usd: float | None = None

    model_config = {"extra": "ignore"}


class DexScreenerInfo(BaseModel):
    websites: list[dict] = Field(default_factory=list)

    model_config = {"extra": "ignore"}


class DexScreenerPair(BaseModel):
    chainId: str = ""
    dexId: str | None = None
    pairAddress: str | None = None
    baseToken: DexScreenerToken | None = None
    priceUsd: float | None = None
    priceChange: DexScreenerPeriodValues | None = None
    volume: DexScreenerPeriodValues | None = None
    liquidity: DexScreenerLiquidity | None = None
    fdv: float | None = None
    marketCap: float | None = None
    pairCreatedAt: int | None = None
    txns: DexScreenerTxnsByPeriod | None = None
    info: DexScreenerInfo | None = None

    model_config = {"extra": "ignore"}

    @property
    def liquidity_usd(self) -> float:
        if self.liquidity is None or self.liquidity.usd is None:
            return 0.0
        return self.liquidity.usd


class DexScreenerBoost(BaseModel):
    chainId: str = ""
    tokenAddress: str = ""
    totalAmount: float | None = None

    model_config = {"extra": "ignore"}
