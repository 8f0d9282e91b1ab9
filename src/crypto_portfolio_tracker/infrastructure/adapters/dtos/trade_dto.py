from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from crypto_portfolio_tracker.infrastructure.adapters.dtos.types import NumericValue

TradeType = Literal["BUY", "SELL"]


class TradeDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    portfolio_id: str | None = Field(alias="portfolioId", default=None)
    symbol: str
    type: TradeType
    quantity: NumericValue = None
    price: NumericValue = None
    fee: NumericValue = None
    total: NumericValue = None
    executed_at: str | None = Field(alias="executedAt", default=None)
    external_id: str | None = Field(alias="externalId", default=None)
    source: str | None = None
    notes: str | None = None


class CreateTradeDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    symbol: str
    type: TradeType
    quantity: float
    price: float
    fee: float = 0.0
    executed_at: str | None = Field(alias="executedAt", default=None)
    notes: str | None = None
