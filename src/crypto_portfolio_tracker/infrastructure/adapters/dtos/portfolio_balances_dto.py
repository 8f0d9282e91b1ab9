from pydantic import BaseModel, ConfigDict, Field

from crypto_portfolio_tracker.infrastructure.adapters.dtos.types import NumericValue


class BalancePortfolioRefDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str | None = None
    exchange: str | None = None


class BalanceHoldingDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    asset: str
    symbol: str | None = None
    quantity: NumericValue = None
    current_price: NumericValue = Field(alias="currentPrice", default=None)
    current_value: NumericValue = Field(alias="currentValue", default=None)


class PortfolioBalancesDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    portfolio: BalancePortfolioRefDto | None = None
    total_value: NumericValue = Field(alias="totalValue", default=None)
    holdings: list[BalanceHoldingDto] = Field(default_factory=list)
    updated_at: str | None = Field(alias="updatedAt", default=None)
