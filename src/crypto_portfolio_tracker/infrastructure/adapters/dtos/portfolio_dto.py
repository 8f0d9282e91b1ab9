from pydantic import BaseModel, ConfigDict, Field

from crypto_portfolio_tracker.infrastructure.adapters.dtos.types import NumericValue


class PortfolioDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    user_id: str | None = Field(alias="userId", default=None)
    name: str
    description: str | None = None
    exchange: str | None = None
    total_invested: NumericValue = Field(alias="totalInvested", default=None)
    current_value: NumericValue = Field(alias="currentValue", default=None)
    profit_loss: NumericValue = Field(alias="profitLoss", default=None)
    total_fees: NumericValue = Field(alias="totalFees", default=None)
    created_at: str | None = Field(alias="createdAt", default=None)
    updated_at: str | None = Field(alias="updatedAt", default=None)


class CreatePortfolioDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    description: str | None = None
    exchange: str | None = None


class UpdatePortfolioDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    description: str | None = None
