from pydantic import BaseModel, ConfigDict, Field

from crypto_portfolio_tracker.infrastructure.adapters.dtos.types import NumericValue


class HoldingDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    symbol: str
    quantity: NumericValue = None
    average_price: NumericValue = Field(alias="averagePrice", default=None)
    current_price: NumericValue = Field(alias="currentPrice", default=None)
    total_invested: NumericValue = Field(alias="totalInvested", default=None)
    current_value: NumericValue = Field(alias="currentValue", default=None)
    profit_loss: NumericValue = Field(alias="profitLoss", default=None)
    profit_loss_percentage: NumericValue = Field(alias="profitLossPercentage", default=None)
