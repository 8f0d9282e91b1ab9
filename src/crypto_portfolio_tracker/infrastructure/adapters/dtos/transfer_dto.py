from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from crypto_portfolio_tracker.infrastructure.adapters.dtos.types import NumericValue

TransferType = Literal["DEPOSIT", "WITHDRAWAL"]


class TransferDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    portfolio_id: str | None = Field(alias="portfolioId", default=None)
    type: TransferType
    asset: str
    amount: NumericValue = None
    fee: NumericValue = None
    executed_at: str | None = Field(alias="executedAt", default=None)
    tx_id: str | None = Field(alias="txId", default=None)
    network: str | None = None
    source: str | None = None
    notes: str | None = None
