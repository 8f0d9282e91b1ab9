from pydantic import BaseModel, ConfigDict, Field

from crypto_portfolio_tracker.infrastructure.adapters.dtos.types import NumericValue


class Trading212SummaryDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    total_deposits: NumericValue = Field(alias="totalDeposits", default=None)
    total_withdrawals: NumericValue = Field(alias="totalWithdrawals", default=None)
    net_deposits: NumericValue = Field(alias="netDeposits", default=None)
    interest_on_cash: NumericValue = Field(alias="interestOnCash", default=None)
    cashback: NumericValue = None
    card_debits: NumericValue = Field(alias="cardDebits", default=None)
    current_balance: NumericValue = Field(alias="currentBalance", default=None)
    transactions_count: int = Field(alias="transactionsCount", default=0)


class Trading212HoldingDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    ticker: str
    name: str | None = None
    shares: NumericValue = None
    average_buy_price: NumericValue = Field(alias="averageBuyPrice", default=None)
    current_price: NumericValue = Field(alias="currentPrice", default=None)
    total_invested: NumericValue = Field(alias="totalInvested", default=None)
    current_value: NumericValue = Field(alias="currentValue", default=None)
    profit_loss: NumericValue = Field(alias="profitLoss", default=None)
    profit_loss_percentage: NumericValue = Field(alias="profitLossPercentage", default=None)


class Trading212TotalsDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    total_invested: NumericValue = Field(alias="totalInvested", default=None)
    total_current_value: NumericValue = Field(alias="totalCurrentValue", default=None)
    profit_loss: NumericValue = Field(alias="profitLoss", default=None)
    profit_loss_percentage: NumericValue = Field(alias="profitLossPercentage", default=None)
    holdings_count: int = Field(alias="holdingsCount", default=0)
    holdings_with_prices: int = Field(alias="holdingsWithPrices", default=0)


class Trading212TransactionDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    portfolio_id: str | None = Field(alias="portfolioId", default=None)
    action: str
    time: str | None = None
    isin: str | None = None
    ticker: str | None = None
    name: str | None = None
    notes: str | None = None
    shares: NumericValue = None
    price_per_share: NumericValue = Field(alias="pricePerShare", default=None)
    price_currency: str | None = Field(alias="priceCurrency", default=None)
    result_amount: NumericValue = Field(alias="resultAmount", default=None)
    result_currency: str | None = Field(alias="resultCurrency", default=None)
    total_amount: NumericValue = Field(alias="totalAmount", default=None)
    total_currency: str | None = Field(alias="totalCurrency", default=None)
    merchant_name: str | None = Field(alias="merchantName", default=None)


class Trading212TransactionsPageDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    transactions: list[Trading212TransactionDto] = Field(default_factory=list)
    total: int = 0
