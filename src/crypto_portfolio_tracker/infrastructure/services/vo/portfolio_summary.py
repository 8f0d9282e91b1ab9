import dataclasses
from dataclasses import dataclass

from crypto_portfolio_tracker.commons.utils import calculate_percentage, format_percentage, to_optional_float
from crypto_portfolio_tracker.infrastructure.adapters.dtos.portfolio_dto import PortfolioDto
from crypto_portfolio_tracker.infrastructure.services.enums import ExchangeEnum, PortfolioViewModeEnum


@dataclass(frozen=True, kw_only=True)
class PortfolioSummary:
    """
    Immutable snapshot of a portfolio as returned by the backend on a single fetch.
    Numeric fields are None when the backend did not provide a usable value.
    """

    id: str
    name: str
    description: str | None = None
    exchange: ExchangeEnum = ExchangeEnum.NONE
    total_invested: float | None = None
    current_value: float | None = None
    profit_loss: float | None = None
    total_fees: float | None = None

    @classmethod
    def from_dto(cls, portfolio: PortfolioDto) -> "PortfolioSummary":
        exchange = ExchangeEnum.from_value(portfolio.exchange)
        total_invested = to_optional_float(portfolio.total_invested)
        current_value = to_optional_float(portfolio.current_value)
        profit_loss = to_optional_float(portfolio.profit_loss)
        if exchange.view_mode == PortfolioViewModeEnum.SIMPLE_BALANCE:
            # Live balance only, there is no invested baseline
            total_invested, profit_loss = None, None
        elif profit_loss is None and total_invested is not None and current_value is not None:
            profit_loss = current_value - total_invested
        return cls(
            id=str(portfolio.id),
            name=portfolio.name,
            description=portfolio.description,
            exchange=exchange,
            total_invested=total_invested,
            current_value=current_value,
            profit_loss=profit_loss,
            total_fees=to_optional_float(portfolio.total_fees),
        )

    @property
    def view_mode(self) -> PortfolioViewModeEnum:
        return self.exchange.view_mode

    @property
    def profit_loss_percentage(self) -> float:
        return calculate_percentage(self.profit_loss, self.total_invested)

    @property
    def formatted_profit_loss_percentage(self) -> str:
        return format_percentage(self.profit_loss, self.total_invested)

    def with_current_value(self, current_value: float | None) -> "PortfolioSummary":
        return dataclasses.replace(self, current_value=to_optional_float(current_value))

    def degraded(self) -> "PortfolioSummary":
        """
        Copy of this summary with every derived field undefined,
        used when fetching the portfolio valuation failed.
        """
        return dataclasses.replace(self, total_invested=None, current_value=None, profit_loss=None)
