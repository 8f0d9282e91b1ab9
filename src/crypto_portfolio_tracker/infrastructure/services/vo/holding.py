from dataclasses import dataclass

from crypto_portfolio_tracker.commons.utils import calculate_percentage, to_float_or_zero, to_optional_float
from crypto_portfolio_tracker.infrastructure.adapters.dtos.holding_dto import HoldingDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trading212_dto import Trading212HoldingDto


@dataclass(frozen=True, kw_only=True)
class Holding:
    symbol: str
    name: str | None = None
    quantity: float = 0.0
    average_price: float = 0.0
    current_price: float | None = None
    total_invested: float = 0.0
    current_value: float | None = None
    profit_loss: float | None = None

    @property
    def profit_loss_percentage(self) -> float:
        return calculate_percentage(self.profit_loss, self.total_invested)

    @classmethod
    def from_dto(cls, holding: HoldingDto) -> "Holding":
        return cls._build(
            symbol=holding.symbol,
            name=None,
            quantity=holding.quantity,
            average_price=holding.average_price,
            current_price=holding.current_price,
            total_invested=holding.total_invested,
            current_value=holding.current_value,
            profit_loss=holding.profit_loss,
        )

    @classmethod
    def from_trading212_dto(cls, holding: Trading212HoldingDto) -> "Holding":
        return cls._build(
            symbol=holding.ticker,
            name=holding.name,
            quantity=holding.shares,
            average_price=holding.average_buy_price,
            current_price=holding.current_price,
            total_invested=holding.total_invested,
            current_value=holding.current_value,
            profit_loss=holding.profit_loss,
        )

    @classmethod
    def _build(
        cls, *, symbol, name, quantity, average_price, current_price, total_invested, current_value, profit_loss
    ):
        quantity = to_float_or_zero(quantity)
        current_price = to_optional_float(current_price)
        total_invested = to_float_or_zero(total_invested)
        current_value = to_optional_float(current_value)
        if current_value is None and current_price is not None:
            current_value = quantity * current_price
        profit_loss = to_optional_float(profit_loss)
        if profit_loss is None and current_value is not None:
            profit_loss = current_value - total_invested
        return cls(
            symbol=symbol,
            name=name,
            quantity=quantity,
            average_price=to_float_or_zero(average_price),
            current_price=current_price,
            total_invested=total_invested,
            current_value=current_value,
            profit_loss=profit_loss,
        )
