from dataclasses import dataclass

from crypto_portfolio_tracker.commons.utils import to_float_or_zero
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trade_dto import TradeDto, TradeType


@dataclass(frozen=True, kw_only=True)
class TradeItem:
    id: str
    symbol: str
    type: TradeType
    quantity: float
    price: float
    fee: float
    total: float
    executed_at: str | None = None

    @classmethod
    def from_dto(cls, trade: TradeDto) -> "TradeItem":
        quantity = to_float_or_zero(trade.quantity)
        price = to_float_or_zero(trade.price)
        return cls(
            id=trade.id,
            symbol=trade.symbol,
            type=trade.type,
            quantity=quantity,
            price=price,
            fee=to_float_or_zero(trade.fee),
            total=to_float_or_zero(trade.total) if trade.total is not None else quantity * price,
            executed_at=trade.executed_at,
        )
