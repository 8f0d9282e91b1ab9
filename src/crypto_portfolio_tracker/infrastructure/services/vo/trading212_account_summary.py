from dataclasses import dataclass

from crypto_portfolio_tracker.commons.utils import to_float_or_zero
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trading212_dto import Trading212SummaryDto


@dataclass(frozen=True, kw_only=True)
class Trading212AccountSummary:
    total_deposits: float = 0.0
    total_withdrawals: float = 0.0
    net_deposits: float = 0.0
    interest_on_cash: float = 0.0
    cashback: float = 0.0
    current_balance: float = 0.0
    transactions_count: int = 0

    @property
    def earnings(self) -> float:
        return self.interest_on_cash + self.cashback

    @classmethod
    def from_dto(cls, summary: Trading212SummaryDto) -> "Trading212AccountSummary":
        return cls(
            total_deposits=to_float_or_zero(summary.total_deposits),
            total_withdrawals=to_float_or_zero(summary.total_withdrawals),
            net_deposits=to_float_or_zero(summary.net_deposits),
            interest_on_cash=to_float_or_zero(summary.interest_on_cash),
            cashback=to_float_or_zero(summary.cashback),
            current_balance=to_float_or_zero(summary.current_balance),
            transactions_count=summary.transactions_count,
        )
