from dataclasses import dataclass, field

from crypto_portfolio_tracker.commons.utils import calculate_percentage, format_percentage


@dataclass(frozen=True, kw_only=True)
class AggregateTotals:
    """
    Sums over a set of portfolio summaries. Derived, never persisted.
    """

    total_invested: float = field(default=0.0)
    current_value: float = field(default=0.0)
    profit_loss: float = field(default=0.0)

    @property
    def profit_loss_percentage(self) -> float:
        return calculate_percentage(self.profit_loss, self.total_invested)

    @property
    def formatted_profit_loss_percentage(self) -> str:
        return format_percentage(self.profit_loss, self.total_invested)
