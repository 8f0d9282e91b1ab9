from dataclasses import dataclass, field

from crypto_portfolio_tracker.infrastructure.services.vo.aggregate_totals import AggregateTotals
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_summary import PortfolioSummary


@dataclass(frozen=True, kw_only=True)
class Dashboard:
    portfolios: list[PortfolioSummary] = field(default_factory=list)
    totals: AggregateTotals = field(default_factory=AggregateTotals)
    currency_symbol: str
    # Portfolios whose valuation could not be fetched, kept with undefined values
    degraded_portfolio_ids: list[str] = field(default_factory=list)

    @property
    def portfolios_count(self) -> int:
        return len(self.portfolios)

    @property
    def profit_loss_percentage(self) -> str:
        return self.totals.formatted_profit_loss_percentage
