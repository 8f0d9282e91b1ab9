from pydantic import BaseModel

from crypto_portfolio_tracker.infrastructure.services.vo.dashboard import Dashboard
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_summary import PortfolioSummary


class PortfolioSummaryDto(BaseModel):
    id: str
    name: str
    description: str | None = None
    exchange: str
    mode: str
    total_invested: float | None = None
    current_value: float | None = None
    profit_loss: float | None = None
    total_fees: float | None = None
    profit_loss_percentage: str

    @classmethod
    def from_vo(cls, summary: PortfolioSummary) -> "PortfolioSummaryDto":
        return cls(
            id=summary.id,
            name=summary.name,
            description=summary.description,
            exchange=summary.exchange.value,
            mode=summary.view_mode.value,
            total_invested=summary.total_invested,
            current_value=summary.current_value,
            profit_loss=summary.profit_loss,
            total_fees=summary.total_fees,
            profit_loss_percentage=summary.formatted_profit_loss_percentage,
        )


class AggregateTotalsDto(BaseModel):
    total_invested: float
    current_value: float
    profit_loss: float


class DashboardDto(BaseModel):
    totals: AggregateTotalsDto
    profit_loss_percentage: str
    currency_symbol: str
    portfolios_count: int
    portfolios: list[PortfolioSummaryDto]
    degraded_portfolio_ids: list[str]

    @classmethod
    def from_vo(cls, dashboard: Dashboard) -> "DashboardDto":
        return cls(
            totals=AggregateTotalsDto(
                total_invested=dashboard.totals.total_invested,
                current_value=dashboard.totals.current_value,
                profit_loss=dashboard.totals.profit_loss,
            ),
            profit_loss_percentage=dashboard.profit_loss_percentage,
            currency_symbol=dashboard.currency_symbol,
            portfolios_count=dashboard.portfolios_count,
            portfolios=[PortfolioSummaryDto.from_vo(portfolio) for portfolio in dashboard.portfolios],
            degraded_portfolio_ids=dashboard.degraded_portfolio_ids,
        )
