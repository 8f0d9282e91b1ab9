import asyncio
import logging

from httpx import AsyncClient

from crypto_portfolio_tracker.commons.exceptions import NotAuthenticatedError
from crypto_portfolio_tracker.infrastructure.adapters.remote.portfolio_tracker_remote_service import (
    PortfolioTrackerRemoteService,
)
from crypto_portfolio_tracker.infrastructure.services.enums import PortfolioViewModeEnum
from crypto_portfolio_tracker.infrastructure.services.portfolio_aggregator_service import PortfolioAggregatorService
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.services.vo.dashboard import Dashboard
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_summary import PortfolioSummary

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(
        self,
        portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
        portfolio_aggregator_service: PortfolioAggregatorService,
    ) -> None:
        self._portfolio_tracker_remote_service = portfolio_tracker_remote_service
        self._portfolio_aggregator_service = portfolio_aggregator_service

    async def get_dashboard(self, *, session: SessionContext) -> Dashboard:
        """
        Fetches every portfolio of the logged user and aggregates them.

        Live balances of simple balance portfolios are fetched concurrently.
        When one of them fails, that portfolio is kept with undefined values
        and the rest of the dashboard is computed as usual.
        """
        async with await self._portfolio_tracker_remote_service.get_http_client() as client:
            portfolios = await self._portfolio_tracker_remote_service.get_portfolios(session=session, client=client)
            summaries = [PortfolioSummary.from_dto(portfolio) for portfolio in portfolios]
            results = await asyncio.gather(
                *[self._refresh_valuation(summary, session=session, client=client) for summary in summaries],
                return_exceptions=True,
            )
        refreshed_summaries: list[PortfolioSummary] = []
        degraded_portfolio_ids: list[str] = []
        for summary, result in zip(summaries, results, strict=True):
            if isinstance(result, NotAuthenticatedError) or (
                isinstance(result, BaseException) and not isinstance(result, Exception)
            ):
                # Session gone or cancellation, nothing to show
                raise result
            elif isinstance(result, Exception):
                logger.warning(
                    f"Valuation of portfolio '{summary.name}' ({summary.id}) could not be fetched: {str(result)}",
                    exc_info=result,
                )
                refreshed_summaries.append(summary.degraded())
                degraded_portfolio_ids.append(summary.id)
            else:
                refreshed_summaries.append(result)
        return Dashboard(
            portfolios=refreshed_summaries,
            totals=self._portfolio_aggregator_service.aggregate(refreshed_summaries),
            currency_symbol=self._portfolio_aggregator_service.get_currency_symbol(refreshed_summaries),
            degraded_portfolio_ids=degraded_portfolio_ids,
        )

    async def _refresh_valuation(
        self, summary: PortfolioSummary, *, session: SessionContext, client: AsyncClient
    ) -> PortfolioSummary:
        if summary.view_mode != PortfolioViewModeEnum.SIMPLE_BALANCE:
            return summary
        balances = await self._portfolio_tracker_remote_service.get_portfolio_balances(
            summary.id, session=session, client=client
        )
        return summary.with_current_value(balances.total_value)
