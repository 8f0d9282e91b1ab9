import asyncio
import dataclasses
import logging
from collections.abc import Awaitable, Callable

import pydash
from httpx import AsyncClient

from crypto_portfolio_tracker.commons.constants import RECENT_TRADES_LIMIT
from crypto_portfolio_tracker.commons.utils import to_optional_float
from crypto_portfolio_tracker.infrastructure.adapters.remote.portfolio_tracker_remote_service import (
    PortfolioTrackerRemoteService,
)
from crypto_portfolio_tracker.infrastructure.services.enums import ExchangeEnum, PortfolioViewModeEnum
from crypto_portfolio_tracker.infrastructure.services.portfolio_aggregator_service import PortfolioAggregatorService
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.services.vo.holding import Holding
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_summary import PortfolioSummary
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_views import (
    PortfolioView,
    SimpleBalanceView,
    TrackedView,
)
from crypto_portfolio_tracker.infrastructure.services.vo.trade_item import TradeItem
from crypto_portfolio_tracker.infrastructure.services.vo.trading212_account_summary import Trading212AccountSummary

logger = logging.getLogger(__name__)

ViewBuilder = Callable[..., Awaitable[PortfolioView]]


class PortfolioViewService:
    def __init__(
        self,
        portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
        portfolio_aggregator_service: PortfolioAggregatorService,
    ) -> None:
        self._portfolio_tracker_remote_service = portfolio_tracker_remote_service
        self._portfolio_aggregator_service = portfolio_aggregator_service
        self._view_builders: dict[PortfolioViewModeEnum, ViewBuilder] = {
            PortfolioViewModeEnum.SIMPLE_BALANCE: self._build_simple_balance_view,
            PortfolioViewModeEnum.TRACKED: self._build_tracked_view,
        }

    async def get_portfolio_view(self, portfolio_id: str, *, session: SessionContext) -> PortfolioView:
        async with await self._portfolio_tracker_remote_service.get_http_client() as client:
            portfolio = await self._portfolio_tracker_remote_service.get_portfolio(
                portfolio_id, session=session, client=client
            )
            summary = PortfolioSummary.from_dto(portfolio)
            view_builder = self._view_builders[summary.view_mode]
            view = await view_builder(summary, session=session, client=client)
        logger.debug(f"Portfolio '{summary.name}' loaded in {summary.view_mode.value} mode")
        return view

    async def _build_simple_balance_view(
        self, summary: PortfolioSummary, *, session: SessionContext, client: AsyncClient
    ) -> SimpleBalanceView:
        balances = await self._portfolio_tracker_remote_service.get_portfolio_balances(
            summary.id, session=session, client=client
        )
        allocations = self._portfolio_aggregator_service.calculate_asset_allocation(
            balances.holdings, total_value=balances.total_value
        )
        total_value = to_optional_float(balances.total_value)
        if total_value is None:
            total_value = sum(allocation.current_value for allocation in allocations)
        return SimpleBalanceView(
            summary=summary.with_current_value(total_value),
            currency_symbol=self._portfolio_aggregator_service.get_currency_symbol([summary]),
            total_value=total_value,
            allocations=allocations,
            updated_at=balances.updated_at,
        )

    async def _build_tracked_view(
        self, summary: PortfolioSummary, *, session: SessionContext, client: AsyncClient
    ) -> TrackedView:
        currency_symbol = self._portfolio_aggregator_service.get_currency_symbol([summary])
        if summary.exchange == ExchangeEnum.TRADING212:
            account_summary, holdings, totals = await asyncio.gather(
                self._portfolio_tracker_remote_service.get_trading212_summary(
                    summary.id, session=session, client=client
                ),
                self._portfolio_tracker_remote_service.get_trading212_holdings(
                    summary.id, session=session, client=client
                ),
                self._portfolio_tracker_remote_service.get_trading212_totals(
                    summary.id, session=session, client=client
                ),
            )
            total_invested = to_optional_float(totals.total_invested)
            current_value = to_optional_float(totals.total_current_value)
            profit_loss = to_optional_float(totals.profit_loss)
            if profit_loss is None and total_invested is not None and current_value is not None:
                profit_loss = current_value - total_invested
            view = TrackedView(
                summary=dataclasses.replace(
                    summary, total_invested=total_invested, current_value=current_value, profit_loss=profit_loss
                ),
                currency_symbol=currency_symbol,
                holdings=[Holding.from_trading212_dto(holding) for holding in holdings],
                trading212_account_summary=Trading212AccountSummary.from_dto(account_summary),
            )
        else:
            holdings, trades = await asyncio.gather(
                self._portfolio_tracker_remote_service.get_portfolio_holdings(
                    summary.id, session=session, client=client
                ),
                self._portfolio_tracker_remote_service.get_trades(summary.id, session=session, client=client),
            )
            recent_trades = pydash.order_by(
                [TradeItem.from_dto(trade) for trade in trades], ["-executed_at"]
            )[:RECENT_TRADES_LIMIT]
            view = TrackedView(
                summary=summary,
                currency_symbol=currency_symbol,
                holdings=pydash.order_by([Holding.from_dto(holding) for holding in holdings], ["symbol"]),
                recent_trades=recent_trades,
            )
        return view
