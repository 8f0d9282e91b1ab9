import logging

from crypto_portfolio_tracker.commons.constants import TRADING212_TRANSACTIONS_PAGE_SIZE
from crypto_portfolio_tracker.infrastructure.adapters.dtos.portfolio_dto import CreatePortfolioDto, UpdatePortfolioDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trade_dto import CreateTradeDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.transfer_dto import TransferType
from crypto_portfolio_tracker.infrastructure.adapters.remote.portfolio_tracker_remote_service import (
    PortfolioTrackerRemoteService,
)
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_summary import PortfolioSummary
from crypto_portfolio_tracker.infrastructure.services.vo.trade_item import TradeItem
from crypto_portfolio_tracker.infrastructure.services.vo.trading212_transaction_item import Trading212TransactionsPage
from crypto_portfolio_tracker.infrastructure.services.vo.transfer_item import TransferItem, TransfersOverview

logger = logging.getLogger(__name__)


class PortfolioService:
    def __init__(self, portfolio_tracker_remote_service: PortfolioTrackerRemoteService) -> None:
        self._portfolio_tracker_remote_service = portfolio_tracker_remote_service

    async def find_all(self, *, session: SessionContext) -> list[PortfolioSummary]:
        portfolios = await self._portfolio_tracker_remote_service.get_portfolios(session=session)
        return [PortfolioSummary.from_dto(portfolio) for portfolio in portfolios]

    async def create(self, portfolio: CreatePortfolioDto, *, session: SessionContext) -> PortfolioSummary:
        created = await self._portfolio_tracker_remote_service.create_portfolio(portfolio, session=session)
        logger.info(f"Portfolio '{created.name}' created ({created.id})")
        return PortfolioSummary.from_dto(created)

    async def update(
        self, portfolio_id: str, portfolio: UpdatePortfolioDto, *, session: SessionContext
    ) -> PortfolioSummary:
        updated = await self._portfolio_tracker_remote_service.update_portfolio(
            portfolio_id, portfolio, session=session
        )
        return PortfolioSummary.from_dto(updated)

    async def delete(self, portfolio_id: str, *, session: SessionContext) -> None:
        await self._portfolio_tracker_remote_service.delete_portfolio(portfolio_id, session=session)
        logger.info(f"Portfolio {portfolio_id} deleted")

    async def refresh(self, portfolio_id: str, *, session: SessionContext) -> PortfolioSummary:
        """
        Asks the backend to reprice the portfolio and returns its updated summary.
        """
        refreshed = await self._portfolio_tracker_remote_service.refresh_portfolio(portfolio_id, session=session)
        logger.info(f"Prices of portfolio '{refreshed.name}' refreshed")
        return PortfolioSummary.from_dto(refreshed)

    async def add_trade(self, portfolio_id: str, trade: CreateTradeDto, *, session: SessionContext) -> TradeItem:
        created = await self._portfolio_tracker_remote_service.create_trade(portfolio_id, trade, session=session)
        logger.info(f"{created.type} {created.symbol} trade added to portfolio {portfolio_id} ({created.id})")
        return TradeItem.from_dto(created)

    async def delete_trade(self, portfolio_id: str, trade_id: str, *, session: SessionContext) -> None:
        await self._portfolio_tracker_remote_service.delete_trade(portfolio_id, trade_id, session=session)
        logger.info(f"Trade {trade_id} deleted from portfolio {portfolio_id}")

    async def find_transfers(
        self,
        portfolio_id: str,
        *,
        session: SessionContext,
        transfer_type: TransferType | None = None,
        asset: str | None = None,
    ) -> TransfersOverview:
        transfers = await self._portfolio_tracker_remote_service.get_transfers(portfolio_id, session=session)
        return TransfersOverview.from_items(
            [TransferItem.from_dto(transfer) for transfer in transfers], transfer_type=transfer_type, asset=asset
        )

    async def find_trading212_transactions(
        self,
        portfolio_id: str,
        *,
        session: SessionContext,
        limit: int = TRADING212_TRANSACTIONS_PAGE_SIZE,
        offset: int = 0,
    ) -> Trading212TransactionsPage:
        page = await self._portfolio_tracker_remote_service.get_trading212_transactions(
            portfolio_id, limit=limit, offset=offset, session=session
        )
        return Trading212TransactionsPage.from_dto(page, limit=limit, offset=offset)
