from dataclasses import asdict
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Response, status

from crypto_portfolio_tracker.commons.constants import TRADING212_TRANSACTIONS_PAGE_SIZE
from crypto_portfolio_tracker.infrastructure.adapters.dtos.portfolio_dto import CreatePortfolioDto, UpdatePortfolioDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trade_dto import CreateTradeDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.transfer_dto import TransferType
from crypto_portfolio_tracker.infrastructure.services.portfolio_service import PortfolioService
from crypto_portfolio_tracker.infrastructure.services.portfolio_view_service import PortfolioViewService
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.interfaces.controllers.config.controllers_dependencies import (
    get_authenticated_session_context,
    get_portfolio_service,
    get_portfolio_view_service,
)
from crypto_portfolio_tracker.interfaces.dtos.dashboard_dto import PortfolioSummaryDto

router = APIRouter(prefix="/portfolios", tags=["portfolios"])

AuthenticatedSession = Annotated[SessionContext, Depends(get_authenticated_session_context)]
PortfolioServiceDependency = Annotated[PortfolioService, Depends(get_portfolio_service)]


@router.get("")
async def find_all_portfolios(
    session_context: AuthenticatedSession, portfolio_service: PortfolioServiceDependency
) -> list[PortfolioSummaryDto]:
    portfolios = await portfolio_service.find_all(session=session_context)
    return [PortfolioSummaryDto.from_vo(portfolio) for portfolio in portfolios]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_portfolio(
    portfolio: CreatePortfolioDto, session_context: AuthenticatedSession, portfolio_service: PortfolioServiceDependency
) -> PortfolioSummaryDto:
    created = await portfolio_service.create(portfolio, session=session_context)
    return PortfolioSummaryDto.from_vo(created)


@router.put("/{portfolio_id}")
async def update_portfolio(
    portfolio_id: str,
    portfolio: UpdatePortfolioDto,
    session_context: AuthenticatedSession,
    portfolio_service: PortfolioServiceDependency,
) -> PortfolioSummaryDto:
    updated = await portfolio_service.update(portfolio_id, portfolio, session=session_context)
    return PortfolioSummaryDto.from_vo(updated)


@router.delete("/{portfolio_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_portfolio(
    portfolio_id: str, session_context: AuthenticatedSession, portfolio_service: PortfolioServiceDependency
) -> Response:
    await portfolio_service.delete(portfolio_id, session=session_context)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{portfolio_id}/refresh")
async def refresh_portfolio(
    portfolio_id: str, session_context: AuthenticatedSession, portfolio_service: PortfolioServiceDependency
) -> PortfolioSummaryDto:
    refreshed = await portfolio_service.refresh(portfolio_id, session=session_context)
    return PortfolioSummaryDto.from_vo(refreshed)


@router.get("/{portfolio_id}/view")
async def get_portfolio_view(
    portfolio_id: str,
    session_context: AuthenticatedSession,
    portfolio_view_service: Annotated[PortfolioViewService, Depends(get_portfolio_view_service)],
) -> dict[str, Any]:
    view = await portfolio_view_service.get_portfolio_view(portfolio_id, session=session_context)
    return view.to_dict()


@router.post("/{portfolio_id}/trades", status_code=status.HTTP_201_CREATED)
async def add_trade(
    portfolio_id: str,
    trade: CreateTradeDto,
    session_context: AuthenticatedSession,
    portfolio_service: PortfolioServiceDependency,
) -> dict[str, Any]:
    created = await portfolio_service.add_trade(portfolio_id, trade, session=session_context)
    return asdict(created)


@router.delete("/{portfolio_id}/trades/{trade_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trade(
    portfolio_id: str,
    trade_id: str,
    session_context: AuthenticatedSession,
    portfolio_service: PortfolioServiceDependency,
) -> Response:
    await portfolio_service.delete_trade(portfolio_id, trade_id, session=session_context)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{portfolio_id}/transfers")
async def find_transfers(
    portfolio_id: str,
    session_context: AuthenticatedSession,
    portfolio_service: PortfolioServiceDependency,
    transfer_type: Annotated[TransferType | None, Query(alias="type")] = None,
    asset: str | None = None,
) -> dict[str, Any]:
    overview = await portfolio_service.find_transfers(
        portfolio_id, session=session_context, transfer_type=transfer_type, asset=asset
    )
    return asdict(overview)


@router.get("/{portfolio_id}/trading212/transactions")
async def find_trading212_transactions(
    portfolio_id: str,
    session_context: AuthenticatedSession,
    portfolio_service: PortfolioServiceDependency,
    limit: Annotated[int, Query(ge=1, le=500)] = TRADING212_TRANSACTIONS_PAGE_SIZE,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> dict[str, Any]:
    page = await portfolio_service.find_trading212_transactions(
        portfolio_id, session=session_context, limit=limit, offset=offset
    )
    return asdict(page) | {"has_more": page.has_more}
