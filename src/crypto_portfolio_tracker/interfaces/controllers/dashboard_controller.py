from typing import Annotated

from fastapi import APIRouter, Depends

from crypto_portfolio_tracker.infrastructure.services.dashboard_service import DashboardService
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.interfaces.controllers.config.controllers_dependencies import (
    get_authenticated_session_context,
    get_dashboard_service,
)
from crypto_portfolio_tracker.interfaces.dtos.dashboard_dto import DashboardDto

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("")
async def get_dashboard(
    session_context: Annotated[SessionContext, Depends(get_authenticated_session_context)],
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> DashboardDto:
    dashboard = await dashboard_service.get_dashboard(session=session_context)
    return DashboardDto.from_vo(dashboard)
