from fastapi import Request

from crypto_portfolio_tracker.config.dependencies import get_application_container
from crypto_portfolio_tracker.infrastructure.services.dashboard_service import DashboardService
from crypto_portfolio_tracker.infrastructure.services.exchange_api_key_service import ExchangeApiKeyService
from crypto_portfolio_tracker.infrastructure.services.portfolio_service import PortfolioService
from crypto_portfolio_tracker.infrastructure.services.portfolio_view_service import PortfolioViewService
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.tasks.polling_task_manager import PollingTaskManager


def get_session_context(request: Request) -> SessionContext:
    return request.app.state.session_context


def get_authenticated_session_context(request: Request) -> SessionContext:
    session_context = get_session_context(request)
    # Raises NotAuthenticatedError, mapped to HTTP 401
    session_context.require_session()
    return session_context


def get_dashboard_service() -> DashboardService:
    return get_application_container().infrastructure_container().services_container().dashboard_service()


def get_exchange_api_key_service() -> ExchangeApiKeyService:
    return get_application_container().infrastructure_container().services_container().exchange_api_key_service()


def get_portfolio_service() -> PortfolioService:
    return get_application_container().infrastructure_container().services_container().portfolio_service()


def get_portfolio_view_service() -> PortfolioViewService:
    return get_application_container().infrastructure_container().services_container().portfolio_view_service()


def get_polling_task_manager() -> PollingTaskManager:
    return get_application_container().infrastructure_container().tasks_container().polling_task_manager()
