from dependency_injector import containers, providers

from crypto_portfolio_tracker.infrastructure.services.dashboard_service import DashboardService
from crypto_portfolio_tracker.infrastructure.services.exchange_api_key_service import ExchangeApiKeyService
from crypto_portfolio_tracker.infrastructure.services.portfolio_aggregator_service import PortfolioAggregatorService
from crypto_portfolio_tracker.infrastructure.services.portfolio_service import PortfolioService
from crypto_portfolio_tracker.infrastructure.services.portfolio_view_service import PortfolioViewService
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.services.session_storage_service import SessionStorageService


class ServicesContainer(containers.DeclarativeContainer):
    configuration_properties = providers.Dependency()

    portfolio_tracker_remote_service = providers.Dependency()

    portfolio_aggregator_service = providers.Singleton(
        PortfolioAggregatorService, configuration_properties=configuration_properties
    )

    session_storage_service = providers.Singleton(
        SessionStorageService, configuration_properties=configuration_properties
    )

    # A new session context per entry point (API application, CLI command)
    session_context = providers.Factory(
        SessionContext,
        session_storage_service=session_storage_service,
        portfolio_tracker_remote_service=portfolio_tracker_remote_service,
    )

    portfolio_service = providers.Singleton(
        PortfolioService, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )

    exchange_api_key_service = providers.Singleton(
        ExchangeApiKeyService, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )

    dashboard_service = providers.Singleton(
        DashboardService,
        portfolio_tracker_remote_service=portfolio_tracker_remote_service,
        portfolio_aggregator_service=portfolio_aggregator_service,
    )

    portfolio_view_service = providers.Singleton(
        PortfolioViewService,
        portfolio_tracker_remote_service=portfolio_tracker_remote_service,
        portfolio_aggregator_service=portfolio_aggregator_service,
    )
