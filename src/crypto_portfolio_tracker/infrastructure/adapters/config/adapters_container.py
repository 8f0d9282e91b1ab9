from dependency_injector import containers, providers

from crypto_portfolio_tracker.infrastructure.adapters.remote.portfolio_tracker_remote_service import (
    PortfolioTrackerRemoteService,
)


class AdaptersContainer(containers.DeclarativeContainer):
    configuration_properties = providers.Dependency()

    portfolio_tracker_remote_service = providers.Singleton(
        PortfolioTrackerRemoteService, configuration_properties=configuration_properties
    )
