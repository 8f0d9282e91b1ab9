from dependency_injector import containers, providers

from crypto_portfolio_tracker.infrastructure.services.config.services_container import ServicesContainer
from crypto_portfolio_tracker.infrastructure.tasks.config.tasks_container import TasksContainer


class InfrastructureContainer(containers.DeclarativeContainer):
    configuration_properties = providers.Dependency()
    portfolio_tracker_remote_service = providers.Dependency()

    services_container = providers.Container(
        ServicesContainer,
        configuration_properties=configuration_properties,
        portfolio_tracker_remote_service=portfolio_tracker_remote_service,
    )
    tasks_container = providers.Container(
        TasksContainer,
        configuration_properties=configuration_properties,
        portfolio_view_service=services_container.portfolio_view_service,
    )
