from apscheduler.schedulers.asyncio import AsyncIOScheduler
from dependency_injector import containers, providers

from crypto_portfolio_tracker.infrastructure.tasks.polling_task_manager import PollingTaskManager
from crypto_portfolio_tracker.infrastructure.tasks.portfolio_view_polling_task_service import (
    PortfolioViewPollingTaskService,
)


class TasksContainer(containers.DeclarativeContainer):
    configuration_properties = providers.Dependency()

    portfolio_view_service = providers.Dependency()

    scheduler = providers.Singleton(AsyncIOScheduler)

    portfolio_view_polling_task_service = providers.Factory(
        PortfolioViewPollingTaskService, scheduler=scheduler, portfolio_view_service=portfolio_view_service
    )

    polling_task_manager = providers.Singleton(
        PollingTaskManager,
        configuration_properties=configuration_properties,
        scheduler=scheduler,
        polling_task_service_factory=portfolio_view_polling_task_service.provider,
    )
