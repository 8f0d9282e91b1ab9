import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from dependency_injector.providers import Factory

from crypto_portfolio_tracker.config.configuration_properties import ConfigurationProperties
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.tasks.portfolio_view_polling_task_service import (
    PortfolioViewListener,
    PortfolioViewPollingTaskService,
)

logger = logging.getLogger(__name__)


class PollingTaskManager:
    def __init__(
        self,
        configuration_properties: ConfigurationProperties,
        scheduler: AsyncIOScheduler,
        polling_task_service_factory: Factory[PortfolioViewPollingTaskService],
    ) -> None:
        self._configuration_properties = configuration_properties
        self._scheduler = scheduler
        self._polling_task_service_factory = polling_task_service_factory
        self._tasks: dict[str, PortfolioViewPollingTaskService] = {}

    async def start_polling(
        self,
        portfolio_id: str,
        *,
        session: SessionContext,
        listener: PortfolioViewListener,
        interval_seconds: int | None = None,
    ) -> str:
        self._discard_stopped_tasks()
        if not self._scheduler.running:
            self._scheduler.start()
        task = self._polling_task_service_factory(
            portfolio_id=portfolio_id,
            session=session,
            listener=listener,
            interval_seconds=interval_seconds or self._configuration_properties.polling_interval_seconds,
        )
        await task.start()
        self._tasks[task.job_id] = task
        logger.info(f"Polling of portfolio {portfolio_id} STARTED! ({task.job_id})")
        return task.job_id

    async def stop_polling(self, task_id: str) -> bool:
        task = self._tasks.pop(task_id, None)
        if task is None:
            return False
        await task.stop()
        logger.info(f"Polling of portfolio {task.portfolio_id} STOPPED! ({task_id})")
        return True

    async def stop_all(self) -> None:
        for task_id in list(self._tasks):
            await self.stop_polling(task_id)

    def get_tasks(self) -> dict[str, PortfolioViewPollingTaskService]:
        self._discard_stopped_tasks()
        return dict(self._tasks)

    def _discard_stopped_tasks(self) -> None:
        # Tasks remove their own job when the session expires
        for task_id, task in list(self._tasks.items()):
            if not task.is_running:
                del self._tasks[task_id]
                logger.info(f"Polling of portfolio {task.portfolio_id} ENDED! ({task_id})")
