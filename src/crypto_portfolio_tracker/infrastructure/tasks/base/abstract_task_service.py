import logging
from abc import ABCMeta, abstractmethod

from apscheduler.job import Job
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.base import BaseTrigger

logger = logging.getLogger(__name__)


class AbstractTaskService(metaclass=ABCMeta):
    def __init__(self, scheduler: AsyncIOScheduler) -> None:
        self._scheduler = scheduler
        self._job: Job | None = None

    @property
    def job_id(self) -> str:
        return self.__class__.__name__

    @property
    def is_running(self) -> bool:
        return self._job is not None

    async def start(self) -> None:
        if not self._job:
            self._job = self._create_job()

    async def stop(self) -> None:
        if self._job:
            try:
                self._job.remove()
            except JobLookupError:  # pragma: no cover
                logger.debug(f"Job {self.job_id} was already removed")
            self._job = None

    async def run(self) -> None:
        try:
            await self._run()
        except Exception as e:
            logger.error(str(e), exc_info=True)

    @abstractmethod
    async def _run(self) -> None:
        """
        Run the task
        """

    @abstractmethod
    def _get_job_trigger(self) -> BaseTrigger:
        """
        Get the job trigger
        """

    def _create_job(self) -> Job:
        trigger = self._get_job_trigger()
        job = self._scheduler.add_job(
            id=self.job_id,
            func=self.run,
            trigger=trigger,
            max_instances=1,  # Prevent overlapping
            coalesce=True,  # Skip intermediate runs if one was missed
        )
        return job
