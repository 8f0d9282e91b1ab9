import inspect
import logging
from collections.abc import Awaitable, Callable
from typing_extensions import override
from uuid import uuid4

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from crypto_portfolio_tracker.commons.exceptions import NotAuthenticatedError
from crypto_portfolio_tracker.infrastructure.services.portfolio_view_service import PortfolioViewService
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_views import PortfolioView
from crypto_portfolio_tracker.infrastructure.tasks.base import AbstractTaskService

logger = logging.getLogger(__name__)

PortfolioViewListener = Callable[[PortfolioView], Awaitable[None] | None]


class PortfolioViewPollingTaskService(AbstractTaskService):
    """
    Periodic refetch of a single portfolio view.
    Started when the view is entered and stopped when it is left.
    """

    def __init__(
        self,
        scheduler: AsyncIOScheduler,
        portfolio_view_service: PortfolioViewService,
        *,
        portfolio_id: str,
        session: SessionContext,
        listener: PortfolioViewListener,
        interval_seconds: int,
    ) -> None:
        super().__init__(scheduler)
        self._portfolio_view_service = portfolio_view_service
        self._portfolio_id = portfolio_id
        self._session = session
        self._listener = listener
        self._interval_seconds = interval_seconds
        self._task_id = f"{self.__class__.__name__}::{portfolio_id}::{uuid4().hex}"

    @property
    def portfolio_id(self) -> str:
        return self._portfolio_id

    @property
    @override
    def job_id(self) -> str:
        return self._task_id

    @override
    async def run(self) -> None:
        try:
            await self._run()
        except NotAuthenticatedError as e:
            logger.warning(f"Polling of portfolio {self._portfolio_id} stopped: {str(e)}")
            await self.stop()
        except Exception as e:
            logger.error(f"Polling of portfolio {self._portfolio_id} failed: {str(e)}", exc_info=True)

    @override
    async def _run(self) -> None:
        view = await self._portfolio_view_service.get_portfolio_view(self._portfolio_id, session=self._session)
        result = self._listener(view)
        if inspect.isawaitable(result):
            await result

    @override
    def _get_job_trigger(self) -> IntervalTrigger:
        return IntervalTrigger(seconds=self._interval_seconds)
