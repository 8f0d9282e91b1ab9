import logging
from typing import Self

from crypto_portfolio_tracker.commons.exceptions import NotAuthenticatedError
from crypto_portfolio_tracker.infrastructure.adapters.dtos.auth_dto import (
    AuthResponseDto,
    LoginCredentialsDto,
    RegisterCredentialsDto,
)
from crypto_portfolio_tracker.infrastructure.adapters.remote.portfolio_tracker_remote_service import (
    PortfolioTrackerRemoteService,
)
from crypto_portfolio_tracker.infrastructure.services.session_storage_service import SessionStorageService
from crypto_portfolio_tracker.infrastructure.services.vo.user_session import SessionUser, UserSession

logger = logging.getLogger(__name__)


class SessionContext:
    """
    Authentication state of the running application.

    It is created once at start up (``initialize`` restores the persisted session, if any)
    and passed explicitly to every operation that talks to the backend on behalf of the user.
    ``logout`` tears it down, both in memory and in the session storage.
    """

    def __init__(
        self,
        session_storage_service: SessionStorageService,
        portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
    ) -> None:
        self._session_storage_service = session_storage_service
        self._portfolio_tracker_remote_service = portfolio_tracker_remote_service
        self._current: UserSession | None = None

    @property
    def current(self) -> UserSession | None:
        return self._current

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    def initialize(self) -> Self:
        self._current = self._session_storage_service.load()
        if self._current:
            logger.info(f"Session restored for {self._current.user.email}")
        return self

    def require_session(self) -> UserSession:
        if self._current is None:
            raise NotAuthenticatedError("You must log in first.")
        return self._current

    async def login(self, credentials: LoginCredentialsDto) -> UserSession:
        auth_response = await self._portfolio_tracker_remote_service.login(credentials)
        return self._start_session(auth_response)

    async def register(self, credentials: RegisterCredentialsDto) -> UserSession:
        auth_response = await self._portfolio_tracker_remote_service.register(credentials)
        return self._start_session(auth_response)

    async def logout(self) -> None:
        if self._current is not None:
            logger.info(f"Logging out {self._current.user.email}")
        self._current = None
        self._session_storage_service.clear()

    def _start_session(self, auth_response: AuthResponseDto) -> UserSession:
        self._current = UserSession(
            user=SessionUser(
                id=auth_response.user.id, email=auth_response.user.email, name=auth_response.user.name
            ),
            access_token=auth_response.access_token,
            refresh_token=auth_response.refresh_token,
        )
        self._session_storage_service.save(self._current)
        logger.info(f"User logged in successfully: {self._current.user.email}")
        return self._current
