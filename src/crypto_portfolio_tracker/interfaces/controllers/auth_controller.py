import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from crypto_portfolio_tracker.commons.utils import format_exception
from crypto_portfolio_tracker.infrastructure.adapters.dtos.auth_dto import (
    LoginCredentialsDto,
    RegisterCredentialsDto,
)
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.services.vo.user_session import UserSession
from crypto_portfolio_tracker.infrastructure.tasks.polling_task_manager import PollingTaskManager
from crypto_portfolio_tracker.interfaces.controllers.config.controllers_dependencies import (
    get_polling_task_manager,
    get_session_context,
)
from crypto_portfolio_tracker.interfaces.dtos.auth_request_dto import (
    LoginRequestDto,
    RegisterRequestDto,
    SessionUserDto,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
async def login(
    login_request: LoginRequestDto, session_context: Annotated[SessionContext, Depends(get_session_context)]
) -> SessionUserDto:
    try:
        user_session = await session_context.login(
            LoginCredentialsDto(email=login_request.email, password=login_request.password)
        )
    except ValueError as e:
        logger.warning(f"Login failed for {login_request.email}: {str(e)}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=format_exception(e)) from e
    return _to_session_user_dto(user_session)


@router.post("/register")
async def register(
    register_request: RegisterRequestDto, session_context: Annotated[SessionContext, Depends(get_session_context)]
) -> SessionUserDto:
    try:
        user_session = await session_context.register(
            RegisterCredentialsDto(
                email=register_request.email, password=register_request.password, name=register_request.name
            )
        )
    except ValueError as e:
        logger.warning(f"Registration failed for {register_request.email}: {str(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=format_exception(e)) from e
    return _to_session_user_dto(user_session)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    session_context: Annotated[SessionContext, Depends(get_session_context)],
    polling_task_manager: Annotated[PollingTaskManager, Depends(get_polling_task_manager)],
) -> Response:
    await polling_task_manager.stop_all()
    await session_context.logout()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _to_session_user_dto(user_session: UserSession) -> SessionUserDto:
    return SessionUserDto(id=user_session.user.id, email=user_session.user.email, name=user_session.user.name)
