from dataclasses import asdict
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Response, status

from crypto_portfolio_tracker.infrastructure.adapters.dtos.exchange_api_key_dto import CreateExchangeApiKeyDto
from crypto_portfolio_tracker.infrastructure.services.exchange_api_key_service import ExchangeApiKeyService
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.interfaces.controllers.config.controllers_dependencies import (
    get_authenticated_session_context,
    get_exchange_api_key_service,
)

router = APIRouter(prefix="/api-keys", tags=["api-keys"])

AuthenticatedSession = Annotated[SessionContext, Depends(get_authenticated_session_context)]
ExchangeApiKeyServiceDependency = Annotated[ExchangeApiKeyService, Depends(get_exchange_api_key_service)]


@router.get("")
async def find_all_api_keys(
    session_context: AuthenticatedSession, exchange_api_key_service: ExchangeApiKeyServiceDependency
) -> list[dict[str, Any]]:
    api_keys = await exchange_api_key_service.find_all(session=session_context)
    return [asdict(api_key) | {"display_name": api_key.display_name} for api_key in api_keys]


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_api_key(
    api_key: CreateExchangeApiKeyDto,
    session_context: AuthenticatedSession,
    exchange_api_key_service: ExchangeApiKeyServiceDependency,
) -> dict[str, Any]:
    created = await exchange_api_key_service.add(api_key, session=session_context)
    return asdict(created) | {"display_name": created.display_name}


@router.delete("/{api_key_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_api_key(
    api_key_id: str, session_context: AuthenticatedSession, exchange_api_key_service: ExchangeApiKeyServiceDependency
) -> Response:
    await exchange_api_key_service.delete(api_key_id, session=session_context)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
