import logging

from crypto_portfolio_tracker.infrastructure.adapters.dtos.exchange_api_key_dto import CreateExchangeApiKeyDto
from crypto_portfolio_tracker.infrastructure.adapters.remote.portfolio_tracker_remote_service import (
    PortfolioTrackerRemoteService,
)
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.services.vo.exchange_api_key import ExchangeApiKey

logger = logging.getLogger(__name__)


class ExchangeApiKeyService:
    """
    Exchange credentials used by the backend to read balances and import trades.
    Secrets only travel towards the backend, listings never include them.
    """

    def __init__(self, portfolio_tracker_remote_service: PortfolioTrackerRemoteService) -> None:
        self._portfolio_tracker_remote_service = portfolio_tracker_remote_service

    async def find_all(self, *, session: SessionContext) -> list[ExchangeApiKey]:
        api_keys = await self._portfolio_tracker_remote_service.get_api_keys(session=session)
        return [ExchangeApiKey.from_dto(api_key) for api_key in api_keys]

    async def add(self, api_key: CreateExchangeApiKeyDto, *, session: SessionContext) -> ExchangeApiKey:
        created = await self._portfolio_tracker_remote_service.add_api_key(api_key, session=session)
        logger.info(f"{created.exchange} API key added ({created.id})")
        return ExchangeApiKey.from_dto(created)

    async def delete(self, api_key_id: str, *, session: SessionContext) -> None:
        await self._portfolio_tracker_remote_service.delete_api_key(api_key_id, session=session)
        logger.info(f"API key {api_key_id} deleted")
