import logging
from typing import TYPE_CHECKING, Any

from httpx import URL, AsyncClient, HTTPStatusError, Response, Timeout, codes
from pydantic import RootModel

from crypto_portfolio_tracker.commons.constants import TRADING212_TRANSACTIONS_PAGE_SIZE
from crypto_portfolio_tracker.commons.exceptions import SessionExpiredError
from crypto_portfolio_tracker.config.configuration_properties import ConfigurationProperties
from crypto_portfolio_tracker.infrastructure.adapters.dtos.auth_dto import (
    AuthResponseDto,
    LoginCredentialsDto,
    RegisterCredentialsDto,
)
from crypto_portfolio_tracker.infrastructure.adapters.dtos.exchange_api_key_dto import (
    AddedExchangeApiKeyDto,
    CreateExchangeApiKeyDto,
    ExchangeApiKeyDto,
    ExchangeApiKeysDto,
)
from crypto_portfolio_tracker.infrastructure.adapters.dtos.holding_dto import HoldingDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.portfolio_balances_dto import PortfolioBalancesDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.portfolio_dto import (
    CreatePortfolioDto,
    PortfolioDto,
    UpdatePortfolioDto,
)
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trade_dto import CreateTradeDto, TradeDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trading212_dto import (
    Trading212HoldingDto,
    Trading212SummaryDto,
    Trading212TotalsDto,
    Trading212TransactionsPageDto,
)
from crypto_portfolio_tracker.infrastructure.adapters.dtos.transfer_dto import TransferDto
from crypto_portfolio_tracker.infrastructure.adapters.remote.base import AbstractHttpRemoteAsyncService

if TYPE_CHECKING:
    from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext

logger = logging.getLogger(__name__)


class PortfolioTrackerRemoteService(AbstractHttpRemoteAsyncService):
    """
    Client of the portfolio tracker REST backend.

    Every authenticated operation receives the SessionContext explicitly;
    the bearer token is taken from it and a 401 answer ends it.
    """

    def __init__(self, configuration_properties: ConfigurationProperties) -> None:
        self._configuration_properties = configuration_properties
        self._base_url = str(self._configuration_properties.api_base_url)
        if not self._base_url:
            raise ValueError("Portfolio tracker API base url is missing.")

    # Auth
    async def login(self, credentials: LoginCredentialsDto, *, client: AsyncClient | None = None) -> AuthResponseDto:
        response = await self._perform_http_request(
            method="POST", url="auth/login", body=credentials.model_dump(mode="json"), client=client
        )
        return AuthResponseDto.model_validate_json(response.content)

    async def register(
        self, credentials: RegisterCredentialsDto, *, client: AsyncClient | None = None
    ) -> AuthResponseDto:
        response = await self._perform_http_request(
            method="POST", url="auth/register", body=credentials.model_dump(mode="json"), client=client
        )
        return AuthResponseDto.model_validate_json(response.content)

    # Portfolios
    async def get_portfolios(
        self, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> list[PortfolioDto]:
        response = await self._perform_http_request(url="portfolios", session=session, client=client)
        return RootModel[list[PortfolioDto]].model_validate_json(response.content).root

    async def get_portfolio(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> PortfolioDto:
        response = await self._perform_http_request(url=f"portfolios/{portfolio_id}", session=session, client=client)
        return PortfolioDto.model_validate_json(response.content)

    async def create_portfolio(
        self, portfolio: CreatePortfolioDto, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> PortfolioDto:
        response = await self._perform_http_request(
            method="POST",
            url="portfolios",
            body=portfolio.model_dump(mode="json", exclude_none=True),
            session=session,
            client=client,
        )
        return PortfolioDto.model_validate_json(response.content)

    async def update_portfolio(
        self,
        portfolio_id: str,
        portfolio: UpdatePortfolioDto,
        *,
        session: "SessionContext",
        client: AsyncClient | None = None,
    ) -> PortfolioDto:
        response = await self._perform_http_request(
            method="PUT",
            url=f"portfolios/{portfolio_id}",
            body=portfolio.model_dump(mode="json", exclude_none=True),
            session=session,
            client=client,
        )
        return PortfolioDto.model_validate_json(response.content)

    async def delete_portfolio(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> None:
        await self._perform_http_request(
            method="DELETE", url=f"portfolios/{portfolio_id}", session=session, client=client
        )

    async def refresh_portfolio(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> PortfolioDto:
        # Backend recomputes prices and totals before answering
        response = await self._perform_http_request(
            method="POST", url=f"portfolio/{portfolio_id}/refresh", session=session, client=client
        )
        return PortfolioDto.model_validate_json(response.content)

    async def get_portfolio_holdings(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> list[HoldingDto]:
        response = await self._perform_http_request(
            url=f"portfolios/{portfolio_id}/holdings", session=session, client=client
        )
        return RootModel[list[HoldingDto]].model_validate_json(response.content).root

    async def get_portfolio_balances(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> PortfolioBalancesDto:
        response = await self._perform_http_request(
            url=f"portfolios/{portfolio_id}/balances", session=session, client=client
        )
        return PortfolioBalancesDto.model_validate_json(response.content)

    # Trades & transfers
    async def get_trades(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> list[TradeDto]:
        response = await self._perform_http_request(
            url=f"portfolios/{portfolio_id}/trades", session=session, client=client
        )
        return RootModel[list[TradeDto]].model_validate_json(response.content).root

    async def create_trade(
        self, portfolio_id: str, trade: CreateTradeDto, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> TradeDto:
        response = await self._perform_http_request(
            method="POST",
            url=f"portfolios/{portfolio_id}/trades",
            body=trade.model_dump(mode="json", by_alias=True, exclude_none=True),
            session=session,
            client=client,
        )
        return TradeDto.model_validate_json(response.content)

    async def delete_trade(
        self, portfolio_id: str, trade_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> None:
        await self._perform_http_request(
            method="DELETE", url=f"portfolios/{portfolio_id}/trades/{trade_id}", session=session, client=client
        )

    async def get_transfers(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> list[TransferDto]:
        response = await self._perform_http_request(
            url=f"portfolios/{portfolio_id}/transfers", session=session, client=client
        )
        return RootModel[list[TransferDto]].model_validate_json(response.content).root

    # Trading212
    async def get_trading212_summary(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> Trading212SummaryDto:
        response = await self._perform_http_request(
            url=f"portfolios/{portfolio_id}/trading212/summary", session=session, client=client
        )
        return Trading212SummaryDto.model_validate_json(response.content)

    async def get_trading212_holdings(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> list[Trading212HoldingDto]:
        response = await self._perform_http_request(
            url=f"portfolios/{portfolio_id}/trading212/holdings", session=session, client=client
        )
        return RootModel[list[Trading212HoldingDto]].model_validate_json(response.content).root

    async def get_trading212_totals(
        self, portfolio_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> Trading212TotalsDto:
        response = await self._perform_http_request(
            url=f"portfolios/{portfolio_id}/trading212/totals", session=session, client=client
        )
        return Trading212TotalsDto.model_validate_json(response.content)

    async def get_trading212_transactions(
        self,
        portfolio_id: str,
        *,
        limit: int = TRADING212_TRANSACTIONS_PAGE_SIZE,
        offset: int = 0,
        session: "SessionContext",
        client: AsyncClient | None = None,
    ) -> Trading212TransactionsPageDto:
        response = await self._perform_http_request(
            url=f"portfolios/{portfolio_id}/trading212/transactions",
            params={"limit": limit, "offset": offset},
            session=session,
            client=client,
        )
        return Trading212TransactionsPageDto.model_validate_json(response.content)

    # Exchange API keys
    async def get_api_keys(
        self, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> list[ExchangeApiKeyDto]:
        response = await self._perform_http_request(url="api-keys", session=session, client=client)
        return ExchangeApiKeysDto.model_validate_json(response.content).api_keys

    async def add_api_key(
        self, api_key: CreateExchangeApiKeyDto, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> ExchangeApiKeyDto:
        response = await self._perform_http_request(
            method="POST",
            url="api-keys",
            body=api_key.model_dump(mode="json", by_alias=True, exclude_none=True),
            session=session,
            client=client,
        )
        return AddedExchangeApiKeyDto.model_validate_json(response.content).api_key

    async def delete_api_key(
        self, api_key_id: str, *, session: "SessionContext", client: AsyncClient | None = None
    ) -> None:
        await self._perform_http_request(method="DELETE", url=f"api-keys/{api_key_id}", session=session, client=client)

    async def get_http_client(self) -> AsyncClient:
        return AsyncClient(
            base_url=self._base_url,
            headers={"Content-Type": "application/json"},
            timeout=Timeout(self._configuration_properties.http_timeout_seconds, connect=5),
        )

    async def _apply_request_interceptor(
        self,
        *,
        method: str = "GET",
        url: URL | str = "/",
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        body: Any | None = None,
        session: "SessionContext | None" = None,
        **kwargs,
    ) -> tuple[dict[str, Any] | None, dict[str, Any] | None]:
        params, headers = await super()._apply_request_interceptor(
            method=method, url=url, params=params, headers=headers, body=body, **kwargs
        )
        if session is not None:
            user_session = session.require_session()
            headers["Authorization"] = f"Bearer {user_session.access_token}"
        return params, headers

    async def _apply_response_interceptor(
        self,
        *,
        method: str = "GET",
        url: URL | str = "/",
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        body: Any | None = None,
        response: Response,
        session: "SessionContext | None" = None,
        **kwargs,
    ) -> Response:
        try:
            response.raise_for_status()
            return await super()._apply_response_interceptor(
                method=method, url=url, params=params, headers=headers, body=body, response=response, **kwargs
            )
        except HTTPStatusError as e:
            if response.status_code == codes.UNAUTHORIZED and session is not None:
                logger.warning(f"Backend rejected the session on HTTP {method} {url}. Logging out...")
                await session.logout()
                raise SessionExpiredError("Session expired, please log in again.") from e
            raise ValueError(
                f"Portfolio tracker API error: HTTP {method} {self._build_full_url(url, params)} "
                + f"- Status code: {response.status_code} - {response.text}",
                response,
            ) from e
