import logging

import pytest
from pytest_httpserver import HTTPServer

from crypto_portfolio_tracker.commons.exceptions import SessionExpiredError
from crypto_portfolio_tracker.config.configuration_properties import ConfigurationProperties
from crypto_portfolio_tracker.infrastructure.adapters.dtos.auth_dto import LoginCredentialsDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.exchange_api_key_dto import CreateExchangeApiKeyDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.portfolio_dto import CreatePortfolioDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trade_dto import CreateTradeDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.transfer_dto import TransferDto
from crypto_portfolio_tracker.infrastructure.adapters.remote.portfolio_tracker_remote_service import (
    PortfolioTrackerRemoteService,
)
from crypto_portfolio_tracker.infrastructure.services.session_storage_service import SessionStorageService
from tests.helpers.httpserver_pytest.utils import (
    prepare_httpserver_auth_mock,
    prepare_httpserver_authenticated_mock,
    prepare_httpserver_error_mock,
    to_json,
)
from tests.helpers.object_mothers import (
    AuthResponseDtoObjectMother,
    ExchangeApiKeyDtoObjectMother,
    PortfolioBalancesDtoObjectMother,
    PortfolioDtoObjectMother,
    TradeDtoObjectMother,
    Trading212DtoObjectMother,
)
from tests.helpers.session_context_test_utils import create_logged_session_context

logger = logging.getLogger(__name__)


@pytest.fixture
def portfolio_tracker_remote_service(
    configuration_properties: ConfigurationProperties,
) -> PortfolioTrackerRemoteService:
    return PortfolioTrackerRemoteService(configuration_properties)


@pytest.mark.asyncio
async def should_login_against_the_backend(
    httpserver_test_env: HTTPServer, portfolio_tracker_remote_service: PortfolioTrackerRemoteService
) -> None:
    auth_response = AuthResponseDtoObjectMother.create()
    prepare_httpserver_auth_mock(httpserver_test_env, auth_response)

    result = await portfolio_tracker_remote_service.login(
        LoginCredentialsDto(email=auth_response.user.email, password="secret")
    )

    assert result == auth_response
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


@pytest.mark.asyncio
async def should_fetch_portfolios_with_the_session_bearer_token(
    httpserver_test_env: HTTPServer,
    configuration_properties: ConfigurationProperties,
    portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
) -> None:
    session_context, auth_response = create_logged_session_context(
        configuration_properties, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )
    portfolios = PortfolioDtoObjectMother.create_list(size=3)
    prepare_httpserver_authenticated_mock(httpserver_test_env, auth_response.access_token, "portfolios", portfolios)

    result = await portfolio_tracker_remote_service.get_portfolios(session=session_context)

    assert [portfolio.id for portfolio in result] == [portfolio.id for portfolio in portfolios]
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


@pytest.mark.asyncio
async def should_perform_portfolio_operations(
    httpserver_test_env: HTTPServer,
    configuration_properties: ConfigurationProperties,
    portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
) -> None:
    session_context, auth_response = create_logged_session_context(
        configuration_properties, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )
    access_token = auth_response.access_token
    portfolio = PortfolioDtoObjectMother.create(exchange="revolutx")
    balances = PortfolioBalancesDtoObjectMother.create(portfolio_id=portfolio.id)
    trades = TradeDtoObjectMother.create_list(size=2, portfolio_id=portfolio.id)
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, "portfolios", portfolio, method="POST", status=201
    )
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, f"portfolios/{portfolio.id}/balances", balances
    )
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, f"portfolios/{portfolio.id}/trades", trades
    )
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, f"portfolios/{portfolio.id}", method="DELETE", status=204
    )

    created = await portfolio_tracker_remote_service.create_portfolio(
        CreatePortfolioDto(name=portfolio.name, exchange="revolutx"), session=session_context
    )
    fetched_balances = await portfolio_tracker_remote_service.get_portfolio_balances(
        portfolio.id, session=session_context
    )
    fetched_trades = await portfolio_tracker_remote_service.get_trades(portfolio.id, session=session_context)
    await portfolio_tracker_remote_service.delete_portfolio(portfolio.id, session=session_context)

    assert created.id == portfolio.id
    assert fetched_balances.total_value == balances.total_value
    assert len(fetched_trades) == 2
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


@pytest.mark.asyncio
async def should_end_the_session_when_backend_answers_unauthorized(
    httpserver_test_env: HTTPServer,
    configuration_properties: ConfigurationProperties,
    portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
) -> None:
    session_context, auth_response = create_logged_session_context(
        configuration_properties, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )
    prepare_httpserver_error_mock(httpserver_test_env, auth_response.access_token, "portfolios", status=401)

    with pytest.raises(SessionExpiredError):
        await portfolio_tracker_remote_service.get_portfolios(session=session_context)

    assert not session_context.is_authenticated
    assert SessionStorageService(configuration_properties).load() is None
    httpserver_test_env.clear()


@pytest.mark.asyncio
async def should_raise_value_error_on_backend_failure(
    httpserver_test_env: HTTPServer,
    configuration_properties: ConfigurationProperties,
    portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
) -> None:
    session_context, auth_response = create_logged_session_context(
        configuration_properties, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )
    prepare_httpserver_error_mock(httpserver_test_env, auth_response.access_token, "portfolios", status=500)

    with pytest.raises(ValueError, match="Status code: 500"):
        await portfolio_tracker_remote_service.get_portfolios(session=session_context)

    # Any other error keeps the session alive
    assert session_context.is_authenticated
    httpserver_test_env.clear()


@pytest.mark.asyncio
async def should_manage_trades_and_list_transfers(
    faker,
    httpserver_test_env: HTTPServer,
    configuration_properties: ConfigurationProperties,
    portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
) -> None:
    session_context, auth_response = create_logged_session_context(
        configuration_properties, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )
    access_token = auth_response.access_token
    portfolio_id = faker.uuid4()
    trade = TradeDtoObjectMother.create(portfolio_id=portfolio_id, type="BUY")
    transfers = [
        TransferDto(
            id=faker.uuid4(),
            portfolio_id=portfolio_id,
            type="DEPOSIT",
            asset="EUR",
            amount="250.00",
            executed_at=faker.date_time_this_year().isoformat(),
        )
    ]
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, f"portfolios/{portfolio_id}/trades", trade, method="POST", status=201
    )
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, f"portfolios/{portfolio_id}/trades/{trade.id}", method="DELETE", status=204
    )
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, f"portfolios/{portfolio_id}/transfers", transfers
    )

    created = await portfolio_tracker_remote_service.create_trade(
        portfolio_id,
        CreateTradeDto(symbol=trade.symbol, type="BUY", quantity=float(trade.quantity), price=float(trade.price)),
        session=session_context,
    )
    await portfolio_tracker_remote_service.delete_trade(portfolio_id, trade.id, session=session_context)
    fetched_transfers = await portfolio_tracker_remote_service.get_transfers(portfolio_id, session=session_context)

    assert created.id == trade.id
    assert created.type == "BUY"
    assert [transfer.id for transfer in fetched_transfers] == [transfers[0].id]
    assert fetched_transfers[0].type == "DEPOSIT"
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


@pytest.mark.asyncio
async def should_refresh_a_portfolio(
    httpserver_test_env: HTTPServer,
    configuration_properties: ConfigurationProperties,
    portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
) -> None:
    session_context, auth_response = create_logged_session_context(
        configuration_properties, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )
    portfolio = PortfolioDtoObjectMother.create(exchange="binance")
    # Refresh lives under the singular resource in the backend
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, auth_response.access_token, f"portfolio/{portfolio.id}/refresh", portfolio, method="POST"
    )

    refreshed = await portfolio_tracker_remote_service.refresh_portfolio(portfolio.id, session=session_context)

    assert refreshed == portfolio
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


@pytest.mark.asyncio
async def should_page_trading212_transactions(
    faker,
    httpserver_test_env: HTTPServer,
    configuration_properties: ConfigurationProperties,
    portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
) -> None:
    session_context, auth_response = create_logged_session_context(
        configuration_properties, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )
    portfolio_id = faker.uuid4()
    page = Trading212DtoObjectMother.create_transactions_page(size=10, total=35, portfolio_id=portfolio_id)
    prepare_httpserver_authenticated_mock(
        httpserver_test_env,
        auth_response.access_token,
        f"portfolios/{portfolio_id}/trading212/transactions",
        page,
        query_string={"limit": "10", "offset": "20"},
    )

    result = await portfolio_tracker_remote_service.get_trading212_transactions(
        portfolio_id, limit=10, offset=20, session=session_context
    )

    assert result.total == 35
    assert [transaction.id for transaction in result.transactions] == [
        transaction.id for transaction in page.transactions
    ]
    assert result.transactions[0].total_amount == pytest.approx(page.transactions[0].total_amount)
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


@pytest.mark.asyncio
async def should_manage_exchange_api_keys(
    httpserver_test_env: HTTPServer,
    configuration_properties: ConfigurationProperties,
    portfolio_tracker_remote_service: PortfolioTrackerRemoteService,
) -> None:
    session_context, auth_response = create_logged_session_context(
        configuration_properties, portfolio_tracker_remote_service=portfolio_tracker_remote_service
    )
    access_token = auth_response.access_token
    api_keys = ExchangeApiKeyDtoObjectMother.create_list(size=2)
    added = ExchangeApiKeyDtoObjectMother.create(exchange="kraken", label="Savings")
    prepare_httpserver_authenticated_mock(httpserver_test_env, access_token, "api-keys", {"apiKeys": to_json(api_keys)})
    prepare_httpserver_authenticated_mock(
        httpserver_test_env,
        access_token,
        "api-keys",
        {"message": "API key added successfully", "apiKey": to_json(added)},
        method="POST",
        status=201,
    )
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, f"api-keys/{added.id}", method="DELETE", status=204
    )

    fetched = await portfolio_tracker_remote_service.get_api_keys(session=session_context)
    created = await portfolio_tracker_remote_service.add_api_key(
        CreateExchangeApiKeyDto(exchange="kraken", api_key="key", api_secret="secret", label="Savings"),
        session=session_context,
    )
    await portfolio_tracker_remote_service.delete_api_key(added.id, session=session_context)

    assert fetched == api_keys
    assert created == added
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()
