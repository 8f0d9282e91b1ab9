from pathlib import Path

from pytest_httpserver import HTTPServer
from typer.testing import CliRunner

from crypto_portfolio_tracker.config.configuration_properties import ConfigurationProperties
from crypto_portfolio_tracker.interfaces.cli.cli import app, tasks_container
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
    TransferDtoObjectMother,
)
from tests.helpers.session_context_test_utils import create_logged_session_context

runner = CliRunner()


def should_login_and_show_the_dashboard(httpserver_test_env: HTTPServer, session_storage_path_env: Path) -> None:
    auth_response = AuthResponseDtoObjectMother.create()
    portfolio = PortfolioDtoObjectMother.create(exchange="binance")
    prepare_httpserver_auth_mock(httpserver_test_env, auth_response)
    prepare_httpserver_authenticated_mock(httpserver_test_env, auth_response.access_token, "portfolios", [portfolio])

    login_result = runner.invoke(app, ["login", auth_response.user.email, "--password", "secret"])
    dashboard_result = runner.invoke(app, ["dashboard"])

    assert login_result.exit_code == 0
    assert "Logged in as" in login_result.output
    assert session_storage_path_env.is_file()
    assert dashboard_result.exit_code == 0
    assert "DASHBOARD" in dashboard_result.output
    assert portfolio.name in dashboard_result.output
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


def should_ask_to_login_when_there_is_no_session(session_storage_path_env: Path) -> None:
    result = runner.invoke(app, ["dashboard"])

    assert result.exit_code == 1
    assert "login EMAIL" in result.output


def should_forget_the_session_on_logout(httpserver_test_env: HTTPServer, session_storage_path_env: Path) -> None:
    auth_response = AuthResponseDtoObjectMother.create()
    prepare_httpserver_auth_mock(httpserver_test_env, auth_response)

    runner.invoke(app, ["login", auth_response.user.email, "--password", "secret"])
    result = runner.invoke(app, ["logout"])

    assert result.exit_code == 0
    assert not session_storage_path_env.is_file()
    httpserver_test_env.clear()


def should_show_the_portfolio_view(
    httpserver_test_env: HTTPServer, configuration_properties: ConfigurationProperties
) -> None:
    _, auth_response = create_logged_session_context(configuration_properties)
    portfolio = PortfolioDtoObjectMother.create(exchange="revolutx")
    balances = PortfolioBalancesDtoObjectMother.create(portfolio_id=portfolio.id)
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, auth_response.access_token, f"portfolios/{portfolio.id}", portfolio
    )
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, auth_response.access_token, f"portfolios/{portfolio.id}/balances", balances
    )

    result = runner.invoke(app, ["portfolio", portfolio.id])

    assert result.exit_code == 0
    assert portfolio.name.upper() in result.output
    assert "Refreshed at" not in result.output
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


def should_watch_the_portfolio_until_the_session_expires(
    httpserver_test_env: HTTPServer, configuration_properties: ConfigurationProperties, session_storage_path_env: Path
) -> None:
    _, auth_response = create_logged_session_context(configuration_properties)
    access_token = auth_response.access_token
    portfolio = PortfolioDtoObjectMother.create(exchange="revolutx")
    balances = PortfolioBalancesDtoObjectMother.create(portfolio_id=portfolio.id)
    # Initial render and one polling tick succeed, the next tick is rejected
    for _ in range(2):
        prepare_httpserver_authenticated_mock(
            httpserver_test_env, access_token, f"portfolios/{portfolio.id}", portfolio
        )
        prepare_httpserver_authenticated_mock(
            httpserver_test_env, access_token, f"portfolios/{portfolio.id}/balances", balances
        )
    prepare_httpserver_error_mock(httpserver_test_env, access_token, f"portfolios/{portfolio.id}", status=401)

    result = runner.invoke(app, ["watch", portfolio.id, "--interval", "1"])

    assert result.exit_code == 1
    assert portfolio.name.upper() in result.output
    assert result.output.count("Refreshed at") == 1
    assert "Session expired" in result.output
    assert tasks_container.polling_task_manager().get_tasks() == {}
    assert tasks_container.scheduler().get_jobs() == []
    assert not session_storage_path_env.is_file()
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


def should_refresh_a_portfolio(
    httpserver_test_env: HTTPServer, configuration_properties: ConfigurationProperties
) -> None:
    _, auth_response = create_logged_session_context(configuration_properties)
    portfolio = PortfolioDtoObjectMother.create(exchange="binance")
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, auth_response.access_token, f"portfolio/{portfolio.id}/refresh", portfolio, method="POST"
    )

    result = runner.invoke(app, ["refresh", portfolio.id])

    assert result.exit_code == 0
    assert f"{portfolio.name} refreshed" in result.output
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


def should_list_the_filtered_transfers(
    faker, httpserver_test_env: HTTPServer, configuration_properties: ConfigurationProperties
) -> None:
    _, auth_response = create_logged_session_context(configuration_properties)
    portfolio_id = faker.uuid4()
    transfers = [
        TransferDtoObjectMother.create(portfolio_id=portfolio_id, type="DEPOSIT", asset="EUR", amount=400),
        TransferDtoObjectMother.create(portfolio_id=portfolio_id, type="WITHDRAWAL", asset="BTC", amount=0.25),
    ]
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, auth_response.access_token, f"portfolios/{portfolio_id}/transfers", transfers
    )

    result = runner.invoke(app, ["transfers", portfolio_id, "--type", "deposit"])

    assert result.exit_code == 0
    assert "TRANSFERS (2)" in result.output
    assert "400.00 EUR" in result.output
    assert "0.25 BTC" not in result.output
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


def should_report_an_invalid_trade_type(faker, configuration_properties: ConfigurationProperties) -> None:
    create_logged_session_context(configuration_properties)

    result = runner.invoke(
        app, ["add-trade", faker.uuid4(), "BTC", "--type", "HOLD", "--quantity", "1", "--price", "100"]
    )

    assert result.exit_code == 1
    assert "❌" in result.output


def should_manage_api_keys(httpserver_test_env: HTTPServer, configuration_properties: ConfigurationProperties) -> None:
    _, auth_response = create_logged_session_context(configuration_properties)
    access_token = auth_response.access_token
    added = ExchangeApiKeyDtoObjectMother.create(exchange="binance", label="Main account")
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, "api-keys", {"apiKey": to_json(added)}, method="POST", status=201
    )
    prepare_httpserver_authenticated_mock(httpserver_test_env, access_token, "api-keys", {"apiKeys": to_json([added])})
    prepare_httpserver_authenticated_mock(
        httpserver_test_env, access_token, f"api-keys/{added.id}", method="DELETE", status=204
    )

    add_result = runner.invoke(
        app, ["add-api-key", "binance", "--api-key", "key", "--api-secret", "secret", "--label", "Main account"]
    )
    list_result = runner.invoke(app, ["api-keys"])
    delete_result = runner.invoke(app, ["delete-api-key", added.id])

    assert add_result.exit_code == 0
    assert f"Main account API key added ({added.id})" in add_result.output
    assert list_result.exit_code == 0
    assert f"Main account [binance] ({added.id})" in list_result.output
    assert delete_result.exit_code == 0
    assert f"API key {added.id} deleted" in delete_result.output
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


def should_page_trading212_transactions(
    faker, httpserver_test_env: HTTPServer, configuration_properties: ConfigurationProperties
) -> None:
    _, auth_response = create_logged_session_context(configuration_properties)
    portfolio_id = faker.uuid4()
    page = Trading212DtoObjectMother.create_transactions_page(size=2, total=7, portfolio_id=portfolio_id)
    prepare_httpserver_authenticated_mock(
        httpserver_test_env,
        auth_response.access_token,
        f"portfolios/{portfolio_id}/trading212/transactions",
        page,
        query_string={"limit": "2", "offset": "2"},
    )

    result = runner.invoke(app, ["t212-transactions", portfolio_id, "--limit", "2", "--offset", "2"])

    assert result.exit_code == 0
    assert "TRADING212 TRANSACTIONS (7)" in result.output
    assert "--offset 4" in result.output
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()


def should_delete_a_trade(httpserver_test_env: HTTPServer, configuration_properties: ConfigurationProperties) -> None:
    _, auth_response = create_logged_session_context(configuration_properties)
    trade = TradeDtoObjectMother.create()
    prepare_httpserver_authenticated_mock(
        httpserver_test_env,
        auth_response.access_token,
        f"portfolios/{trade.portfolio_id}/trades/{trade.id}",
        method="DELETE",
        status=204,
    )

    result = runner.invoke(app, ["delete-trade", trade.portfolio_id, trade.id])

    assert result.exit_code == 0
    assert f"Trade {trade.id} deleted" in result.output
    httpserver_test_env.check_assertions()
    httpserver_test_env.clear()
