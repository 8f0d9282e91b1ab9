import asyncio
import logging
import sys
from collections.abc import Coroutine
from datetime import datetime
from typing import Any

import typer
import uvicorn

from crypto_portfolio_tracker.commons.constants import TRADING212_TRANSACTIONS_PAGE_SIZE
from crypto_portfolio_tracker.commons.exceptions import NotAuthenticatedError
from crypto_portfolio_tracker.commons.utils import format_amount, format_exception
from crypto_portfolio_tracker.config.dependencies import get_application_container
from crypto_portfolio_tracker.infrastructure.adapters.dtos.auth_dto import LoginCredentialsDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.exchange_api_key_dto import CreateExchangeApiKeyDto
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trade_dto import CreateTradeDto
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_views import PortfolioView
from crypto_portfolio_tracker.interfaces.formatters.messages_formatter import MessagesFormatter

logging.basicConfig(level=logging.WARNING, stream=sys.stderr, format="%(asctime)s - %(levelname)s - %(message)s")

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------------
# --- Typer CLI Application ---
# ------------------------------------------------------------------------------------

app = typer.Typer(help="Crypto portfolio tracker command line.")

application_container = get_application_container()
services_container = application_container.infrastructure_container().services_container()
tasks_container = application_container.infrastructure_container().tasks_container()
messages_formatter = MessagesFormatter()


def _new_session_context() -> SessionContext:
    session_context: SessionContext = services_container.session_context()
    return session_context.initialize()


def _run(coroutine: Coroutine[Any, Any, None]) -> None:
    try:
        asyncio.run(coroutine)
    except NotAuthenticatedError as e:
        typer.secho(f"🔒 {str(e)}", fg=typer.colors.RED)
        typer.echo("👉 Please run 'crypto-portfolio-tracker login EMAIL' first.")
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.secho(f"❌ {format_exception(e)}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.command()
def login(
    email: str = typer.Argument(..., help="Email of the account."),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Password of the account."),
):
    """
    Logs in against the backend and persists the session for the next commands.
    """

    async def _login() -> None:
        session_context = _new_session_context()
        user_session = await session_context.login(LoginCredentialsDto(email=email, password=password))
        typer.secho(f"✅ Logged in as {user_session.user.name or user_session.user.email}", fg=typer.colors.GREEN)

    _run(_login())


@app.command()
def logout():
    """
    Ends the persisted session.
    """

    async def _logout() -> None:
        await _new_session_context().logout()
        typer.secho("👋 Logged out.", fg=typer.colors.GREEN)

    _run(_logout())


@app.command()
def dashboard():
    """
    Shows the grand totals over every portfolio.
    """

    async def _dashboard() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        result = await services_container.dashboard_service().get_dashboard(session=session_context)
        typer.echo(messages_formatter.format_dashboard(result))
        if result.degraded_portfolio_ids:
            typer.secho(
                f"⚠️ {len(result.degraded_portfolio_ids)} portfolio(s) could not be valued.", fg=typer.colors.YELLOW
            )

    _run(_dashboard())


@app.command()
def portfolio(portfolio_id: str = typer.Argument(..., help="Identifier of the portfolio.")):
    """
    Shows the valuation view of a single portfolio.
    """

    async def _portfolio() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        view = await services_container.portfolio_view_service().get_portfolio_view(
            portfolio_id, session=session_context
        )
        typer.echo(messages_formatter.format_portfolio_view(view))

    _run(_portfolio())


@app.command()
def watch(
    portfolio_id: str = typer.Argument(..., help="Identifier of the portfolio."),
    interval: int = typer.Option(None, min=1, help="Polling interval in seconds."),
):
    """
    Shows a portfolio view and refreshes it periodically until interrupted (Ctrl+C).
    """

    def _echo_view(view: PortfolioView) -> None:
        typer.echo(messages_formatter.format_portfolio_view(view, refreshed_at=datetime.now()))

    async def _watch() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        _echo_view(
            await services_container.portfolio_view_service().get_portfolio_view(portfolio_id, session=session_context)
        )
        polling_task_manager = tasks_container.polling_task_manager()
        task_id = await polling_task_manager.start_polling(
            portfolio_id, session=session_context, listener=_echo_view, interval_seconds=interval
        )
        try:
            # Polling runs on the scheduler until the session ends or the user interrupts
            while session_context.is_authenticated and task_id in polling_task_manager.get_tasks():
                await asyncio.sleep(1)
        finally:
            await polling_task_manager.stop_polling(task_id)
            tasks_container.scheduler().shutdown(wait=False)
        if not session_context.is_authenticated:
            raise NotAuthenticatedError("Session expired, please log in again.")

    try:
        _run(_watch())
    except KeyboardInterrupt:
        typer.echo("👋 Stopped watching.")


@app.command()
def refresh(portfolio_id: str = typer.Argument(..., help="Identifier of the portfolio.")):
    """
    Asks the backend to reprice a portfolio with current market prices.
    """

    async def _refresh() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        summary = await services_container.portfolio_service().refresh(portfolio_id, session=session_context)
        typer.secho(f"🔄 {summary.name} refreshed.", fg=typer.colors.GREEN)

    _run(_refresh())


@app.command()
def transfers(
    portfolio_id: str = typer.Argument(..., help="Identifier of the portfolio."),
    transfer_type: str = typer.Option(None, "--type", help="DEPOSIT or WITHDRAWAL."),
    asset: str = typer.Option(None, help="Only transfers of assets containing this text."),
):
    """
    Lists the deposits and withdrawals of a portfolio.
    """

    async def _transfers() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        overview = await services_container.portfolio_service().find_transfers(
            portfolio_id,
            session=session_context,
            transfer_type=transfer_type.upper() if transfer_type else None,
            asset=asset,
        )
        typer.echo(messages_formatter.format_transfers(overview))

    _run(_transfers())


@app.command(name="add-trade")
def add_trade(
    portfolio_id: str = typer.Argument(..., help="Identifier of the portfolio."),
    symbol: str = typer.Argument(..., help="Traded asset, e.g. BTC."),
    trade_type: str = typer.Option("BUY", "--type", help="BUY or SELL."),
    quantity: float = typer.Option(..., help="Traded quantity."),
    price: float = typer.Option(..., help="Unit price."),
    fee: float = typer.Option(0.0, help="Fee paid."),
    executed_at: str = typer.Option(None, help="Execution date (ISO 8601)."),
):
    """
    Records a manual trade in a portfolio.
    """

    async def _add_trade() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        trade = CreateTradeDto(
            symbol=symbol.upper(),
            type=trade_type.upper(),
            quantity=quantity,
            price=price,
            fee=fee,
            executed_at=executed_at,
        )
        created = await services_container.portfolio_service().add_trade(portfolio_id, trade, session=session_context)
        typer.secho(
            f"✅ {created.type} {format_amount(created.quantity)} {created.symbol} ({created.id})",
            fg=typer.colors.GREEN,
        )

    _run(_add_trade())


@app.command(name="delete-trade")
def delete_trade(
    portfolio_id: str = typer.Argument(..., help="Identifier of the portfolio."),
    trade_id: str = typer.Argument(..., help="Identifier of the trade."),
):
    """
    Deletes a trade of a portfolio.
    """

    async def _delete_trade() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        await services_container.portfolio_service().delete_trade(portfolio_id, trade_id, session=session_context)
        typer.secho(f"🗑️ Trade {trade_id} deleted.", fg=typer.colors.GREEN)

    _run(_delete_trade())


@app.command(name="t212-transactions")
def trading212_transactions(
    portfolio_id: str = typer.Argument(..., help="Identifier of the Trading212 portfolio."),
    limit: int = typer.Option(TRADING212_TRANSACTIONS_PAGE_SIZE, min=1, max=500, help="Page size."),
    offset: int = typer.Option(0, min=0, help="Transactions to skip."),
):
    """
    Lists the account transactions of a Trading212 portfolio, newest first.
    """

    async def _trading212_transactions() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        page = await services_container.portfolio_service().find_trading212_transactions(
            portfolio_id, session=session_context, limit=limit, offset=offset
        )
        typer.echo(messages_formatter.format_trading212_transactions(page))

    _run(_trading212_transactions())


@app.command(name="api-keys")
def api_keys():
    """
    Lists the exchange API keys registered in the backend.
    """

    async def _api_keys() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        result = await services_container.exchange_api_key_service().find_all(session=session_context)
        typer.echo(messages_formatter.format_api_keys(result))

    _run(_api_keys())


@app.command(name="add-api-key")
def add_api_key(
    exchange: str = typer.Argument(..., help="Exchange the key belongs to, e.g. binance."),
    api_key: str = typer.Option(..., prompt=True, help="API key."),
    api_secret: str = typer.Option(..., prompt=True, hide_input=True, help="API secret."),
    label: str = typer.Option(None, help="Friendly name of the key."),
):
    """
    Registers an exchange API key so the backend can import balances and trades.
    """

    async def _add_api_key() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        created = await services_container.exchange_api_key_service().add(
            CreateExchangeApiKeyDto(exchange=exchange.lower(), api_key=api_key, api_secret=api_secret, label=label),
            session=session_context,
        )
        typer.secho(f"🔑 {created.display_name} API key added ({created.id})", fg=typer.colors.GREEN)

    _run(_add_api_key())


@app.command(name="delete-api-key")
def delete_api_key(api_key_id: str = typer.Argument(..., help="Identifier of the API key.")):
    """
    Deletes an exchange API key.
    """

    async def _delete_api_key() -> None:
        session_context = _new_session_context()
        session_context.require_session()
        await services_container.exchange_api_key_service().delete(api_key_id, session=session_context)
        typer.secho(f"🗑️ API key {api_key_id} deleted.", fg=typer.colors.GREEN)

    _run(_delete_api_key())


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface the API binds to."),
    port: int = typer.Option(8000, help="Port the API listens on."),
):
    """
    Serves the REST API.
    """
    uvicorn.run("crypto_portfolio_tracker.main:app", host=host, port=port)


if __name__ == "__main__":
    app()
