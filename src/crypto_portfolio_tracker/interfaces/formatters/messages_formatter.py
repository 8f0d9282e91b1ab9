from datetime import datetime

from crypto_portfolio_tracker.commons.utils import format_amount, format_signed_percentage
from crypto_portfolio_tracker.infrastructure.services.vo.dashboard import Dashboard
from crypto_portfolio_tracker.infrastructure.services.vo.exchange_api_key import ExchangeApiKey
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_views import PortfolioView
from crypto_portfolio_tracker.infrastructure.services.vo.trading212_transaction_item import Trading212TransactionsPage
from crypto_portfolio_tracker.infrastructure.services.vo.transfer_item import TransfersOverview


class MessagesFormatter:
    def format_dashboard(self, dashboard: Dashboard) -> str:
        symbol = dashboard.currency_symbol
        totals = dashboard.totals
        message_lines = [
            "=============================",
            "📊 DASHBOARD 📊",
            "=============================",
            f"💸 TOTAL INVESTED: {symbol}{format_amount(totals.total_invested)}",
            f"💰 CURRENT: {symbol}{format_amount(totals.current_value)}",
            f"🤑 P/L: {symbol}{format_amount(totals.profit_loss)} "
            f"({format_signed_percentage(totals.profit_loss_percentage)})",
            "----------------------------------------------------",
            f"🗂️ PORTFOLIOS ({dashboard.portfolios_count})",
        ]
        if dashboard.portfolios:
            for portfolio in dashboard.portfolios:
                if portfolio.id in dashboard.degraded_portfolio_ids:
                    detail = "⚠️ valuation unavailable"
                elif portfolio.total_invested is None:
                    detail = f"{symbol}{format_amount(portfolio.current_value)} (live balance)"
                else:
                    detail = (
                        f"{symbol}{format_amount(portfolio.current_value)} | "
                        f"{format_signed_percentage(portfolio.profit_loss_percentage)}"
                    )
                message_lines.append(f"🏷️ {portfolio.name} [{portfolio.exchange.value}] {detail}")
        else:
            message_lines.append("✳️ No portfolios found.")
        message_lines.append("=============================")
        return "\n".join(message_lines)

    def format_portfolio_view(self, view: PortfolioView, *, refreshed_at: datetime | None = None) -> str:
        message_lines = [
            "=============================",
            f"📁 {view.summary.name.upper()} 📁",
            "=============================",
        ]
        if view.summary.description:
            message_lines.append(view.summary.description)
        message_lines.extend(view.render_lines())
        if refreshed_at is not None:
            message_lines.append(f"🕒 Refreshed at {refreshed_at.strftime('%Y-%m-%d %H:%M:%S')}")
        message_lines.append("=============================")
        return "\n".join(message_lines)

    def format_transfers(self, overview: TransfersOverview) -> str:
        message_lines = [
            "=============================",
            f"🔁 TRANSFERS ({overview.transfers_count})",
            "=============================",
            f"📥 DEPOSITS: {format_amount(overview.total_deposits)}",
            f"📤 WITHDRAWALS: {format_amount(overview.total_withdrawals)}",
            f"🧾 FEES: {format_amount(overview.total_fees)}",
            "----------------------------------------------------",
        ]
        if overview.transfers:
            for transfer in overview.transfers:
                icon = "📥" if transfer.type == "DEPOSIT" else "📤"
                message_lines.append(
                    f"{icon} {transfer.executed_at or '-'} {format_amount(transfer.amount)} {transfer.asset}"
                    + (f" via {transfer.network}" if transfer.network else "")
                )
        else:
            message_lines.append("✳️ No transfers found.")
        message_lines.append("=============================")
        return "\n".join(message_lines)

    def format_trading212_transactions(self, page: Trading212TransactionsPage) -> str:
        message_lines = [
            "=============================",
            f"📜 TRADING212 TRANSACTIONS ({page.total})",
            "=============================",
        ]
        if page.transactions:
            for transaction in page.transactions:
                amount = (
                    f"{format_amount(transaction.total_amount)} {transaction.total_currency or ''}".rstrip()
                    if transaction.total_amount is not None
                    else "-"
                )
                message_lines.append(
                    f"🔹 {transaction.time or '-'} {transaction.action} "
                    f"{transaction.ticker or transaction.name or ''} {amount}"
                )
            if page.has_more:
                message_lines.append(f"➡️ More available, use --offset {page.offset + len(page.transactions)}")
        else:
            message_lines.append("✳️ No transactions found.")
        message_lines.append("=============================")
        return "\n".join(message_lines)

    def format_api_keys(self, api_keys: list[ExchangeApiKey]) -> str:
        message_lines = ["=============================", "🔑 API KEYS 🔑", "============================="]
        if api_keys:
            for api_key in api_keys:
                status = "✅" if api_key.is_active else "⏸️"
                message_lines.append(f"{status} {api_key.display_name} [{api_key.exchange}] ({api_key.id})")
        else:
            message_lines.append("✳️ No API keys found.")
        message_lines.append("=============================")
        return "\n".join(message_lines)
