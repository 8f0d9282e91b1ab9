from crypto_portfolio_tracker.infrastructure.services.vo.aggregate_totals import AggregateTotals
from crypto_portfolio_tracker.infrastructure.services.vo.asset_allocation import AssetAllocation
from crypto_portfolio_tracker.infrastructure.services.vo.dashboard import Dashboard
from crypto_portfolio_tracker.infrastructure.services.vo.exchange_api_key import ExchangeApiKey
from crypto_portfolio_tracker.infrastructure.services.vo.holding import Holding
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_summary import PortfolioSummary
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_views import (
    AbstractPortfolioView,
    PortfolioView,
    SimpleBalanceView,
    TrackedView,
)
from crypto_portfolio_tracker.infrastructure.services.vo.trade_item import TradeItem
from crypto_portfolio_tracker.infrastructure.services.vo.trading212_account_summary import Trading212AccountSummary
from crypto_portfolio_tracker.infrastructure.services.vo.trading212_transaction_item import (
    Trading212TransactionItem,
    Trading212TransactionsPage,
)
from crypto_portfolio_tracker.infrastructure.services.vo.transfer_item import TransferItem, TransfersOverview
from crypto_portfolio_tracker.infrastructure.services.vo.user_session import SessionUser, UserSession

__all__ = [
    "AbstractPortfolioView",
    "AggregateTotals",
    "AssetAllocation",
    "Dashboard",
    "ExchangeApiKey",
    "Holding",
    "PortfolioSummary",
    "PortfolioView",
    "SessionUser",
    "SimpleBalanceView",
    "TrackedView",
    "TradeItem",
    "Trading212AccountSummary",
    "Trading212TransactionItem",
    "Trading212TransactionsPage",
    "TransferItem",
    "TransfersOverview",
    "UserSession",
]
