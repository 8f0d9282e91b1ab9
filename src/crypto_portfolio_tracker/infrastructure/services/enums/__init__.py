from crypto_portfolio_tracker.infrastructure.services.enums.exchange_enum import ExchangeEnum
from crypto_portfolio_tracker.infrastructure.services.enums.portfolio_view_mode_enum import PortfolioViewModeEnum
from crypto_portfolio_tracker.infrastructure.services.enums.session_keys_enum import SessionKeysEnum

__all__ = ["ExchangeEnum", "PortfolioViewModeEnum", "SessionKeysEnum"]
