from enum import Enum
from typing import Any, Self

from crypto_portfolio_tracker.infrastructure.services.enums.portfolio_view_mode_enum import PortfolioViewModeEnum


class ExchangeEnum(str, Enum):
    """
    Exchange a portfolio is linked to. NONE stands for a manual portfolio.
    """

    NONE = "none"
    BINANCE = "binance"
    REVOLUTX = "revolutx"
    TRADING212 = "trading212"

    @classmethod
    def from_value(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        normalized_value = str(value).strip().lower() if value is not None else ""
        return next((exchange for exchange in cls if exchange.value == normalized_value), cls.NONE)

    @property
    def is_euro_denominated(self) -> bool:
        return self in (ExchangeEnum.REVOLUTX, ExchangeEnum.TRADING212)

    @property
    def view_mode(self) -> PortfolioViewModeEnum:
        if self == ExchangeEnum.REVOLUTX:
            ret = PortfolioViewModeEnum.SIMPLE_BALANCE
        else:
            ret = PortfolioViewModeEnum.TRACKED
        return ret
