from enum import Enum


class PortfolioViewModeEnum(str, Enum):
    """
    Valuation mode of a portfolio view.
    """

    # Live balance only, no invested / P&L tracking
    SIMPLE_BALANCE = "simple_balance"
    # Invested, current value and profit/loss tracked
    TRACKED = "tracked"
