import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from crypto_portfolio_tracker.commons.utils import format_amount, format_signed_percentage, to_float_or_zero
from crypto_portfolio_tracker.infrastructure.services.enums import PortfolioViewModeEnum
from crypto_portfolio_tracker.infrastructure.services.vo.asset_allocation import AssetAllocation
from crypto_portfolio_tracker.infrastructure.services.vo.holding import Holding
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_summary import PortfolioSummary
from crypto_portfolio_tracker.infrastructure.services.vo.trade_item import TradeItem
from crypto_portfolio_tracker.infrastructure.services.vo.trading212_account_summary import Trading212AccountSummary


class AbstractPortfolioView(ABC):
    """
    Valuation view of a single portfolio.
    The concrete variant is selected once from the portfolio exchange and stays fixed until the next fetch.
    """

    mode: ClassVar[PortfolioViewModeEnum]
    summary: PortfolioSummary
    currency_symbol: str

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """
        JSON friendly representation of the view
        """

    @abstractmethod
    def render_lines(self) -> list[str]:
        """
        Plain text lines describing the view
        """

    def _amount(self, value: Any) -> str:
        return f"{self.currency_symbol}{format_amount(value)}"

    def _header_dict(self) -> dict[str, Any]:
        return {
            "id": self.summary.id,
            "name": self.summary.name,
            "description": self.summary.description,
            "exchange": self.summary.exchange.value,
            "mode": self.mode.value,
            "currency_symbol": self.currency_symbol,
        }


@dataclass(frozen=True, kw_only=True)
class SimpleBalanceView(AbstractPortfolioView):
    """
    Live balance of an exchange account, without invested / profit and loss tracking.
    """

    mode: ClassVar[PortfolioViewModeEnum] = PortfolioViewModeEnum.SIMPLE_BALANCE

    summary: PortfolioSummary
    currency_symbol: str
    total_value: float = 0.0
    allocations: list[AssetAllocation] = field(default_factory=list)
    updated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._header_dict(),
            "current_value": self.total_value,
            "updated_at": self.updated_at,
            "allocations": [dataclasses.asdict(allocation) for allocation in self.allocations],
        }

    def render_lines(self) -> list[str]:
        lines = [f"💰 CURRENT VALUE: {self._amount(self.total_value)}", "(Live balance, no P/L tracking)"]
        if self.allocations:
            for allocation in self.allocations:
                lines.append(
                    f"🏷️ {allocation.asset}: {allocation.quantity:.8f} @ {self._amount(allocation.current_price)} "
                    f"= {self._amount(allocation.current_value)} ({allocation.percentage:.2f}%)"
                )
        else:
            lines.append("✳️ No balances found.")
        return lines


@dataclass(frozen=True, kw_only=True)
class TrackedView(AbstractPortfolioView):
    """
    Portfolio with invested amount, current value and profit/loss tracked.
    """

    mode: ClassVar[PortfolioViewModeEnum] = PortfolioViewModeEnum.TRACKED

    summary: PortfolioSummary
    currency_symbol: str
    holdings: list[Holding] = field(default_factory=list)
    recent_trades: list[TradeItem] = field(default_factory=list)
    trading212_account_summary: Trading212AccountSummary | None = None

    @property
    def total_invested(self) -> float:
        return to_float_or_zero(self.summary.total_invested)

    @property
    def current_value(self) -> float:
        return to_float_or_zero(self.summary.current_value)

    @property
    def profit_loss(self) -> float:
        return to_float_or_zero(self.summary.profit_loss)

    def to_dict(self) -> dict[str, Any]:
        ret = {
            **self._header_dict(),
            "total_invested": self.total_invested,
            "current_value": self.current_value,
            "profit_loss": self.profit_loss,
            "profit_loss_percentage": self.summary.formatted_profit_loss_percentage,
            "total_fees": self.summary.total_fees,
            "holdings": [
                {**dataclasses.asdict(holding), "profit_loss_percentage": round(holding.profit_loss_percentage, 2)}
                for holding in self.holdings
            ],
            "recent_trades": [dataclasses.asdict(trade) for trade in self.recent_trades],
        }
        if self.trading212_account_summary is not None:
            ret["trading212_account_summary"] = dataclasses.asdict(self.trading212_account_summary)
        return ret

    def render_lines(self) -> list[str]:
        lines = [
            f"💸 TOTAL INVESTED: {self._amount(self.total_invested)}",
            f"💰 CURRENT: {self._amount(self.current_value)}",
            f"🤑 P/L: {self._amount(self.profit_loss)} "
            f"({format_signed_percentage(self.summary.profit_loss_percentage)})",
        ]
        if self.trading212_account_summary is not None:
            account_summary = self.trading212_account_summary
            lines.extend(
                [
                    f"🏦 BALANCE: {self._amount(account_summary.current_balance)}",
                    f"📥 NET DEPOSITS: {self._amount(account_summary.net_deposits)}",
                    f"🎁 INTEREST + CASHBACK: {self._amount(account_summary.earnings)}",
                ]
            )
        if self.holdings:
            for holding in self.holdings:
                current_value = self._amount(holding.current_value) if holding.current_value is not None else "-"
                lines.append(
                    f"🏷️ {holding.symbol}: {holding.quantity:.4f} "
                    f"| invested {self._amount(holding.total_invested)} "
                    f"| value {current_value} | {format_signed_percentage(holding.profit_loss_percentage)}"
                )
        else:
            lines.append("✳️ No holdings found.")
        return lines


PortfolioView = SimpleBalanceView | TrackedView
