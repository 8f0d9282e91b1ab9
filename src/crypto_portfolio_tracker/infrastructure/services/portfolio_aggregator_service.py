from collections.abc import Iterable
from typing import Any

import pydash

from crypto_portfolio_tracker.commons.utils import (
    calculate_percentage,
    format_percentage,
    to_float_or_zero,
    to_optional_float,
)
from crypto_portfolio_tracker.config.configuration_properties import ConfigurationProperties
from crypto_portfolio_tracker.infrastructure.adapters.dtos.portfolio_balances_dto import BalanceHoldingDto
from crypto_portfolio_tracker.infrastructure.services.vo.aggregate_totals import AggregateTotals
from crypto_portfolio_tracker.infrastructure.services.vo.asset_allocation import AssetAllocation
from crypto_portfolio_tracker.infrastructure.services.vo.portfolio_summary import PortfolioSummary


class PortfolioAggregatorService:
    """
    Pure, stateless valuation helpers over portfolio summaries.
    None of these methods performs I/O nor raises on malformed numeric values.
    """

    def __init__(self, configuration_properties: ConfigurationProperties) -> None:
        self._configuration_properties = configuration_properties

    def aggregate(self, portfolios: Iterable[PortfolioSummary]) -> AggregateTotals:
        """
        Sums invested amount, current value and profit/loss over the given portfolios.
        Missing values count as 0.
        """
        total_invested, current_value, profit_loss = 0.0, 0.0, 0.0
        for portfolio in portfolios or []:
            total_invested += to_float_or_zero(portfolio.total_invested)
            current_value += to_float_or_zero(portfolio.current_value)
            profit_loss += to_float_or_zero(portfolio.profit_loss)
        return AggregateTotals(total_invested=total_invested, current_value=current_value, profit_loss=profit_loss)

    def calculate_percentage(self, profit_loss: Any, total_invested: Any) -> float:
        return calculate_percentage(profit_loss, total_invested)

    def format_percentage(self, profit_loss: Any, total_invested: Any) -> str:
        return format_percentage(profit_loss, total_invested)

    def get_currency_symbol(self, portfolios: Iterable[PortfolioSummary]) -> str:
        """
        Display currency symbol for a set of portfolios. Only a label, amounts are never converted.
        """
        if any(portfolio.exchange.is_euro_denominated for portfolio in portfolios or []):
            ret = self._configuration_properties.euro_currency_symbol
        else:
            ret = self._configuration_properties.default_currency_symbol
        return ret

    def calculate_asset_allocation(
        self, holdings: Iterable[BalanceHoldingDto], total_value: Any = None
    ) -> list[AssetAllocation]:
        """
        Composition of a live balance: value of each asset (quantity x current price)
        and its share of the whole portfolio value, biggest first.
        """
        valued_holdings: list[tuple[BalanceHoldingDto, float, float, float]] = []
        for holding in holdings or []:
            quantity = to_float_or_zero(holding.quantity)
            current_price = to_float_or_zero(holding.current_price)
            current_value = to_optional_float(holding.current_value)
            if current_value is None:
                current_value = quantity * current_price
            valued_holdings.append((holding, quantity, current_price, current_value))
        total_value = to_optional_float(total_value)
        if total_value is None:
            total_value = sum(current_value for *_, current_value in valued_holdings)
        allocations = [
            AssetAllocation(
                asset=holding.asset,
                symbol=holding.symbol,
                quantity=quantity,
                current_price=current_price,
                current_value=current_value,
                percentage=calculate_percentage(current_value, total_value),
            )
            for holding, quantity, current_price, current_value in valued_holdings
        ]
        return pydash.order_by(allocations, ["-current_value", "asset"])
