from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class AssetAllocation:
    asset: str
    symbol: str | None
    quantity: float
    current_price: float
    current_value: float
    # Share of the total portfolio value, in %
    percentage: float
