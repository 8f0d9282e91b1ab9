from dataclasses import dataclass, field

from crypto_portfolio_tracker.commons.constants import TRADING212_TRANSACTIONS_PAGE_SIZE
from crypto_portfolio_tracker.commons.utils import to_optional_float
from crypto_portfolio_tracker.infrastructure.adapters.dtos.trading212_dto import (
    Trading212TransactionDto,
    Trading212TransactionsPageDto,
)


@dataclass(frozen=True, kw_only=True)
class Trading212TransactionItem:
    id: str
    action: str
    time: str | None = None
    ticker: str | None = None
    name: str | None = None
    shares: float | None = None
    price_per_share: float | None = None
    total_amount: float | None = None
    total_currency: str | None = None

    @classmethod
    def from_dto(cls, transaction: Trading212TransactionDto) -> "Trading212TransactionItem":
        return cls(
            id=transaction.id,
            action=transaction.action,
            time=transaction.time,
            ticker=transaction.ticker,
            name=transaction.name or transaction.merchant_name,
            shares=to_optional_float(transaction.shares),
            price_per_share=to_optional_float(transaction.price_per_share),
            total_amount=to_optional_float(transaction.total_amount),
            total_currency=transaction.total_currency,
        )


@dataclass(frozen=True, kw_only=True)
class Trading212TransactionsPage:
    transactions: list[Trading212TransactionItem] = field(default_factory=list)
    total: int = 0
    limit: int = TRADING212_TRANSACTIONS_PAGE_SIZE
    offset: int = 0

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.transactions) < self.total

    @classmethod
    def from_dto(cls, page: Trading212TransactionsPageDto, *, limit: int, offset: int) -> "Trading212TransactionsPage":
        return cls(
            transactions=[Trading212TransactionItem.from_dto(transaction) for transaction in page.transactions],
            total=page.total,
            limit=limit,
            offset=offset,
        )
