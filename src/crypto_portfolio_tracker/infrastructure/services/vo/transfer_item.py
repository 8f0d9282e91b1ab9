from dataclasses import dataclass, field

from crypto_portfolio_tracker.commons.utils import to_float_or_zero
from crypto_portfolio_tracker.infrastructure.adapters.dtos.transfer_dto import TransferDto, TransferType


@dataclass(frozen=True, kw_only=True)
class TransferItem:
    id: str
    type: TransferType
    asset: str
    amount: float
    fee: float
    executed_at: str | None = None
    network: str | None = None
    tx_id: str | None = None

    @classmethod
    def from_dto(cls, transfer: TransferDto) -> "TransferItem":
        return cls(
            id=transfer.id,
            type=transfer.type,
            asset=transfer.asset,
            amount=to_float_or_zero(transfer.amount),
            fee=to_float_or_zero(transfer.fee),
            executed_at=transfer.executed_at,
            network=transfer.network,
            tx_id=transfer.tx_id,
        )


@dataclass(frozen=True, kw_only=True)
class TransfersOverview:
    """
    Deposits and withdrawals of a portfolio.
    Totals are always computed over every transfer, filters only narrow the listed ones.
    """

    transfers: list[TransferItem] = field(default_factory=list)
    transfers_count: int = 0
    total_deposits: float = 0.0
    total_withdrawals: float = 0.0
    total_fees: float = 0.0

    @classmethod
    def from_items(
        cls, transfers: list[TransferItem], *, transfer_type: TransferType | None = None, asset: str | None = None
    ) -> "TransfersOverview":
        listed = [
            transfer
            for transfer in transfers
            if (transfer_type is None or transfer.type == transfer_type)
            and (not asset or asset.lower() in transfer.asset.lower())
        ]
        return cls(
            transfers=listed,
            transfers_count=len(transfers),
            total_deposits=sum(transfer.amount for transfer in transfers if transfer.type == "DEPOSIT"),
            total_withdrawals=sum(transfer.amount for transfer in transfers if transfer.type == "WITHDRAWAL"),
            total_fees=sum(transfer.fee for transfer in transfers),
        )
