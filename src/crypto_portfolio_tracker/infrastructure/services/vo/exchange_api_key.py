from dataclasses import dataclass

from crypto_portfolio_tracker.infrastructure.adapters.dtos.exchange_api_key_dto import ExchangeApiKeyDto


@dataclass(frozen=True, kw_only=True)
class ExchangeApiKey:
    id: str
    exchange: str
    label: str | None = None
    is_active: bool = True
    created_at: str | None = None

    @property
    def display_name(self) -> str:
        return self.label or self.exchange.upper()

    @classmethod
    def from_dto(cls, api_key: ExchangeApiKeyDto) -> "ExchangeApiKey":
        return cls(
            id=api_key.id,
            exchange=api_key.exchange,
            label=api_key.label,
            is_active=api_key.is_active,
            created_at=api_key.created_at,
        )
