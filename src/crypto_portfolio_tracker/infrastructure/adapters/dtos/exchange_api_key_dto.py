from pydantic import BaseModel, ConfigDict, Field


class ExchangeApiKeyDto(BaseModel):
    """
    Exchange credentials as listed by the backend. Key and secret are never sent back.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    exchange: str
    label: str | None = None
    is_active: bool = Field(alias="isActive", default=True)
    created_at: str | None = Field(alias="createdAt", default=None)


class ExchangeApiKeysDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_keys: list[ExchangeApiKeyDto] = Field(alias="apiKeys", default_factory=list)


class AddedExchangeApiKeyDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message: str | None = None
    api_key: ExchangeApiKeyDto = Field(alias="apiKey")


class CreateExchangeApiKeyDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    exchange: str
    api_key: str = Field(alias="apiKey")
    api_secret: str = Field(alias="apiSecret")
    label: str | None = None
