from __future__ import annotations

from pydantic import AnyUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

from crypto_portfolio_tracker.commons.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_POLLING_INTERVAL_SECONDS,
    DEFAULT_SESSION_STORAGE_PATH,
    EURO_CURRENCY_SYMBOL,
)


class ConfigurationProperties(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", validate_default=False, extra="allow")
    # Application configuration
    background_tasks_enabled: bool = True
    # CORS enabled
    cors_enabled: bool = False
    # Portfolio tracker backend
    api_base_url: AnyUrl = DEFAULT_API_BASE_URL
    http_timeout_seconds: int = DEFAULT_HTTP_TIMEOUT_SECONDS
    # Persisted session between runs
    session_storage_path: str = DEFAULT_SESSION_STORAGE_PATH
    # Display currency symbols
    default_currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    euro_currency_symbol: str = EURO_CURRENCY_SYMBOL
    # Polling configuration
    polling_interval_seconds: int = DEFAULT_POLLING_INTERVAL_SECONDS
