from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.peerc.at"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 3


class ClientConfig(BaseModel):
    """
    Неизменяемая конфигурация клиента.
    Валидируется при создании: пустой ключ отклоняется до любого сетевого вызова.
    Окружение не читается: для PEERCAT_* есть get_settings().
    """
    model_config = ConfigDict(frozen=True)

    # --- Auth ---
    api_key: str = Field(..., min_length=1)

    # --- HTTP ---
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Таймаут одной попытки, секунды")

    # --- Retry Policy ---
    # max_retries=0 -> ровно одна попытка
    max_retries: int = Field(DEFAULT_MAX_RETRIES, ge=0)
    backoff_base: float = Field(1.0, gt=0, description="Задержка перед первым retry, секунды")
    backoff_cap: float = Field(10.0, gt=0, description="Потолок экспоненциальной задержки, секунды")

    @field_validator("api_key")
    @classmethod
    def _reject_blank_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("API key must not be empty")
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class EnvSettings(BaseSettings):
    """
    Сырые значения из окружения (PEERCAT_API_KEY и т.д.) и .env.
    Не заданные поля остаются None, дефолты и валидация - в ClientConfig.
    """
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: Optional[float] = None
    max_retries: Optional[int] = None
    backoff_base: Optional[float] = None
    backoff_cap: Optional[float] = None

    model_config = SettingsConfigDict(
        env_prefix="PEERCAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> ClientConfig:
    """Конфигурация из окружения. Единственное место, где читаются PEERCAT_*."""
    return ClientConfig(**EnvSettings().model_dump(exclude_none=True))
