from enum import Enum
from typing import List, Optional

from pydantic import Field

from peercat.models.common import ApiModel


class KeyEnvironment(str, Enum):
    LIVE = "live"
    TEST = "test"


class CreateKeyParams(ApiModel):
    """Создание ключа. message/signature подписываются кошельком на стороне вызывающего."""
    name: Optional[str] = None
    message: str
    signature: str
    public_key: str


class ApiKey(ApiModel):
    id: str
    name: Optional[str] = None
    key_prefix: str
    environment: KeyEnvironment
    rate_limit_tier: str
    created_at: str
    last_used_at: Optional[str] = None
    revoked: bool


class CreateKeyResult(ApiModel):
    id: str
    key: str
    key_prefix: str
    name: Optional[str] = None
    environment: KeyEnvironment
    created_at: str
    warning: str


class KeysResponse(ApiModel):
    keys: List[ApiKey] = Field(default_factory=list)


class UpdateKeyParams(ApiModel):
    name: str
