from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from peercat.models.common import ApiModel


class OnChainStatus(str, Enum):
    """Жизненный цикл on-chain генерации"""
    PENDING = "pending"         # Транзакция еще не подтверждена
    PROCESSING = "processing"   # Оплата получена, генерация идет
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class SubmitPromptParams(ApiModel):
    prompt: str
    model: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    callback_url: Optional[str] = None


class RequiredAmount(ApiModel):
    sol: float
    lamports: int
    usd: float


class PromptSubmission(ApiModel):
    submission_id: str
    prompt_hash: str
    payment_address: str
    required_amount: RequiredAmount
    memo: str
    model: str
    slippage_tolerance: float
    expires_at: str
    instructions: Dict[str, str] = Field(default_factory=dict)


class OnChainGenerationStatus(ApiModel):
    tx_signature: str
    status: OnChainStatus
    model: Optional[str] = None
    created_at: Optional[str] = None
    image_url: Optional[str] = None
    ipfs_hash: Optional[str] = None
    completed_at: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None
