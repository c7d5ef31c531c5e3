from enum import Enum
from typing import List, Optional

from pydantic import Field

from peercat.models.common import ApiModel


class Balance(ApiModel):
    credits: float
    total_deposited: float
    total_spent: float
    total_withdrawn: float
    total_generated: int


class HistoryParams(ApiModel):
    """Пагинация истории. Попадает в query string, а не в тело."""
    limit: Optional[int] = Field(None, ge=0)
    offset: Optional[int] = Field(None, ge=0)


class HistoryStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    REFUNDED = "refunded"


class HistoryItem(ApiModel):
    id: str
    endpoint: str
    model: Optional[str] = None
    credits_used: float
    request_id: Optional[str] = None
    status: HistoryStatus
    created_at: str
    completed_at: Optional[str] = None


class Pagination(ApiModel):
    total: int
    limit: int
    offset: int
    has_more: bool


class HistoryResponse(ApiModel):
    items: List[HistoryItem] = Field(default_factory=list)
    pagination: Pagination
