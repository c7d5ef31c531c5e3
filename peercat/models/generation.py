from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from peercat.models.common import ApiModel


class GenerationMode(str, Enum):
    PRODUCTION = "production"
    DEMO = "demo"


class Model(ApiModel):
    """Модель генерации изображений"""
    id: str
    name: str
    description: str
    provider: str
    max_prompt_length: int
    output_format: str
    output_resolution: str
    price_usd: float


class ModelsResponse(ApiModel):
    models: List[Model] = Field(default_factory=list)


class ModelPrice(ApiModel):
    model: str
    price_usd: float
    price_sol: float
    price_sol_with_slippage: float


class PriceResponse(ApiModel):
    sol_price: float
    slippage_tolerance: float
    updated_at: str
    treasury: str
    models: List[ModelPrice] = Field(default_factory=list)


class GenerateParams(ApiModel):
    """Параметры генерации (Входные данные)"""
    prompt: str
    model: Optional[str] = None
    mode: Optional[GenerationMode] = None
    options: Optional[Dict[str, Any]] = None


class GenerateUsage(ApiModel):
    credits_used: float
    balance_remaining: float


class GenerateResult(ApiModel):
    """Результат генерации (Выходные данные)"""
    id: str
    image_url: str
    ipfs_hash: Optional[str] = None
    model: str
    mode: GenerationMode
    usage: GenerateUsage
