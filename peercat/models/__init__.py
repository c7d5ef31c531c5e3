from peercat.models.common import RateLimitInfo, ApiErrorDetail, ApiErrorResponse, SuccessResponse
from peercat.models.generation import (
    GenerationMode,
    Model,
    ModelsResponse,
    ModelPrice,
    PriceResponse,
    GenerateParams,
    GenerateUsage,
    GenerateResult,
)
from peercat.models.account import Balance, HistoryParams, HistoryStatus, HistoryItem, Pagination, HistoryResponse
from peercat.models.keys import KeyEnvironment, CreateKeyParams, ApiKey, CreateKeyResult, KeysResponse
from peercat.models.onchain import (
    OnChainStatus,
    SubmitPromptParams,
    RequiredAmount,
    PromptSubmission,
    OnChainGenerationStatus,
)

__all__ = [
    "RateLimitInfo",
    "ApiErrorDetail",
    "ApiErrorResponse",
    "SuccessResponse",
    "GenerationMode",
    "Model",
    "ModelsResponse",
    "ModelPrice",
    "PriceResponse",
    "GenerateParams",
    "GenerateUsage",
    "GenerateResult",
    "Balance",
    "HistoryParams",
    "HistoryStatus",
    "HistoryItem",
    "Pagination",
    "HistoryResponse",
    "KeyEnvironment",
    "CreateKeyParams",
    "ApiKey",
    "CreateKeyResult",
    "KeysResponse",
    "OnChainStatus",
    "SubmitPromptParams",
    "RequiredAmount",
    "PromptSubmission",
    "OnChainGenerationStatus",
]
