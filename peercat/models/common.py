from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Базовая модель DTO: camelCase на проводе, лишние поля игнорируются."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class RateLimitInfo(BaseModel):
    """Метаданные квоты из заголовков ответа"""
    model_config = ConfigDict(frozen=True)

    limit: Optional[int] = Field(None, ge=0, description="X-RateLimit-Limit")
    remaining: Optional[int] = Field(None, ge=0, description="X-RateLimit-Remaining")
    reset: Optional[int] = Field(None, ge=0, description="X-RateLimit-Reset (epoch seconds)")
    retry_after: Optional[int] = Field(None, ge=0, description="Retry-After (seconds)")


class ApiErrorDetail(BaseModel):
    type: str
    code: str
    message: str
    param: Optional[str] = None


class ApiErrorResponse(BaseModel):
    """Конверт ошибки: {"error": {type, code, message, param}}"""
    error: ApiErrorDetail


class SuccessResponse(BaseModel):
    success: bool
