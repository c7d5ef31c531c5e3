from typing import Optional

from peercat.core.exceptions import (
    ApiError,
    AuthenticationError,
    InvalidRequestError,
    InsufficientCreditsError,
    RateLimitError,
    NotFoundError,
    ServerError,
    UnknownApiError,
)
from peercat.models.common import RateLimitInfo

TOO_MANY_REQUESTS = 429


def classify(
    status: int,
    error_type: str,
    code: str,
    message: str,
    param: Optional[str] = None,
    rate_limit_info: Optional[RateLimitInfo] = None,
) -> ApiError:
    """
    Классификатор ошибок API.
    Чистая функция: статус + разобранный конверт ошибки -> вариант таксономии.
    Тип ошибки из тела важнее статуса; статус решает только для нераспознанных типов.
    """
    if error_type == "authentication_error":
        return AuthenticationError(message, code, param=param)

    if error_type == "invalid_request_error":
        return InvalidRequestError(message, code, param=param)

    if error_type == "insufficient_credits":
        return InsufficientCreditsError(message, code)

    if error_type == "rate_limit_error":
        return RateLimitError(message, code, rate_limit_info=rate_limit_info)

    if error_type == "not_found":
        return NotFoundError(message, code, param=param)

    if status >= 500:
        return ServerError(message, code, status=status)

    return UnknownApiError(message, code, status=status, error_type=error_type, param=param)


def is_success_status(status: int) -> bool:
    return 200 <= status < 300


def is_retryable_status(status: int) -> bool:
    """
    Решение Executor'а по классу статуса.
    4xx (кроме 429) -> Fail Fast. 5xx, 429 и прочие неуспешные (включая 3xx) -> Retry.

    Совпадает с ApiError.is_retryable не везде: 3xx классифицируется как
    UnknownApiError (не retryable), но повторяется; так же расходятся пары
    вида 429 + authentication_error или 400 + rate_limit_error. Решает статус.
    """
    if is_success_status(status):
        return False
    if 400 <= status < 500 and status != TOO_MANY_REQUESTS:
        return False
    return True
