from enum import Enum
from typing import Optional

from peercat.models.common import RateLimitInfo


class ErrorKind(str, Enum):
    """Закрытый набор видов ошибок API."""
    AUTHENTICATION = "authentication"
    INVALID_REQUEST = "invalid_request"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    RATE_LIMIT = "rate_limit"
    NOT_FOUND = "not_found"
    SERVER = "server"
    NETWORK = "network"
    JSON = "json"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


RETRYABLE_KINDS = frozenset({
    ErrorKind.NETWORK,
    ErrorKind.TIMEOUT,
    ErrorKind.SERVER,
    ErrorKind.RATE_LIMIT,
})


class PeerCatError(Exception):
    """Базовый класс ошибок SDK."""
    pass


class ApiError(PeerCatError):
    """
    Ошибка логического вызова API.
    Единственное, что Executor отдает наружу при неудаче.
    """
    kind: ErrorKind = ErrorKind.UNKNOWN
    prefix: str = "API error"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        *,
        param: Optional[str] = None,
        status: Optional[int] = None,
        error_type: Optional[str] = None,
        rate_limit_info: Optional[RateLimitInfo] = None,
    ):
        self.message = message
        self.code = code
        self.param = param
        self.status = status
        self.error_type = error_type
        self.rate_limit_info = rate_limit_info
        super().__init__(f"{self.prefix}: {message}")

    @property
    def is_retryable(self) -> bool:
        return self.kind in RETRYABLE_KINDS

    @property
    def retry_after(self) -> Optional[int]:
        if self.rate_limit_info is None:
            return None
        return self.rate_limit_info.retry_after

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(kind={self.kind.value!r}, code={self.code!r}, "
            f"status={self.status!r}, message={self.message!r})"
        )


class AuthenticationError(ApiError):
    """Невалидный или отсутствующий API-ключ."""
    kind = ErrorKind.AUTHENTICATION
    prefix = "Authentication error"


class InvalidRequestError(ApiError):
    """Неверные параметры запроса."""
    kind = ErrorKind.INVALID_REQUEST
    prefix = "Invalid request"


class InsufficientCreditsError(ApiError):
    kind = ErrorKind.INSUFFICIENT_CREDITS
    prefix = "Insufficient credits"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, code)


class RateLimitError(ApiError):
    """429. Retry выполняется с учетом Retry-After."""
    kind = ErrorKind.RATE_LIMIT
    prefix = "Rate limit exceeded"

    def __init__(self, message: str, code: Optional[str] = None,
                 rate_limit_info: Optional[RateLimitInfo] = None):
        super().__init__(message, code, rate_limit_info=rate_limit_info)


class NotFoundError(ApiError):
    kind = ErrorKind.NOT_FOUND
    prefix = "Not found"


class ServerError(ApiError):
    """5xx без распознанного типа ошибки."""
    kind = ErrorKind.SERVER
    prefix = "Server error"

    def __init__(self, message: str, code: Optional[str] = None, *, status: int):
        super().__init__(message, code, status=status)


class NetworkError(ApiError):
    """Транспорт не смог получить ответ (DNS, соединение, TLS)."""
    kind = ErrorKind.NETWORK
    prefix = "Network error"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class JsonError(ApiError):
    """Локальная ошибка (де)сериализации: тело ответа не соответствует схеме."""
    kind = ErrorKind.JSON
    prefix = "JSON error"

    def __init__(self, message: str, status: Optional[int] = None, param: Optional[str] = None):
        super().__init__(message, param=param, status=status)


class ApiTimeoutError(ApiError):
    kind = ErrorKind.TIMEOUT
    prefix = "Request timed out"

    def __init__(self, message: str = "request timed out"):
        super().__init__(message)


class UnknownApiError(ApiError):
    """
    Нераспознанный или непарсируемый ответ об ошибке.
    code="parse_error" означает, что тело ошибки не удалось разобрать.
    """
    kind = ErrorKind.UNKNOWN
    prefix = "API error"

    def __init__(self, message: str, code: Optional[str] = None, *, status: int,
                 error_type: str = "unknown", param: Optional[str] = None):
        self.prefix = f"API error ({status})"
        super().__init__(message, code, param=param, status=status, error_type=error_type)


# --- Транспортный уровень ---

class TransportFailure(PeerCatError):
    """Запрос не дошел до ответа сервера."""
    pass


class TransportTimeout(TransportFailure):
    pass


class TransportNetworkError(TransportFailure):
    pass
