import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from hypothesis import strategies as st

from peercat.transport.base import TransportResponse

ENV_VARS = (
    "PEERCAT_API_KEY",
    "PEERCAT_BASE_URL",
    "PEERCAT_TIMEOUT",
    "PEERCAT_MAX_RETRIES",
    "PEERCAT_BACKOFF_BASE",
    "PEERCAT_BACKOFF_CAP",
)


@dataclass
class SentRequest:
    method: str
    url: str
    headers: Dict[str, str]
    content: Optional[bytes]
    timeout: float

    def json(self) -> Any:
        return json.loads(self.content) if self.content else None


Outcome = Union[TransportResponse, BaseException]


class FakeTransport:
    """Проигрывает заранее заданные исходы; последний повторяется бесконечно."""

    def __init__(self, outcomes: Sequence[Outcome]):
        self.outcomes = list(outcomes)
        self.calls: List[SentRequest] = []

    async def send(self, method, url, headers, content, timeout):
        self.calls.append(SentRequest(method, url, headers, content, timeout))
        outcome = self.outcomes[min(len(self.calls), len(self.outcomes)) - 1]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class RecordingSleep:
    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def json_response(status: int, payload: Any, headers: Optional[Dict[str, str]] = None) -> TransportResponse:
    return TransportResponse(status=status, headers=headers or {}, body=json.dumps(payload).encode())


def error_response(
    status: int,
    error_type: str = "api_error",
    code: str = "some_code",
    message: str = "Something went wrong",
    param: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> TransportResponse:
    payload = {"error": {"type": error_type, "code": code, "message": message, "param": param}}
    return json_response(status, payload, headers)


def raw_response(status: int, body: bytes, headers: Optional[Dict[str, str]] = None) -> TransportResponse:
    return TransportResponse(status=status, headers=headers or {}, body=body)




# error_type -> statuses the API sends it with
REACHABLE = {
    "authentication_error": [401, 403],
    "invalid_request_error": [400, 413, 422],
    "insufficient_credits": [402],
    "rate_limit_error": [429],
    "not_found": [404],
    "api_error": [400, 405, 409, 500, 502, 503, 504],
    "": [418, 500],
}

REACHABLE_PAIRS = [(status, error_type) for error_type, statuses in REACHABLE.items() for status in statuses]


TERMINAL_ERROR_TYPES = ("authentication_error", "invalid_request_error", "insufficient_credits", "not_found")
ERROR_TYPES = TERMINAL_ERROR_TYPES + ("rate_limit_error",)


def rules_disagree(status: int, error_type: str) -> bool:
    """
    Пары, где класс статуса и тип ошибки тянут в разные стороны.
    Executor повторяет по статусу, ApiError.is_retryable смотрит на вид ошибки.
    """
    if 300 <= status < 400 or status == 429:
        return error_type != "rate_limit_error"
    if 400 <= status < 500:
        return error_type == "rate_limit_error"
    if status >= 500:
        return error_type in TERMINAL_ERROR_TYPES
    return False


# 2xx, 3xx, 4xx без 429, 429, 5xx
STATUSES = st.one_of(
    st.integers(200, 299),
    st.integers(300, 399),
    st.integers(400, 499).filter(lambda status: status != 429),
    st.just(429),
    st.integers(500, 599),
)

# Все типы из таблицы классификатора + произвольные нераспознанные
ERROR_TYPE_VALUES = st.one_of(st.sampled_from(ERROR_TYPES + ("api_error", "")), st.text(max_size=20))
