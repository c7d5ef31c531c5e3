import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Type, TypeVar

import pydantic_core
from pydantic import BaseModel, TypeAdapter, ValidationError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    stop_after_attempt,
    retry_if_exception_type,
    before_sleep_log
)

from peercat.config.headers import build_headers
from peercat.config.settings import ClientConfig
from peercat.core.classifier import classify, is_retryable_status, is_success_status
from peercat.core.exceptions import (
    ApiError,
    ApiTimeoutError,
    JsonError,
    NetworkError,
    TransportNetworkError,
    TransportTimeout,
    UnknownApiError,
)
from peercat.core.rate_limit import parse_rate_limit_headers
from peercat.models.common import ApiErrorResponse, RateLimitInfo
from peercat.transport.base import Transport, TransportResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

PARSE_ERROR_MESSAGE = "Failed to parse error response"


class _TransientFailure(Exception):
    """
    Внутренняя обертка: попытка провалилась, но бюджет ретраев еще можно тратить.
    Наружу никогда не выходит, вызывающий получает .error.
    """

    def __init__(self, error: ApiError, retry_after: Optional[int] = None):
        super().__init__(str(error))
        self.error = error
        self.retry_after = retry_after


def _encode_body(body: Any) -> Optional[bytes]:
    if body is None:
        return None
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        return pydantic_core.to_json(body)
    except pydantic_core.PydanticSerializationError as e:
        raise JsonError(f"Failed to serialize request body: {e}") from e


class RequestExecutor:
    """
    Выполняет логический вызов API с политикой Resilience:
    попытки, классификация ошибок, экспоненциальный backoff и Retry-After.

    Состояние между вызовами не разделяется: каждый execute() держит
    свой счетчик попыток и последнюю ошибку.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Transport,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.config = config
        self.transport = transport
        self._sleep = sleep
        self._headers = build_headers(config.api_key)

    def backoff_delay(self, attempt: int) -> float:
        """Задержка после попытки attempt (0-based), секунды: 1, 2, 4, 8, 10, 10..."""
        return min(self.config.backoff_base * (2 ** attempt), self.config.backoff_cap)

    def _wait(self, retry_state: RetryCallState) -> float:
        delay = self.backoff_delay(retry_state.attempt_number - 1)

        # Retry-After от сервера важнее вычисленной задержки
        failure = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(failure, _TransientFailure) and failure.retry_after is not None:
            delay = float(failure.retry_after)
        return delay

    async def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        response_model: Type[T] = Any,
    ) -> T:
        """
        Выполняет запрос и возвращает тело ответа, провалидированное как response_model.
        При неудаче поднимает ровно один ApiError.
        """
        url = f"{self.config.base_url}{path}"
        content = _encode_body(body)
        adapter = TypeAdapter(response_model)

        retrier = AsyncRetrying(
            retry=retry_if_exception_type(_TransientFailure),
            stop=stop_after_attempt(self.config.max_retries + 1),
            wait=self._wait,
            sleep=self._sleep,
            before_sleep=before_sleep_log(logger, logging.DEBUG),
            reraise=True
        )

        try:
            async for attempt in retrier:
                with attempt:
                    return await self._attempt(method, url, content, adapter)
        except _TransientFailure as failure:
            # Бюджет исчерпан: отдаем последнюю ошибку
            raise failure.error from failure.__cause__

        raise ApiTimeoutError("no attempt produced a result")

    async def _attempt(
        self,
        method: str,
        url: str,
        content: Optional[bytes],
        adapter: TypeAdapter,
    ) -> Any:
        try:
            response = await self.transport.send(
                method,
                url,
                dict(self._headers),
                content,
                self.config.timeout,
            )
        except TransportTimeout as e:
            raise _TransientFailure(ApiTimeoutError(str(e))) from e
        except TransportNetworkError as e:
            raise _TransientFailure(NetworkError(str(e), cause=e)) from e

        logger.debug(f"{method} {url} -> {response.status}")
        rate_limit_info = parse_rate_limit_headers(response.headers)

        if is_success_status(response.status):
            return self._decode_success(response, adapter)

        error = self._decode_error(response, rate_limit_info)

        # 4xx (кроме 429) -> Fail Fast, ретрай не изменит ответ
        if not is_retryable_status(response.status):
            raise error

        retry_after = error.retry_after
        if retry_after is None and rate_limit_info is not None:
            retry_after = rate_limit_info.retry_after
        raise _TransientFailure(error, retry_after)

    @staticmethod
    def _decode_success(response: TransportResponse, adapter: TypeAdapter) -> Any:
        try:
            return adapter.validate_json(response.body)
        except ValidationError as e:
            # Битое тело успешного ответа не исправится повтором
            loc = e.errors()[0]["loc"] if e.error_count() else ()
            raise JsonError(
                f"Failed to decode response body: {e}",
                status=response.status,
                param=".".join(str(part) for part in loc) or None,
            ) from e

    @staticmethod
    def _decode_error(
        response: TransportResponse,
        rate_limit_info: Optional[RateLimitInfo],
    ) -> ApiError:
        try:
            envelope = ApiErrorResponse.model_validate_json(response.body)
        except ValidationError:
            return UnknownApiError(
                PARSE_ERROR_MESSAGE,
                "parse_error",
                status=response.status,
                error_type="unknown",
            )

        detail = envelope.error
        return classify(
            response.status,
            detail.type,
            detail.code,
            detail.message,
            detail.param,
            rate_limit_info,
        )
