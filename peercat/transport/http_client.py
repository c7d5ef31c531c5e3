import logging
from typing import Dict, Optional

import httpx

from peercat.core.exceptions import TransportNetworkError, TransportTimeout
from peercat.transport.base import TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    Транспорт на базе httpx.AsyncClient.
    Переиспользование соединений целиком на стороне httpx.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        # Чужой клиент не закрываем: его жизненным циклом управляет владелец
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(follow_redirects=False)

    async def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        content: Optional[bytes],
        timeout: float,
    ) -> TransportResponse:
        try:
            response = await self._client.request(
                method,
                url,
                headers=headers,
                content=content,
                timeout=httpx.Timeout(timeout),
            )
        except httpx.TimeoutException as e:
            raise TransportTimeout(f"{e.__class__.__name__}: {e}") from e
        except httpx.RequestError as e:
            logger.debug(f"Transport error on {method} {url}: {e.__class__.__name__}")
            raise TransportNetworkError(f"{e.__class__.__name__}: {e}") from e

        return TransportResponse(
            status=response.status_code,
            headers=response.headers,
            body=response.content,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
