from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Сырой ответ: статус, заголовки, тело. Транспорт не интерпретирует статус."""
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


class Transport(Protocol):
    """
    Узкий интерфейс сетевого уровня: одна попытка = один вызов send().
    Ошибки без ответа сервера: TransportTimeout / TransportNetworkError.
    """

    async def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        content: Optional[bytes],
        timeout: float,
    ) -> TransportResponse:
        ...
