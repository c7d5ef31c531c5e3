from typing import Any, Awaitable, Callable, List, Optional
from urllib.parse import quote, urlencode

from peercat.config.settings import ClientConfig, get_settings
from peercat.execution.executor import RequestExecutor
from peercat.models import (
    Balance,
    CreateKeyParams,
    CreateKeyResult,
    GenerateParams,
    GenerateResult,
    HistoryParams,
    HistoryResponse,
    KeysResponse,
    Model,
    ModelsResponse,
    OnChainGenerationStatus,
    PriceResponse,
    PromptSubmission,
    SubmitPromptParams,
    SuccessResponse,
)
from peercat.models.keys import UpdateKeyParams
from peercat.transport.base import Transport
from peercat.transport.http_client import HttpxTransport


class PeerCat:
    """
    Клиент PeerCat API.

        async with PeerCat("pcat_live_xxx") as client:
            result = await client.generate(GenerateParams(prompt="A sunset"))

    Методы только собирают путь и тело; ретраи и ошибки живут в RequestExecutor.
    Конфиг берется из аргументов (api_key + поля ClientConfig) или целиком из config=.
    Окружение читает только from_env().
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
        **overrides: Any,
    ):
        if config is not None:
            if api_key is not None or overrides:
                raise TypeError("pass either config or api_key/config fields, not both")
        else:
            if api_key is not None:
                overrides["api_key"] = api_key
            # Невалидный конфиг падает здесь, до любого сетевого вызова
            config = ClientConfig(**overrides)
        self.config = config

        self._owns_transport = transport is None
        self.transport = transport or HttpxTransport()

        executor_kwargs = {"sleep": sleep} if sleep is not None else {}
        self.executor = RequestExecutor(config, self.transport, **executor_kwargs)

    @classmethod
    def from_env(
        cls,
        *,
        transport: Optional[Transport] = None,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
    ) -> "PeerCat":
        """Конфигурация из PEERCAT_* переменных окружения / .env."""
        return cls(config=get_settings(), transport=transport, sleep=sleep)

    async def aclose(self) -> None:
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> "PeerCat":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # --- Image Generation ---

    async def generate(self, params: GenerateParams) -> GenerateResult:
        return await self.executor.execute("POST", "/v1/generate", params, GenerateResult)

    # --- Models & Pricing ---

    async def get_models(self) -> List[Model]:
        response = await self.executor.execute("GET", "/v1/models", response_model=ModelsResponse)
        return response.models

    async def get_prices(self) -> PriceResponse:
        return await self.executor.execute("GET", "/v1/price", response_model=PriceResponse)

    # --- Account ---

    async def get_balance(self) -> Balance:
        return await self.executor.execute("GET", "/v1/balance", response_model=Balance)

    async def get_history(self, params: Optional[HistoryParams] = None) -> HistoryResponse:
        path = "/v1/history"
        if params is not None:
            query = params.model_dump(exclude_none=True)
            if query:
                path = f"{path}?{urlencode(query)}"
        return await self.executor.execute("GET", path, response_model=HistoryResponse)

    # --- API Keys ---

    async def create_key(self, params: CreateKeyParams) -> CreateKeyResult:
        """Создает ключ. Подпись кошелька (message/signature) готовит вызывающий."""
        return await self.executor.execute("POST", "/v1/keys", params, CreateKeyResult)

    async def list_keys(self) -> KeysResponse:
        return await self.executor.execute("GET", "/v1/keys", response_model=KeysResponse)

    async def revoke_key(self, key_id: str) -> None:
        await self.executor.execute("DELETE", f"/v1/keys/{quote(key_id, safe='')}", response_model=SuccessResponse)

    async def update_key_name(self, key_id: str, name: str) -> None:
        await self.executor.execute(
            "PATCH",
            f"/v1/keys/{quote(key_id, safe='')}",
            UpdateKeyParams(name=name),
            SuccessResponse,
        )

    # --- On-Chain Payments ---

    async def submit_prompt(self, params: SubmitPromptParams) -> PromptSubmission:
        return await self.executor.execute("POST", "/v1/prompts", params, PromptSubmission)

    async def get_onchain_status(self, tx_signature: str) -> OnChainGenerationStatus:
        return await self.executor.execute(
            "GET",
            f"/v1/generate/{quote(tx_signature, safe='')}",
            response_model=OnChainGenerationStatus,
        )
