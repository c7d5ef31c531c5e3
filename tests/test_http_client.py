import httpx
import pytest

from peercat.core.exceptions import TransportNetworkError, TransportTimeout
from peercat.transport.http_client import HttpxTransport


def make_transport(handler) -> HttpxTransport:
    return HttpxTransport(httpx.AsyncClient(transport=httpx.MockTransport(handler)))


@pytest.mark.asyncio
async def test_passes_request_through():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = request.content
        return httpx.Response(201, headers={"X-RateLimit-Remaining": "9"}, content=b'{"ok": true}')

    transport = make_transport(handler)
    response = await transport.send(
        "POST",
        "https://api.peerc.at/v1/prompts",
        {"Authorization": "Bearer k", "Content-Type": "application/json"},
        b'{"prompt": "x"}',
        5.0,
    )

    assert seen == {
        "method": "POST",
        "url": "https://api.peerc.at/v1/prompts",
        "auth": "Bearer k",
        "body": b'{"prompt": "x"}',
    }
    assert response.status == 201
    assert response.headers["x-ratelimit-remaining"] == "9"
    assert response.body == b'{"ok": true}'


@pytest.mark.asyncio
async def test_error_status_is_not_raised():
    transport = make_transport(lambda request: httpx.Response(503, content=b"busy"))
    response = await transport.send("GET", "https://api.peerc.at/v1/balance", {}, None, 5.0)
    assert response.status == 503
    assert response.body == b"busy"


@pytest.mark.asyncio
async def test_timeout_is_mapped():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(TransportTimeout) as exc_info:
        await make_transport(handler).send("GET", "https://api.peerc.at/v1/balance", {}, None, 1.0)
    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)


@pytest.mark.asyncio
@pytest.mark.parametrize("error_cls", [httpx.ConnectError, httpx.RemoteProtocolError])
async def test_network_errors_are_mapped(error_cls):
    def handler(request):
        raise error_cls("boom", request=request)

    with pytest.raises(TransportNetworkError) as exc_info:
        await make_transport(handler).send("GET", "https://api.peerc.at/v1/balance", {}, None, 1.0)
    assert isinstance(exc_info.value.__cause__, error_cls)


@pytest.mark.asyncio
async def test_borrowed_client_is_not_closed():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    async with HttpxTransport(client):
        pass
    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_owned_client_is_closed():
    transport = HttpxTransport()
    await transport.aclose()
    assert transport._client.is_closed
