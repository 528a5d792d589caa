#  AutoLogin - Python library for generating auto-login URLs for third-party control panels
#  Copyright (C) 2024  Cypheriel
import httpx
import pytest

from autologin.exceptions import OperationFailed
from autologin.spamexperts import ResponseMissingAuthTicket, SpamExpertsConfiguration, SpamExpertsProvider

VALID_TICKET = "0123456789abcdef0123456789abcdef01234567"

CONFIGURATION = SpamExpertsConfiguration(
    hostname="spam.example.net",
    username="admin",
    password="hunter2",
)


def _provider(handler) -> SpamExpertsProvider:
    client = httpx.AsyncClient(base_url=CONFIGURATION.base_url, transport=httpx.MockTransport(handler))
    return SpamExpertsProvider(CONFIGURATION, client=client)


@pytest.mark.asyncio()
async def test_login():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, text=VALID_TICKET)

    async with _provider(handler) as provider:
        result = await provider.login("example.com")

    assert result.ticket == VALID_TICKET
    assert result.username == "example.com"
    assert result.url == f"https://spam.example.net/?authticket={VALID_TICKET}"

    assert len(requests) == 1
    assert requests[0].method == "GET"
    assert requests[0].url.path == "/api/authticket/create/username/example.com/"


@pytest.mark.asyncio()
async def test_username_is_quoted():
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.raw_path.decode())
        return httpx.Response(200, text=VALID_TICKET)

    async with _provider(handler) as provider:
        await provider.get_ticket("user@example.com")

    assert paths == ["/api/authticket/create/username/user%40example.com/"]


@pytest.mark.asyncio()
async def test_service_error_message():
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="ERROR: Domain not registered in system")

    async with _provider(handler) as provider:
        with pytest.raises(ResponseMissingAuthTicket, match="Domain name doesn't exist") as exc_info:
            await provider.login("missing.example.com")

    assert exc_info.value.debug["ticket"] is None


@pytest.mark.asyncio()
async def test_unauthorized():
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="Unauthorized")

    async with _provider(handler) as provider:
        with pytest.raises(ResponseMissingAuthTicket) as exc_info:
            await provider.get_ticket("example.com")

    assert exc_info.value.debug["http_code"] == 401
    assert exc_info.value.debug["ticket"] is None


@pytest.mark.asyncio()
async def test_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        msg = "Connection refused"
        raise httpx.ConnectError(msg, request=request)

    async with _provider(handler) as provider:
        with pytest.raises(OperationFailed, match="Failed to request auth ticket") as exc_info:
            await provider.get_ticket("example.com")

    assert not isinstance(exc_info.value, ResponseMissingAuthTicket)
    assert exc_info.value.debug["username"] == "example.com"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio()
async def test_injected_client_is_not_closed():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda _: httpx.Response(200)))

    async with SpamExpertsProvider(CONFIGURATION, client=client):
        pass

    assert client.is_closed is False
    await client.aclose()


@pytest.mark.asyncio()
async def test_default_client():
    provider = SpamExpertsProvider(CONFIGURATION)

    assert provider._client.base_url.host == "spam.example.net"
    assert isinstance(provider._client.auth, httpx.BasicAuth)

    await provider.aclose()
    assert provider._client.is_closed is True


def test_password_not_in_repr():
    assert "hunter2" not in repr(CONFIGURATION)
