"""HTTP token exchange client tests."""

import json

import httpx
import pytest

from ydbauth.credentials import IamCredentials
from ydbauth.security.tokens import HttpTokenExchanger, tokens_url


def test_tokens_url_from_address():
    assert tokens_url("iam.api.cloud.yandex.net:443") == (
        "https://iam.api.cloud.yandex.net/iam/v1/tokens"
    )
    assert tokens_url("localhost:8443") == "https://localhost:8443/iam/v1/tokens"
    assert tokens_url("http://localhost:8080/tokens") == "http://localhost:8080/tokens"


@pytest.mark.asyncio
async def test_http_exchanger_posts_jwt():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200, json={"iamToken": "t1", "expiresAt": "2030-01-01T00:00:00Z"}
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        exchanger = HttpTokenExchanger("iam.example:443", client=client)
        response = await exchanger.create("signed")

    assert seen["url"] == "https://iam.example/iam/v1/tokens"
    assert seen["body"] == {"jwt": "signed"}
    assert response.iam_token == "t1"
    assert response.expires_at.year == 2030


@pytest.mark.asyncio
async def test_http_exchanger_missing_token_is_empty():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    async with httpx.AsyncClient(transport=transport) as client:
        response = await HttpTokenExchanger(client=client).create("signed")
    assert response.iam_token == ""


@pytest.mark.asyncio
async def test_http_exchanger_raises_on_error_status():
    transport = httpx.MockTransport(lambda request: httpx.Response(401, json={}))
    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await HttpTokenExchanger(client=client).create("signed")


def test_credentials_from_key_file(key_file, private_pem):
    credentials = IamCredentials.from_json_file(key_file, iam_endpoint="iam.example:443")
    assert credentials.service_account_id == "sa-123"
    assert credentials.access_key_id == "key-456"
    assert credentials.private_key == private_pem
    assert credentials.iam_endpoint == "iam.example:443"
    assert "PRIVATE KEY" not in repr(credentials)


@pytest.mark.asyncio
async def test_http_exchanger_disables_client_timeouts(monkeypatch):
    seen = {}

    def handler(request):
        seen["request_timeout"] = request.extensions["timeout"]
        return httpx.Response(200, json={"iamToken": "t1"})

    class RecordingClient(httpx.AsyncClient):
        def __init__(self, **kwargs):
            seen["client_timeout"] = kwargs.get("timeout", "unset")
            super().__init__(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", RecordingClient)

    response = await HttpTokenExchanger("iam.example:443").create("signed")
    assert response.iam_token == "t1"
    assert seen["client_timeout"] is None
    assert set(seen["request_timeout"].values()) == {None}


@pytest.mark.asyncio
async def test_http_exchanger_injected_client_has_no_timeout():
    seen = {}

    def handler(request):
        seen["request_timeout"] = request.extensions["timeout"]
        return httpx.Response(200, json={"iamToken": "t1"})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport, timeout=5.0) as client:
        await HttpTokenExchanger(client=client).create("signed")
    assert set(seen["request_timeout"].values()) == {None}
