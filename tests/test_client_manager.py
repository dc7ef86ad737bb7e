"""
Tests for ClientManager against a mocked Management API
"""
from datetime import datetime, timezone

import httpx
import pytest

from management import (
    Client,
    ClientJWTConfiguration,
    Credential,
    MalformedFieldError,
    Management,
    ManagementError,
    include_totals,
    page,
)

BASE = "https://tenant.example.com/api/v2"


@pytest.mark.asyncio
async def test_create_merges_echo_into_client(management: Management, transport):
    transport.reply(
        201,
        {
            "name": "app",
            "client_id": "abc",
            "client_secret": "s3cr3t",
            "jwt_configuration": {"lifetime_in_seconds": "36000", "alg": "RS256"},
        },
    )
    client = Client(name="app", app_type="spa")

    async with management:
        result = await management.clients.create(client)

    assert result is client
    assert client.client_id == "abc"
    assert client.client_secret == "s3cr3t"
    assert client.app_type == "spa"
    assert client.jwt_configuration.lifetime_in_seconds == 36000

    request = transport.last
    assert request.method == "POST"
    assert str(request.url) == f"{BASE}/clients"
    assert request.headers["Authorization"] == "Bearer test-token"
    assert transport.last_json() == {"name": "app", "app_type": "spa"}


@pytest.mark.asyncio
async def test_read(management: Management, transport):
    transport.reply(200, {"client_id": "abc", "name": "app"})

    client = await management.clients.read("abc")

    assert client.name == "app"
    assert transport.last.method == "GET"
    assert str(transport.last.url) == f"{BASE}/clients/abc"


@pytest.mark.asyncio
async def test_read_escapes_path_segments(management: Management, transport):
    transport.reply(200, {"client_id": "a/b"})

    await management.clients.read("a/b")

    assert transport.last.url.raw_path == b"/api/v2/clients/a%2Fb"


@pytest.mark.asyncio
async def test_read_rejects_malformed_lifetime(management: Management, transport):
    transport.reply(200, {"jwt_configuration": {"lifetime_in_seconds": "soon"}})

    with pytest.raises(MalformedFieldError):
        await management.clients.read("abc")


@pytest.mark.asyncio
async def test_list_applies_defaults(management: Management, transport):
    transport.reply(
        200,
        {
            "start": 0,
            "limit": 50,
            "length": 2,
            "total": 2,
            "clients": [{"client_id": "a"}, {"client_id": "b"}],
        },
    )

    clients = await management.clients.list(page(0))

    params = transport.last.url.params
    assert params["per_page"] == "50"
    assert params["include_totals"] == "true"
    assert params["page"] == "0"
    assert [c.client_id for c in clients.clients] == ["a", "b"]
    assert clients.total == 2
    assert not clients.has_next()


@pytest.mark.asyncio
async def test_list_without_totals(management: Management, transport):
    transport.reply(200, [{"client_id": "a"}])

    clients = await management.clients.list(include_totals(False))

    assert transport.last.url.params["include_totals"] == "false"
    assert clients.length == 1
    assert clients.clients[0].client_id == "a"


@pytest.mark.asyncio
async def test_update_sends_only_set_fields(management: Management, transport):
    transport.reply(
        200,
        {
            "client_id": "abc",
            "name": "renamed",
            "jwt_configuration": {"lifetime_in_seconds": 60},
        },
    )
    client = Client(
        name="renamed",
        jwt_configuration=ClientJWTConfiguration.decode({"lifetime_in_seconds": "60"}),
    )

    await management.clients.update("abc", client)

    assert transport.last.method == "PATCH"
    assert str(transport.last.url) == f"{BASE}/clients/abc"
    assert transport.last_json() == {
        "name": "renamed",
        "jwt_configuration": {"lifetime_in_seconds": 60},
    }
    assert client.client_id == "abc"


@pytest.mark.asyncio
async def test_rotate_secret(management: Management, transport):
    transport.reply(200, {"client_id": "abc", "client_secret": "new"})

    client = await management.clients.rotate_secret("abc")

    assert transport.last.method == "POST"
    assert str(transport.last.url) == f"{BASE}/clients/abc/rotate-secret"
    assert transport.last.content == b""
    assert client.client_secret == "new"


@pytest.mark.asyncio
async def test_delete(management: Management, transport):
    transport.reply(204)

    assert await management.clients.delete("abc") is None

    assert transport.last.method == "DELETE"
    assert str(transport.last.url) == f"{BASE}/clients/abc"


@pytest.mark.asyncio
async def test_create_credential(management: Management, transport):
    transport.reply(
        201,
        {
            "id": "cred_1",
            "name": "key",
            "kid": "kid-1",
            "alg": "RS256",
            "credential_type": "public_key",
        },
    )
    credential = Credential(name="key", credential_type="public_key", pem="PEM")

    await management.clients.create_credential("abc", credential)

    assert str(transport.last.url) == f"{BASE}/clients/abc/credentials"
    assert transport.last_json() == {
        "name": "key",
        "credential_type": "public_key",
        "pem": "PEM",
    }
    assert credential.id == "cred_1"
    assert credential.key_id == "kid-1"
    assert credential.pem == "PEM"


@pytest.mark.asyncio
async def test_update_credential_refreshes_in_place(
    management: Management, transport
):
    expires = datetime(2031, 6, 1, tzinfo=timezone.utc)
    transport.reply(
        200,
        {
            "id": "cred_1",
            "name": "server-name",
            "credential_type": "public_key",
            "kid": "kid-1",
            "alg": "RS256",
            "created_at": "2024-01-01T00:00:00.000Z",
            "updated_at": "2024-02-01T00:00:00.000Z",
            "expires_at": "2031-06-01T00:00:00.000Z",
        },
    )
    credential = Credential(
        name="local-name", pem="PEM", parse_expiry_from_cert=True, expires_at=expires
    )

    result = await management.clients.update_credential("abc", "cred_1", credential)

    assert result is credential
    assert transport.last.method == "PATCH"
    assert str(transport.last.url) == f"{BASE}/clients/abc/credentials/cred_1"
    assert transport.last_json() == {"expires_at": "2031-06-01T00:00:00Z"}

    assert credential.id == "cred_1"
    assert credential.name == "server-name"
    assert credential.credential_type == "public_key"
    assert credential.key_id == "kid-1"
    assert credential.algorithm == "RS256"
    assert credential.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert credential.updated_at == datetime(2024, 2, 1, tzinfo=timezone.utc)
    assert credential.expires_at == expires
    assert credential.pem == "PEM"
    assert credential.parse_expiry_from_cert is True


@pytest.mark.asyncio
async def test_list_and_get_credentials(management: Management, transport):
    transport.reply(200, [{"id": "cred_1"}, {"id": "cred_2"}])
    transport.reply(200, {"id": "cred_2", "alg": "RS256"})

    credentials = await management.clients.list_credentials("abc")
    assert [c.id for c in credentials] == ["cred_1", "cred_2"]
    assert transport.last.url.params["per_page"] == "50"

    credential = await management.clients.get_credential("abc", "cred_2")
    assert credential.algorithm == "RS256"
    assert str(transport.last.url) == f"{BASE}/clients/abc/credentials/cred_2"


@pytest.mark.asyncio
async def test_delete_credential(management: Management, transport):
    transport.reply(204)

    await management.clients.delete_credential("abc", "cred_1")

    assert transport.last.method == "DELETE"
    assert str(transport.last.url) == f"{BASE}/clients/abc/credentials/cred_1"


@pytest.mark.asyncio
async def test_error_status_raises_management_error(management: Management, transport):
    transport.reply(
        404,
        {
            "statusCode": 404,
            "error": "Not Found",
            "message": "The client does not exist",
            "errorCode": "inexistent_client",
        },
    )

    with pytest.raises(ManagementError) as exc_info:
        await management.clients.read("missing")

    error = exc_info.value
    assert error.status == 404
    assert error.message == "The client does not exist"
    assert error.details["error_code"] == "inexistent_client"
    assert error.details["endpoint"] == "clients/missing"


@pytest.mark.asyncio
async def test_network_error(management: Management, transport):
    transport.fail(httpx.ConnectError("connection refused"))

    with pytest.raises(ManagementError) as exc_info:
        await management.clients.delete("abc")

    assert exc_info.value.code == 503
    assert exc_info.value.details["network_error"] is True
