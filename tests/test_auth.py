"""Tests for the auth module."""

import httpx
import pytest

from src.synctubequeue import config
from src.synctubequeue.auth import SessionCredential, get_session_credential, parse_cookies
from src.synctubequeue.errors import AuthError


def mock_client(handler) -> httpx.AsyncClient:
    """Create an HTTP client answering every request with ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_parse_cookies():
    """Test parsing of a set-cookie header with attributes."""
    cookies = parse_cookies("s=abc%3D123; Path=/; HttpOnly; SameSite=Lax")
    assert cookies == {"s": "abc=123", "Path": "/", "HttpOnly": "", "SameSite": "Lax"}


def test_parse_cookies_empty_parts():
    """Test that stray separators are skipped."""
    assert parse_cookies(" ; s=x;;") == {"s": "x"}


def test_credential_cookie_header():
    """Test the cookie header value of a credential."""
    credential = SessionCredential("tok")
    assert credential.cookie == "s=tok"
    assert repr(credential) == "SessionCredential(token=***)"


@pytest.mark.asyncio
async def test_get_session_credential_success():
    """Test credential extraction from a 401 challenge response."""
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(
            401, headers=[("set-cookie", "s=secret-token; Path=/; HttpOnly")]
        )

    async with mock_client(handler) as client:
        credential = await get_session_credential(client)

    assert credential == SessionCredential("secret-token")
    assert len(requests) == 1
    assert str(requests[0].url) == f"{config.SYNCTUBE_BASE_URL}/api/user"
    assert requests[0].headers["accept"] == "application/json"


@pytest.mark.asyncio
async def test_get_session_credential_unexpected_status():
    """Test that any status other than 401 is rejected."""
    async with mock_client(lambda request: httpx.Response(200, json={})) as client:
        with pytest.raises(AuthError, match="status 200"):
            await get_session_credential(client)


@pytest.mark.asyncio
async def test_get_session_credential_no_cookie_header():
    """Test a 401 response without set-cookie."""
    async with mock_client(lambda request: httpx.Response(401)) as client:
        with pytest.raises(AuthError, match="no set-cookie header"):
            await get_session_credential(client)


@pytest.mark.asyncio
async def test_get_session_credential_missing_session_key():
    """Test a 401 response whose cookie has no 's' key."""

    def handler(request):
        return httpx.Response(401, headers=[("set-cookie", "other=1; Path=/")])

    async with mock_client(handler) as client:
        with pytest.raises(AuthError, match="Failed to extract session cookie"):
            await get_session_credential(client)


@pytest.mark.asyncio
async def test_get_session_credential_transport_error():
    """Test that transport failures become AuthError."""

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(handler) as client:
        with pytest.raises(AuthError, match="connection refused"):
            await get_session_credential(client)
