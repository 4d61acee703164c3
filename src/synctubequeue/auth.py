"""SyncTube session authentication handling."""

from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import unquote

import httpx

from . import config
from .errors import AuthError
from .logging_config import get_logger

logger = get_logger(__name__)

SESSION_COOKIE = "s"


@dataclass(frozen=True)
class SessionCredential:
    """Session token handed out by the user API challenge."""

    token: str

    @property
    def cookie(self) -> str:
        """Value for the ``Cookie`` header of the room socket."""
        return f"{SESSION_COOKIE}={self.token}"

    def __repr__(self) -> str:
        return "SessionCredential(token=***)"


def parse_cookies(raw: str) -> Dict[str, str]:
    """Parse a ``set-cookie`` header into a dict.

    Attributes such as ``Path`` or ``HttpOnly`` end up as keys too; a key
    without a value maps to an empty string.

    Args:
        raw: Raw header value

    Returns:
        Dict of decoded cookie keys to decoded values
    """
    cookies = {}
    for part in raw.split(";"):
        key, _, value = part.partition("=")
        key = key.strip()
        if not key:
            continue
        cookies[unquote(key)] = unquote(value.strip())
    return cookies


async def get_session_credential(
    client: Optional[httpx.AsyncClient] = None,
) -> SessionCredential:
    """Get a session credential from the unauthenticated user endpoint.

    The endpoint answers 401 and hands out a fresh session cookie. Only one
    attempt is made.

    Args:
        client: Optional HTTP client to use. It is not closed here.

    Returns:
        SessionCredential for this run

    Raises:
        AuthError: If the status is not 401 or the session cookie is missing
    """
    url = f"{config.SYNCTUBE_BASE_URL}/api/user"
    headers = {"Accept": "application/json"}

    try:
        if client is not None:
            response = await client.get(url, headers=headers)
        else:
            async with httpx.AsyncClient() as session:
                response = await session.get(url, headers=headers)
    except httpx.HTTPError as e:
        raise AuthError(f"Failed to request session cookie: {str(e)}") from e

    if response.status_code != 401:
        raise AuthError(
            f"Failed to request session cookie: expected 401 Unauthorized, "
            f"got status {response.status_code}"
        )

    raw_cookies = response.headers.get_list("set-cookie")
    if not raw_cookies:
        raise AuthError("Failed to extract session cookie: no set-cookie header")

    cookies = parse_cookies(raw_cookies[0])
    token = cookies.get(SESSION_COOKIE)
    if not token:
        raise AuthError(f"Failed to extract session cookie from {raw_cookies[0]!r}")

    logger.debug("Obtained session credential")
    return SessionCredential(token)
