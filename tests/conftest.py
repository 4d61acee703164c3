"""Common test fixtures and utilities."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.synctubequeue.auth import SessionCredential


@pytest.fixture
def credential() -> SessionCredential:
    """Create a fixed session credential."""
    return SessionCredential("session-token")


@pytest.fixture
def authenticate(credential) -> AsyncMock:
    """Create an authenticator stub returning the fixed credential."""
    return AsyncMock(return_value=credential)


@pytest.fixture
def youtube() -> MagicMock:
    """Create a mock YouTube API wrapper.

    Returns:
        MagicMock: Mock wrapper returning three video IDs for any playlist
    """
    mock = MagicMock()
    mock.get_playlist_video_ids.return_value = ["vid1", "vid2", "vid3"]
    return mock
