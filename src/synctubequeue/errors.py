"""Error types for SyncTube room operations."""

from typing import Optional


class SyncTubeError(Exception):
    """Base class for SyncTube client errors."""

    pass


class AuthError(SyncTubeError):
    """Error raised when the session challenge handshake fails."""

    pass


class ConnectTimeoutError(SyncTubeError):
    """Error raised when the room socket does not open in time."""

    pass


class NotConnectedError(SyncTubeError):
    """Error raised when sending on a connection that is not open."""

    pass


class WaitTimeoutError(SyncTubeError, TimeoutError):
    """Error raised when a polled condition is not met in time."""

    def __init__(self, timeout_ms: float, elapsed_ms: Optional[float] = None):
        """Initialize error.

        Args:
            timeout_ms: The bound that was exceeded, in milliseconds
            elapsed_ms: Time actually waited, in milliseconds
        """
        self.timeout_ms = timeout_ms
        self.elapsed_ms = elapsed_ms
        if elapsed_ms is not None:
            super().__init__(
                f"Condition not met within {timeout_ms:g}ms (waited {elapsed_ms:.0f}ms)"
            )
        else:
            super().__init__(f"Condition not met within {timeout_ms:g}ms")


class UpstreamError(SyncTubeError):
    """Error raised when the YouTube API request fails or returns junk."""

    pass


class InvalidUrlError(SyncTubeError):
    """Error raised when a YouTube link cannot be queued."""

    pass


class EmptyPlaylistError(SyncTubeError):
    """Error raised when the room playlist has no videos."""

    pass


class InvalidSelectionError(SyncTubeError):
    """Error raised when the operator picks a position outside the playlist."""

    pass


class NoOpError(SyncTubeError):
    """Error raised when the requested change would do nothing."""

    pass
