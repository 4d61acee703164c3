"""Websocket connection to a SyncTube room."""

import asyncio
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Union

from websockets.asyncio.client import connect
from websockets.exceptions import ConnectionClosed

from . import config
from .auth import SessionCredential
from .errors import ConnectTimeoutError, NotConnectedError, WaitTimeoutError
from .logging_config import get_logger
from .protocol import OutboundMessage
from .waiting import wait_until

logger = get_logger(__name__)

# base64 of the dot-interleaved profile blob (name "piratebooty", color #5c4183)
# as the web client sends it. The service expects it in the socket path.
CLIENT_IDENTITY = (
    "ey4iLnUucy5lLnIuIi46LnsuIi5uLmEubS5lLiIuOi4icGlyYXRlYm9vdHkiLiwuIi5jLm8ubC5vLnIuIi46LiIuIy41"
    "LmMuNC4xLjguMy4iLn0ufS4="
)

MessageHandler = Callable[[str], Any]
Connector = Callable[..., Awaitable[Any]]


class ConnectionState(Enum):
    """Lifecycle of a room connection."""

    CONNECTING = "connecting"
    OPEN = "open"
    CLOSING = "closing"
    CLOSED = "closed"
    FAILED = "failed"


_TRANSITIONS = {
    ConnectionState.CONNECTING: {
        ConnectionState.OPEN,
        ConnectionState.CLOSING,
        ConnectionState.FAILED,
    },
    ConnectionState.OPEN: {ConnectionState.CLOSING, ConnectionState.CLOSED},
    ConnectionState.CLOSING: {ConnectionState.CLOSED},
    ConnectionState.CLOSED: set(),
    ConnectionState.FAILED: set(),
}


class RoomConnection:
    """One websocket connection to one room.

    Use as an async context manager so the socket is closed on every exit path:

        async with RoomConnection(room_id, credential) as connection:
            await connection.wait_until_open()
            await connection.send(message)
    """

    def __init__(
        self,
        room_id: str,
        credential: SessionCredential,
        connector: Optional[Connector] = None,
        ws_base_url: Optional[str] = None,
    ):
        """Initialize connection.

        Args:
            room_id: SyncTube room ID
            credential: Session credential from the challenge handshake
            connector: Coroutine function opening the socket, defaults to websockets
            ws_base_url: Base websocket URL, defaults to the configured one
        """
        self.room_id = room_id
        self.credential = credential
        self.url = f"{ws_base_url or config.SYNCTUBE_WS_URL}/{room_id}/{CLIENT_IDENTITY}"
        self._connector = connector or connect
        self._state = ConnectionState.CONNECTING
        self._handlers: List[MessageHandler] = []
        self._socket = None
        self._task: Optional[asyncio.Task] = None
        self._failure: Optional[BaseException] = None

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is ConnectionState.OPEN

    def _set_state(self, state: ConnectionState) -> None:
        if state not in _TRANSITIONS[self._state]:
            raise RuntimeError(
                f"Invalid connection state change {self._state.value} -> {state.value}"
            )
        logger.debug("Room %s: %s -> %s", self.room_id, self._state.value, state.value)
        self._state = state

    def connect(self) -> "RoomConnection":
        """Start opening the socket in the background.

        Returns:
            self, in CONNECTING state
        """
        if self._task is not None:
            return self
        logger.info("Connecting to room %s", self.room_id)
        self._task = asyncio.get_running_loop().create_task(self._open_and_read())
        return self

    async def _open_and_read(self) -> None:
        try:
            socket = await self._connector(
                self.url, additional_headers={"Cookie": self.credential.cookie}
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self._failure = e
            if self._state is ConnectionState.CONNECTING:
                self._set_state(ConnectionState.FAILED)
            logger.error("Failed to connect to room %s: %s", self.room_id, str(e))
            return

        self._socket = socket
        if self._state is not ConnectionState.CONNECTING:
            # close() was called while the handshake was in flight
            await socket.close()
            return
        self._set_state(ConnectionState.OPEN)
        logger.info("Connected to room %s", self.room_id)

        try:
            async for raw in socket:
                self._dispatch(raw)
        except ConnectionClosed as e:
            logger.warning("Room %s closed the connection: %s", self.room_id, str(e))
        finally:
            if self._state is ConnectionState.OPEN:
                self._set_state(ConnectionState.CLOSED)

    def _dispatch(self, raw: Union[str, bytes]) -> None:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8", errors="replace")
        for handler in list(self._handlers):
            try:
                handler(raw)
            except Exception:
                logger.exception("Message handler %r failed", handler)

    async def wait_until_open(self, timeout_ms: Optional[float] = None) -> None:
        """Wait for the socket to open.

        Args:
            timeout_ms: Maximum time to wait, in milliseconds

        Raises:
            ConnectTimeoutError: If the socket is not open in time or failed to open
        """
        if timeout_ms is None:
            timeout_ms = config.OPEN_TIMEOUT_MS
        try:
            await wait_until(
                lambda: self._state is not ConnectionState.CONNECTING, timeout_ms
            )
        except WaitTimeoutError as e:
            raise ConnectTimeoutError(
                f"Failed to connect to room {self.room_id} within {timeout_ms:g}ms"
            ) from e

        if self._state is not ConnectionState.OPEN:
            raise ConnectTimeoutError(
                f"Failed to connect to room {self.room_id}: connection {self._state.value}"
            ) from self._failure

    async def send(self, message: Union[OutboundMessage, str]) -> None:
        """Send a message to the room.

        Raises:
            NotConnectedError: If the connection is not open
        """
        if self._state is not ConnectionState.OPEN:
            raise NotConnectedError(
                f"Cannot send to room {self.room_id}: connection {self._state.value}"
            )
        data = message.encode() if isinstance(message, OutboundMessage) else message
        logger.debug("Room %s <- %s", self.room_id, data)
        await self._socket.send(data)

    def on_message(self, handler: MessageHandler) -> None:
        """Register a callback for every inbound frame, in arrival order."""
        self._handlers.append(handler)

    async def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._state in (
            ConnectionState.CLOSING,
            ConnectionState.CLOSED,
            ConnectionState.FAILED,
        ):
            return
        if self._task is None:
            # Never connected
            self._set_state(ConnectionState.CLOSING)
            self._set_state(ConnectionState.CLOSED)
            return

        self._set_state(ConnectionState.CLOSING)
        try:
            if self._socket is not None:
                await self._socket.close()
        finally:
            if not self._task.done():
                self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            except Exception:
                logger.exception("Read loop for room %s failed", self.room_id)
            self._set_state(ConnectionState.CLOSED)
            logger.info("Disconnected from room %s", self.room_id)

    async def __aenter__(self) -> "RoomConnection":
        return self.connect()

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
