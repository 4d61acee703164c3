"""Base command class for SyncTube room operations."""

import asyncio
import contextlib
from typing import AsyncIterator, Awaitable, Callable, Iterable, List, Optional

from tqdm import tqdm

from .. import config
from ..auth import SessionCredential, get_session_credential
from ..connection import Connector, RoomConnection
from ..errors import SyncTubeError
from ..logging_config import get_logger
from ..protocol import OutboundMessage, VideoEntry, set_name_message
from ..state import PlaylistStateTracker

# Get logger for this module
logger = get_logger(__name__)


class RoomCommand:
    """Base class for SyncTube room commands."""

    def __init__(
        self,
        room_id: str,
        authenticate: Optional[Callable[[], Awaitable[SessionCredential]]] = None,
        connector: Optional[Connector] = None,
        bot_name: Optional[str] = None,
        dry_run: bool = False,
        verbose: bool = False,
        pacing_interval: Optional[float] = None,
        open_timeout_ms: Optional[float] = None,
        snapshot_timeout_ms: Optional[float] = None,
    ):
        """Initialize command.

        Args:
            room_id: SyncTube room ID
            authenticate: Coroutine function returning a session credential
            connector: Coroutine function opening the socket, for RoomConnection
            bot_name: Name announced in the room, defaults to SYNCTUBE_BOT_NAME
            dry_run: Log messages instead of sending them
            verbose: Show progress while sending
            pacing_interval: Seconds to wait before each message after the first
            open_timeout_ms: Time allowed for the socket to open
            snapshot_timeout_ms: Time allowed for the first playlist push
        """
        self.room_id = room_id
        self.authenticate = authenticate or get_session_credential
        self.connector = connector
        self.bot_name = config.SYNCTUBE_BOT_NAME if bot_name is None else bot_name
        self.dry_run = dry_run
        self.verbose = verbose
        self.pacing_interval = (
            config.PACING_INTERVAL if pacing_interval is None else pacing_interval
        )
        self.open_timeout_ms = (
            config.OPEN_TIMEOUT_MS if open_timeout_ms is None else open_timeout_ms
        )
        self.snapshot_timeout_ms = (
            config.SNAPSHOT_TIMEOUT_MS if snapshot_timeout_ms is None else snapshot_timeout_ms
        )
        self.tracker: Optional[PlaylistStateTracker] = None

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if not self.room_id:
            raise ValueError("Room ID is required")

    async def run(self) -> bool:
        """Run the command.

        Returns:
            bool: True if successful, False otherwise

        Raises:
            SyncTubeError: If command fails
        """
        try:
            self.validate()
            return await self._run()
        except SyncTubeError:
            raise
        except Exception as e:
            raise SyncTubeError(str(e)) from e

    async def _run(self) -> bool:
        """Internal run implementation.

        Returns:
            bool: True if successful, False otherwise
        """
        return False

    @contextlib.asynccontextmanager
    async def open_room(self, track_state: bool = False) -> AsyncIterator[RoomConnection]:
        """Connect to the room and yield an open connection.

        The connection is closed when the block exits, however it exits.

        Args:
            track_state: Attach a PlaylistStateTracker to ``self.tracker``
                before the socket opens, so no snapshot push is missed
        """
        credential = await self.authenticate()
        connection = RoomConnection(self.room_id, credential, connector=self.connector)
        if track_state:
            self.tracker = PlaylistStateTracker().attach(connection)

        async with connection:
            await connection.wait_until_open(self.open_timeout_ms)
            if self.bot_name:
                await self.send(connection, set_name_message(self.bot_name))
            yield connection

    async def wait_for_playlist(self) -> List[VideoEntry]:
        """Wait for the first playlist push and return the playlist.

        Raises:
            WaitTimeoutError: If the room never sends its playlist
        """
        await self.tracker.wait_for_snapshot(self.snapshot_timeout_ms)
        return self.tracker.current_snapshot()

    async def send(self, connection: RoomConnection, message: OutboundMessage) -> None:
        if self.dry_run:
            logger.info("Would send %s", message.encode())
            return
        await connection.send(message)

    async def send_paced(
        self, connection: RoomConnection, messages: Iterable[OutboundMessage]
    ) -> int:
        """Send messages one by one with a fixed delay between them.

        The first message goes out immediately; every later one waits
        ``pacing_interval`` seconds so the room does not flag us as spam.

        Returns:
            Number of messages sent
        """
        messages = list(messages)
        sent = 0
        with tqdm(total=len(messages), unit="msg", disable=not self.verbose, leave=False) as bar:
            for message in messages:
                if sent > 0:
                    await asyncio.sleep(self.pacing_interval)
                await self.send(connection, message)
                sent += 1
                bar.update(1)
        return sent
