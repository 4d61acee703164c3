"""Local mirror of a room's playlist."""

from typing import List, Optional, Union

from . import config
from .connection import RoomConnection
from .logging_config import get_logger
from .protocol import SNAPSHOT_CODE, VideoEntry, decode_frame, parse_snapshot
from .waiting import wait_until

logger = get_logger(__name__)


class PlaylistStateTracker:
    """Track the room playlist from server state pushes.

    Every snapshot push replaces the previous playlist wholesale. Frames that
    are not snapshot pushes, or do not have the expected shape, are ignored.
    """

    def __init__(self):
        self._snapshot: List[VideoEntry] = []
        self.snapshot_count = 0

    def attach(self, connection: RoomConnection) -> "PlaylistStateTracker":
        connection.on_message(self.handle_frame)
        return self

    def handle_frame(self, raw: Union[str, bytes]) -> None:
        frame = decode_frame(raw)
        if frame is None or frame.code != SNAPSHOT_CODE:
            return

        entries = parse_snapshot(frame.payload)
        if entries is None:
            logger.debug("Ignoring malformed playlist snapshot")
            return

        self._snapshot = entries
        self.snapshot_count += 1
        logger.debug("Playlist snapshot #%d: %d videos", self.snapshot_count, len(entries))

    @property
    def has_snapshot(self) -> bool:
        return self.snapshot_count > 0

    def current_snapshot(self) -> List[VideoEntry]:
        """Return the most recent playlist, empty before the first push."""
        return list(self._snapshot)

    async def wait_for_snapshot(self, timeout_ms: Optional[float] = None) -> None:
        """Wait until at least one snapshot push has arrived.

        Raises:
            WaitTimeoutError: If no snapshot arrives within ``timeout_ms``
        """
        if timeout_ms is None:
            timeout_ms = config.SNAPSHOT_TIMEOUT_MS
        await wait_until(lambda: self.has_snapshot, timeout_ms)
