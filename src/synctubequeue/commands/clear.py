"""Clear command for SyncTube rooms."""

from ..errors import EmptyPlaylistError
from ..logging_config import get_logger
from ..protocol import remove_video_message
from .base import RoomCommand

# Get logger for this module
logger = get_logger(__name__)


class ClearCommand(RoomCommand):
    """Command for removing every video from a room playlist."""

    async def _run(self) -> bool:
        """Run the clear command.

        Returns:
            bool: True if successful, False otherwise

        Raises:
            EmptyPlaylistError: If the room playlist is empty
        """
        async with self.open_room(track_state=True) as connection:
            videos = await self.wait_for_playlist()
            if not videos:
                raise EmptyPlaylistError(f"Playlist of room {self.room_id} is already empty")

            logger.info("Removing %d videos from room %s...", len(videos), self.room_id)
            sent = await self.send_paced(
                connection, (remove_video_message(video.id) for video in videos)
            )

        logger.info("Removed %d videos, playlist cleared!", sent)
        return True
