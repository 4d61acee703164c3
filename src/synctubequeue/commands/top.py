"""Move-to-top command for SyncTube rooms."""

import asyncio
import threading
from typing import Callable, List, Optional

from ..errors import EmptyPlaylistError, InvalidSelectionError, NoOpError
from ..logging_config import get_logger
from ..protocol import VideoEntry, move_video_message
from .base import RoomCommand

# Get logger for this module
logger = get_logger(__name__)


def prompt_for_position(videos: List[VideoEntry]) -> str:
    """Show the playlist and ask which video to move up."""
    logger.info("Found %d videos:", len(videos))
    for i, video in enumerate(videos, 1):
        logger.info("%d. %s - %s", i, video.title, video.author)
    return input("\nNumber of the video to move to the top: ")


async def ask_operator(
    choose: Callable[[List[VideoEntry]], str], videos: List[VideoEntry]
) -> str:
    """Run a blocking prompt without blocking the event loop.

    The prompt runs on a daemon thread, so cancelling the wait (or Ctrl-C)
    returns at once instead of waiting for the operator to press Enter.
    """
    loop = asyncio.get_running_loop()
    answer = loop.create_future()

    def deliver(result=None, error=None):
        if answer.done():
            return
        if error is not None:
            answer.set_exception(error)
        else:
            answer.set_result(result)

    def prompt():
        try:
            outcome = (choose(videos), None)
        except Exception as e:
            outcome = (None, e)
        if loop.is_closed():
            return
        loop.call_soon_threadsafe(deliver, *outcome)

    threading.Thread(target=prompt, name="operator-prompt", daemon=True).start()
    return await answer


class TopCommand(RoomCommand):
    """Command for moving one video to the top of a room playlist.

    The room only knows how to move a video one place up, so the video at
    position k is moved with k-1 single-step messages.
    """

    def __init__(
        self,
        room_id: str,
        choose: Optional[Callable[[List[VideoEntry]], str]] = None,
        **kwargs,
    ) -> None:
        """Initialize command.

        Args:
            room_id: SyncTube room ID
            choose: Callable given the playlist that returns the 1-based position
            **kwargs: Passed to RoomCommand
        """
        super().__init__(room_id, **kwargs)
        self.choose = choose or prompt_for_position

    @staticmethod
    def parse_selection(selection: str, videos: List[VideoEntry]) -> int:
        """Turn the operator's answer into a 1-based position.

        Raises:
            InvalidSelectionError: If the answer is not a position in the playlist
            NoOpError: If the video is already at the top
        """
        try:
            position = int(str(selection).strip())
        except ValueError as e:
            raise InvalidSelectionError(f"Not a number: {selection!r}") from e

        if position <= 0 or position > len(videos):
            raise InvalidSelectionError(
                f"Position must be between 1 and {len(videos)}, got {position}"
            )
        if position == 1:
            raise NoOpError(f"{videos[0].title or videos[0].id} is already at the top")
        return position

    async def _run(self) -> bool:
        """Run the move-to-top command.

        Returns:
            bool: True if successful, False otherwise
        """
        async with self.open_room(track_state=True) as connection:
            videos = await self.wait_for_playlist()
            if not videos:
                raise EmptyPlaylistError(f"Playlist of room {self.room_id} is empty")

            # Keep the event loop free while the operator thinks
            selection = await ask_operator(self.choose, videos)
            position = self.parse_selection(selection, videos)
            video = videos[position - 1]
            logger.info(
                "Moving %s to the top (%d steps)...", video.title or video.id, position - 1
            )
            await self.send_paced(
                connection, (move_video_message(video.id) for _ in range(position - 1))
            )

        logger.info("Moved %s to the top of the playlist!", video.title or video.id)
        return True
