"""Queue command for SyncTube rooms."""

import asyncio
import random
from typing import List, Optional

from .. import config
from ..api import YouTubeAPI, get_youtube_service
from ..logging_config import get_logger
from ..protocol import queue_video_message, watch_url
from ..utils import LinkKind, classify_youtube_url, parse_playlist_id, shuffle_videos
from .base import RoomCommand

# Get logger for this module
logger = get_logger(__name__)


class QueueCommand(RoomCommand):
    """Command for queueing a YouTube video or playlist into a room."""

    def __init__(
        self,
        room_id: str,
        url: str,
        youtube: Optional[YouTubeAPI] = None,
        shuffle: bool = False,
        rng: Optional[random.Random] = None,
        max_videos: int = config.MAX_PLAYLIST_VIDEOS,
        **kwargs,
    ) -> None:
        """Initialize command.

        Args:
            room_id: SyncTube room ID
            url: YouTube watch or playlist URL
            youtube: YouTube API wrapper, built from YT_API_KEY when needed
            shuffle: Whether to queue playlist videos in random order
            rng: Random source for shuffling
            max_videos: Maximum number of playlist videos to queue
            **kwargs: Passed to RoomCommand
        """
        super().__init__(room_id, **kwargs)
        self.url = url
        self.youtube = youtube
        self.shuffle = shuffle
        self.rng = rng
        self.max_videos = max_videos
        self.kind: Optional[LinkKind] = None

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if not self.url:
            raise ValueError("YouTube URL is required")

        self.kind = classify_youtube_url(self.url)
        if self.kind is LinkKind.PLAYLIST:
            parse_playlist_id(self.url)
            if self.youtube is None and not config.YT_API_KEY:
                raise ValueError(
                    "YT_API_KEY is not set; a YouTube Data API key is required for playlists"
                )

    async def resolve_playlist(self) -> List[str]:
        """Get the video IDs to queue for a playlist URL.

        Raises:
            UpstreamError: If the YouTube API request fails
        """
        playlist_id = parse_playlist_id(self.url)
        if self.youtube is None:
            self.youtube = YouTubeAPI(get_youtube_service())

        video_ids = await asyncio.to_thread(
            self.youtube.get_playlist_video_ids, playlist_id, self.max_videos
        )
        if len(video_ids) > self.max_videos:
            video_ids = video_ids[: self.max_videos]
        if self.shuffle:
            shuffle_videos(video_ids, self.rng)
        return video_ids

    async def _run(self) -> bool:
        """Run the queue command.

        Returns:
            bool: True if successful, False otherwise
        """
        if self.kind is LinkKind.VIDEO:
            async with self.open_room() as connection:
                await self.send(connection, queue_video_message(self.url))
            logger.info("Queued video: %s", self.url)
            return True

        video_ids = await self.resolve_playlist()
        if not video_ids:
            logger.info("No videos found in playlist")
            return True

        logger.info(
            "Queueing %d videos found from YouTube API, should take about %.1fs...",
            len(video_ids),
            len(video_ids) * self.pacing_interval,
        )
        async with self.open_room() as connection:
            sent = await self.send_paced(
                connection, (queue_video_message(watch_url(v)) for v in video_ids)
            )
        logger.info("Successfully queued %d videos from the YouTube playlist!", sent)
        return True
