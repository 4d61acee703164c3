"""YouTube API wrapper."""

import logging
from typing import List, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from . import config
from .errors import UpstreamError


logger = logging.getLogger(__name__)


def get_youtube_service(api_key: Optional[str] = None):
    """Build a YouTube Data API client authenticated with an API key.

    Args:
        api_key: API key, defaults to YT_API_KEY from the environment

    Raises:
        ValueError: If no API key is available
    """
    api_key = api_key or config.YT_API_KEY
    if not api_key:
        raise ValueError("YT_API_KEY is not set; a YouTube Data API key is required")
    return build("youtube", "v3", developerKey=api_key, cache_discovery=False)


class YouTubeAPI:
    """Wrapper for YouTube API operations."""

    def __init__(self, youtube):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API client
        """
        self.youtube = youtube

    def get_playlist_video_ids(
        self, playlist_id: str, max_results: int = config.MAX_PLAYLIST_VIDEOS
    ) -> List[str]:
        """Get the IDs of the first videos in a playlist.

        Only the first page is fetched; longer playlists are truncated.

        Args:
            playlist_id: ID of playlist to get videos from
            max_results: Maximum number of video IDs to return (at most 50)

        Returns:
            List of video IDs in playlist order

        Raises:
            UpstreamError: If the API request fails or the response is malformed
        """
        request = self.youtube.playlistItems().list(
            part="contentDetails",
            playlistId=playlist_id,
            maxResults=max_results,
        )
        try:
            response = request.execute()
        except (HttpError, OSError) as e:
            raise UpstreamError(
                f"Failed to get videos of playlist {playlist_id}: {str(e)}"
            ) from e

        try:
            video_ids = [item["contentDetails"]["videoId"] for item in response["items"]]
        except (KeyError, TypeError) as e:
            raise UpstreamError(f"Malformed playlist response for {playlist_id}") from e

        logger.debug("Playlist %s has %d videos on first page", playlist_id, len(video_ids))
        return video_ids[:max_results]
