"""Utility functions for rooms and YouTube links."""

import random
from enum import Enum
from typing import List, Optional
from urllib.parse import parse_qs, urlparse

from .errors import InvalidUrlError
from .logging_config import get_logger

logger = get_logger(__name__)


class LinkKind(Enum):
    VIDEO = "video"
    PLAYLIST = "playlist"


def parse_room_id(room: str) -> str:
    """Extract the room ID from a SyncTube room URL or return the raw ID.

    Args:
        room: A room URL such as ``https://sync-tube.de/room/abc123`` or an ID

    Returns:
        The room ID

    Raises:
        ValueError: If no room ID can be found
    """
    room = room.strip()
    if "http" in room:
        segments = [s for s in urlparse(room).path.split("/") if s]
        if not segments:
            raise ValueError(f"Invalid room URL: {room}")
        return segments[-1]
    if not room:
        raise ValueError("Room ID is required")
    return room


def classify_youtube_url(url: str) -> LinkKind:
    """Tell whether a YouTube link points at a single video or a playlist.

    Watch links win over playlist links, so ``watch?v=x&list=y`` is a video.

    Raises:
        InvalidUrlError: If the link is neither
    """
    if "youtube.com/watch" in url or "youtu.be/" in url:
        return LinkKind.VIDEO
    if "youtube.com/playlist" in url:
        return LinkKind.PLAYLIST
    raise InvalidUrlError(f"Unsupported YouTube link: {url}")


def parse_playlist_id(url: str) -> str:
    """Extract the playlist ID from the ``list`` query parameter.

    Raises:
        InvalidUrlError: If the URL has no ``list`` parameter
    """
    values = parse_qs(urlparse(url).query).get("list")
    if not values or not values[0]:
        raise InvalidUrlError(f"Not a valid YouTube playlist URL (missing list parameter): {url}")
    return values[0]


def shuffle_videos(video_ids: List[str], rng: Optional[random.Random] = None) -> List[str]:
    """Shuffle video IDs in place, every order equally likely.

    Returns:
        The same list, for chaining
    """
    (rng or random).shuffle(video_ids)
    return video_ids
