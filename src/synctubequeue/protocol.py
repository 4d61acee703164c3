"""SyncTube room message protocol.

Outbound and inbound frames do not share a format. Outbound messages are
written as ``[code,<json payload>,<timestamp>]`` (timestamp omitted for some
types). Inbound frames arrive as ``[<code>,<json body>]`` and are parsed with
``decode_frame``.
"""

import json
import re
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Union


class MessageType(IntEnum):
    """Outbound message type codes."""

    SET_NAME = 12
    QUEUE_VIDEO = 30
    REMOVE_VIDEO = 31
    MOVE_VIDEO = 32


SNAPSHOT_CODE = 0  # Inbound full room state push
MOVE_TOWARD_TOP = 1

_FRAME_PATTERN = re.compile(r"^\[(?P<code>\d+),(?P<body>.*)\]$", re.DOTALL)


def now_millis() -> int:
    """Current wall-clock time in milliseconds."""
    return int(time.time() * 1000)


def watch_url(video_id: str) -> str:
    """Canonical YouTube watch URL for a video id."""
    return f"https://www.youtube.com/watch?v={video_id}"


@dataclass
class OutboundMessage:
    """A message sent to the room."""

    code: int
    payload: Any
    timestamp: Optional[int] = None

    def encode(self) -> str:
        body = json.dumps(self.payload, separators=(",", ":"))
        if self.timestamp is None:
            return f"[{int(self.code)},{body}]"
        return f"[{int(self.code)},{body},{self.timestamp}]"


@dataclass
class InboundFrame:
    """A frame received from the room."""

    code: int
    payload: Any


@dataclass
class VideoEntry:
    """One video in the room playlist."""

    id: str
    title: str = ""
    author: str = ""
    src: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["VideoEntry"]:
        """Build an entry from a playlist item, or None if it has no id."""
        if not isinstance(data, dict) or data.get("id") in (None, ""):
            return None
        known = ("id", "title", "author", "src")
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            author=data.get("author") or "",
            src=data.get("src") or "",
            extra={k: v for k, v in data.items() if k not in known},
        )


def set_name_message(name: str) -> OutboundMessage:
    return OutboundMessage(MessageType.SET_NAME, name, now_millis())


def queue_video_message(src: str) -> OutboundMessage:
    """Queue a video by its full URL."""
    return OutboundMessage(MessageType.QUEUE_VIDEO, {"src": src}, now_millis())


def remove_video_message(video_id: Any) -> OutboundMessage:
    return OutboundMessage(MessageType.REMOVE_VIDEO, {"id": video_id})


def move_video_message(video_id: Any) -> OutboundMessage:
    """Move a video one position toward the top of the playlist."""
    return OutboundMessage(MessageType.MOVE_VIDEO, {"id": video_id, "dir": MOVE_TOWARD_TOP})


def decode_frame(raw: Union[str, bytes]) -> Optional[InboundFrame]:
    """Parse an inbound frame.

    Args:
        raw: Frame text as received from the socket

    Returns:
        InboundFrame, or None if the frame does not have the expected shape
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            return None

    match = _FRAME_PATTERN.match(raw.strip())
    if not match:
        return None

    try:
        payload = json.loads(match.group("body"))
    except ValueError:
        return None

    return InboundFrame(code=int(match.group("code")), payload=payload)


def parse_snapshot(payload: Any) -> Optional[List[VideoEntry]]:
    """Extract the ordered playlist from a room state payload.

    Expected shape is ``{"playlist": {"list": [{"id": ...}, ...]}}``.

    Returns:
        List of entries, or None if the payload does not match
    """
    try:
        items = payload["playlist"]["list"]
    except (KeyError, TypeError):
        return None
    if not isinstance(items, list):
        return None

    entries = []
    for item in items:
        entry = VideoEntry.from_dict(item)
        if entry is None:
            return None
        entries.append(entry)
    return entries
