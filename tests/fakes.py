"""In-memory fakes for the room socket."""

import asyncio
import json
import time
from typing import Any, Dict, List, Optional


class FakeWebSocket:
    """In-memory stand-in for a websockets client connection."""

    def __init__(self, frames: Optional[List[str]] = None):
        self.sent: List[str] = []
        self.sent_at: List[float] = []
        self.closed = False
        self._incoming: asyncio.Queue = asyncio.Queue()
        for frame in frames or []:
            self.push(frame)

    def push(self, frame: Any) -> None:
        """Deliver a frame from the server."""
        self._incoming.put_nowait(frame)

    async def send(self, data: str) -> None:
        self.sent.append(data)
        self.sent_at.append(time.monotonic())

    async def close(self) -> None:
        if not self.closed:
            self.closed = True
            self._incoming.put_nowait(None)

    def __aiter__(self):
        return self

    async def __anext__(self):
        frame = await self._incoming.get()
        if frame is None:
            raise StopAsyncIteration
        return frame

    def sent_messages(self, code: Optional[int] = None) -> List[list]:
        """Sent frames parsed as JSON arrays, optionally filtered by type code."""
        messages = [json.loads(data) for data in self.sent]
        if code is None:
            return messages
        return [m for m in messages if m[0] == code]


class FakeConnector:
    """Connector returning a prepared FakeWebSocket and recording the call."""

    def __init__(self, socket: Optional[FakeWebSocket] = None, delay: float = 0.0, error=None):
        self.socket = socket or FakeWebSocket()
        self.delay = delay
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def __call__(self, url: str, **kwargs) -> FakeWebSocket:
        self.calls.append({"url": url, **kwargs})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.socket


def snapshot_frame(videos: List[Dict[str, Any]]) -> str:
    """Build a room state push containing the given playlist."""
    return "[0," + json.dumps({"playlist": {"list": videos}, "users": []}) + "]"


def make_videos(count: int) -> List[Dict[str, Any]]:
    return [
        {"id": f"id{i}", "title": f"Video {i}", "author": f"Author {i}", "src": f"src{i}"}
        for i in range(1, count + 1)
    ]
