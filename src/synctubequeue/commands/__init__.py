"""Command implementations for SyncTube room operations.

# Pacing
Commands that send more than one message go through
`RoomCommand.send_paced`: the first message is sent immediately and every
later one waits `PACING_INTERVAL` seconds, otherwise the room drops us as a
spammer.

# Room State
Commands that need the current playlist call `open_room(track_state=True)`
so the tracker is attached before the socket opens, then
`wait_for_playlist()` so they never act on a playlist that has not arrived
yet.

# Error Handling Pattern
1. Low-level functions raise specific `SyncTubeError` subclasses
2. `RoomCommand.run` passes those through and wraps anything else
3. The CLI logs the final message once
"""

from .base import RoomCommand
from .clear import ClearCommand  # noqa: F401
from .queue import QueueCommand  # noqa: F401
from .top import TopCommand  # noqa: F401

__all__ = ["RoomCommand", "ClearCommand", "QueueCommand", "TopCommand"]
