"""SyncTube room playlist tool."""

__version__ = "0.1.0"

# Import all public components
from .api import YouTubeAPI
from .auth import SessionCredential, get_session_credential
from .cli import main
from .commands import ClearCommand, QueueCommand, RoomCommand, TopCommand
from .connection import ConnectionState, RoomConnection
from .errors import SyncTubeError
from .logging_config import configure_logging, get_logger
from .protocol import MessageType, OutboundMessage, VideoEntry, decode_frame
from .state import PlaylistStateTracker
from .waiting import wait_until

# Get logger for this module
logger = get_logger(__name__)
