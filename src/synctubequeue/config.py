"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

# Force reload of environment variables
load_dotenv(override=True)

# YouTube API Settings
YT_API_KEY = os.getenv("YT_API_KEY")
MAX_PLAYLIST_VIDEOS = 50  # One page of playlistItems, never paginated further

# SyncTube Settings
SYNCTUBE_BASE_URL = os.getenv("SYNCTUBE_BASE_URL", "https://sync-tube.de")
SYNCTUBE_WS_URL = os.getenv("SYNCTUBE_WS_URL", "wss://sync-tube.de/ws")
SYNCTUBE_BOT_NAME = os.getenv("SYNCTUBE_BOT_NAME", "Billy Bot")

# Timing Settings
PACING_INTERVAL = float(os.getenv("PACING_INTERVAL", "0.2"))  # Seconds between paced messages
OPEN_TIMEOUT_MS = int(os.getenv("OPEN_TIMEOUT_MS", "5000"))
SNAPSHOT_TIMEOUT_MS = int(os.getenv("SNAPSHOT_TIMEOUT_MS", "5000"))
POLL_INTERVAL_MS = 20
