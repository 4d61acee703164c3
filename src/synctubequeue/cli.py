"""Command-line interface for SyncTube room operations."""

import argparse
import asyncio
import logging
import sys

from . import commands, utils
from .errors import SyncTubeError
from .logging_config import configure_logging


logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="Manage a SyncTube room playlist")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show progress bars")
    parser.add_argument(
        "--dry-run", action="store_true", help="Log room messages without sending them"
    )
    parser.add_argument(
        "--name", help="Name the bot announces in the room (empty string to skip)"
    )
    parser.add_argument("room", help="SyncTube room ID or URL")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Queue command
    queue_parser = subparsers.add_parser("queue", help="Queue a YouTube video or playlist")
    queue_parser.add_argument("url", help="YouTube watch or playlist URL")
    queue_parser.add_argument(
        "-r", "--random", action="store_true", help="Queue playlist videos in random order"
    )

    # Clear command
    subparsers.add_parser("clear", help="Remove every video from the room playlist")

    # Top command
    subparsers.add_parser("top", help="Move a video to the top of the room playlist")

    return parser


def build_command(args: argparse.Namespace) -> commands.RoomCommand:
    """Create the command for parsed arguments.

    Raises:
        ValueError: If the room or command is invalid
    """
    room_id = utils.parse_room_id(args.room)
    options = {
        "bot_name": args.name,
        "dry_run": args.dry_run,
        "verbose": args.verbose,
    }
    if args.command == "queue":
        return commands.QueueCommand(room_id, args.url, shuffle=args.random, **options)
    if args.command == "clear":
        return commands.ClearCommand(room_id, **options)
    if args.command == "top":
        return commands.TopCommand(room_id, **options)
    raise ValueError(f"Unknown command: {args.command}")


def main() -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    try:
        args = parser.parse_args(args=None if sys.argv[1:] else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging(debug=args.debug)

    if not args.command:
        parser.print_help()
        return 1

    try:
        command = build_command(args)
        if not asyncio.run(command.run()):
            logger.error("Command failed to run successfully")
            return 1
        return 0
    except SyncTubeError as e:
        logger.error("Command failed: %s", str(e))
        return 1
    except ValueError as e:
        logger.error("Command failed: %s", str(e))
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
