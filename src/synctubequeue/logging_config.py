"""Logging configuration for the synctubequeue package."""

import logging


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the package.

    Args:
        debug: Whether to enable debug output, including websocket frame logs
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,  # Force reconfiguration to avoid duplicates
    )
    # websockets and httpx are chatty at DEBUG/INFO
    for name in ("websockets", "httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name for the logger, typically __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
