"""Logging setup for roomledger.

Modules obtain loggers through :func:`get_logger` so that everything lives
under the ``roomledger`` namespace and can be configured in one place.
"""

__all__ = [
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import logging
import sys

_LOGGER_PREFIX = "roomledger"
_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handler installed by configure_logging(), kept so it can be replaced/removed.
_installed_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the roomledger namespace."""
    if name == _LOGGER_PREFIX or name.startswith(f"{_LOGGER_PREFIX}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def configure_logging(level: int | str = logging.WARNING, stream=None) -> logging.Logger:
    """Configure the roomledger logger with a single stream handler.

    Calling this more than once replaces the previously installed handler
    instead of stacking a second one.

    Args:
        level: Logging level name or number (e.g. "INFO", logging.DEBUG)
        stream: Output stream, defaults to stderr

    Returns:
        The configured root roomledger logger
    """
    global _installed_handler

    if isinstance(level, str):
        level_name = level.strip().upper()
        resolved = logging.getLevelName(level_name)
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: '{level}'")
        level = resolved

    root = logging.getLogger(_LOGGER_PREFIX)
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    _installed_handler = handler
    return root


def reset_logging() -> None:
    """Remove the handler installed by configure_logging()."""
    global _installed_handler

    root = logging.getLogger(_LOGGER_PREFIX)
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)
        _installed_handler = None
    root.setLevel(logging.NOTSET)
