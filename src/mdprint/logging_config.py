"""
Logging configuration for mdprint.

All loggers live under the "mdprint" namespace. The CLI sets up a Rich
console handler on stderr so progress messages never mix with stdout.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the mdprint namespace.

    Args:
        name: Component name (e.g. "renderer")

    Returns:
        Logger named "mdprint.<name>"
    """
    return logging.getLogger(f"mdprint.{name}")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    rich_console: bool = True,
) -> None:
    """Configure handlers on the root mdprint logger.

    Existing handlers are removed first, so calling this repeatedly is safe.

    Args:
        level: Log level for the mdprint logger
        log_file: Optional file to append log records to
        console: Attach a handler writing to stderr
        rich_console: Prefer rich's handler for the console
    """
    logger = logging.getLogger("mdprint")
    logger.handlers.clear()
    logger.setLevel(level)

    if console:
        handler = None
        if rich_console:
            try:
                from rich.console import Console
                from rich.logging import RichHandler

                handler = RichHandler(
                    console=Console(stderr=True),
                    show_path=False,
                    log_time_format=f"[{DATE_FORMAT}]",
                )
                handler.setFormatter(logging.Formatter("%(message)s"))
            except ImportError:
                handler = None
        if handler is None:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)


def setup_cli_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure logging for a CLI run.

    Progress is logged at INFO; verbose adds DEBUG detail.

    Returns:
        The "mdprint.cli" logger
    """
    setup_logging(
        level=logging.DEBUG if verbose else logging.INFO,
        log_file=log_file,
        console=True,
    )
    return get_logger("cli")


class StructuredLogger:
    """Logger wrapper that appends key=value context to every message."""

    def __init__(self, logger: logging.Logger, context: Optional[dict] = None):
        self._logger = logger
        self._context = dict(context or {})

    def with_context(self, **kwargs) -> "StructuredLogger":
        """Return a new logger with extra context merged in."""
        return StructuredLogger(self._logger, {**self._context, **kwargs})

    def _format(self, msg: str, kwargs: dict) -> str:
        fields = {**self._context, **kwargs}
        if not fields:
            return msg
        extra = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{msg} [{extra}]"

    def debug(self, msg: str, **kwargs) -> None:
        self._logger.debug(self._format(msg, kwargs))

    def info(self, msg: str, **kwargs) -> None:
        self._logger.info(self._format(msg, kwargs))

    def warning(self, msg: str, **kwargs) -> None:
        self._logger.warning(self._format(msg, kwargs))

    def error(self, msg: str, **kwargs) -> None:
        self._logger.error(self._format(msg, kwargs))

    def exception(self, msg: str, **kwargs) -> None:
        self._logger.exception(self._format(msg, kwargs))


def get_structured_logger(name: str) -> StructuredLogger:
    """Get a StructuredLogger wrapping get_logger(name)."""
    return StructuredLogger(get_logger(name))
