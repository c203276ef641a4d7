"""
Error Log

Append-only plain-text log of handled domain errors. The file is opened and
closed on every write; it is never read back, buffered or rotated.
"""

from pathlib import Path

import structlog

from university.config import get_settings

logger = structlog.get_logger(__name__)


class ErrorLog:
    """Appends one line per error to a log file."""

    def __init__(self, path: str | Path | None = None):
        """
        Initialize error log.

        Args:
            path: Log file path (defaults to ``settings.error_log_path``)
        """
        self.path = Path(path if path is not None else get_settings().error_log_path)

    def log_error(self, message: str) -> None:
        with self.path.open("a", encoding="utf-8") as log:
            log.write(f"{message}\n")
        logger.debug("Error appended to log", path=str(self.path))


def log_error(message: str) -> None:
    """Append ``message`` to the default error log."""
    ErrorLog().log_error(message)
