"""Stdlib logging implementation of the LoggingPort."""

from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "electron_installer"


class StdlibLoggingAdapter:
    """Forwards installer messages to a standard library logger.

    The default log sink when the host does not provide its own.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the adapter.

        Args:
            logger: Logger to write to. Defaults to the 'electron_installer' logger.
        """
        self._logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

    def info(self, message: str) -> None:
        """Log an informational message."""
        self._logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self._logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self._logger.error(message)
