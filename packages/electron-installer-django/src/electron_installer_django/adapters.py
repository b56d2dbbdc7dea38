"""Adapter implementations for the Electron installer Django package.

Contains LoggingPort implementations that report installer progress
through a management command's output streams.
"""

from __future__ import annotations

from typing import Any

from electron_installer.adapters.ports import LoggingPort


class CommandOutputLogger:
    """LoggingPort that writes to a management command's stdout and stderr.

    Info messages go to stdout; warnings and errors go to stderr, styled
    with the command's color style.

    Example:
        >>> logger = CommandOutputLogger(self.stdout, self.stderr, self.style)
        >>> logger.warning("Retrying the download with a lower version number")
    """

    def __init__(self, stdout: Any, stderr: Any, style: Any) -> None:
        """Initialize with the command's output wrappers.

        Args:
            stdout: The command's OutputWrapper for standard output.
            stderr: The command's OutputWrapper for standard error.
            style: The command's color style.
        """
        self._stdout = stdout
        self._stderr = stderr
        self._style = style

    def info(self, message: str) -> None:
        self._stdout.write(message)

    def warning(self, message: str) -> None:
        self._stderr.write(self._style.WARNING(message))

    def error(self, message: str) -> None:
        self._stderr.write(self._style.ERROR(message))


# Runtime protocol check
assert issubclass(CommandOutputLogger, LoggingPort)
