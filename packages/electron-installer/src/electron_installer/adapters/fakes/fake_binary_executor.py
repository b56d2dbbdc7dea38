"""Fake binary executor for testing."""

from __future__ import annotations

from pathlib import Path

from electron_installer.domain.exceptions import BinaryExecutionError


class FakeBinaryExecutor:
    """Fake implementation of BinaryExecutorPort for testing.

    Reports a fixed version for every path, or raises BinaryExecutionError
    when no version is configured.

    Example:
        >>> FakeBinaryExecutor("1.6.2").query_version(Path("/bin/electron"))
        '1.6.2'
    """

    def __init__(self, version: str | None = None) -> None:
        self._version = version
        self.queried: list[Path] = []

    def set_version(self, version: str | None) -> None:
        """Configure the reported version, or None to fail."""
        self._version = version

    def query_version(self, path: Path) -> str:
        self.queried.append(path)
        if self._version is None:
            raise BinaryExecutionError(f"{path} did not report a version")
        return self._version
