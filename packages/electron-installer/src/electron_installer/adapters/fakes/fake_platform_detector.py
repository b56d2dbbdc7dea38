"""Fake platform detector for testing.

This module provides a fake implementation of PlatformDetectorPort
that allows tests to control platform detection without relying on
actual OS/architecture detection.
"""

from __future__ import annotations

from typing import cast

from electron_installer.domain.binary import ArchName, OsName, Platform
from electron_installer.domain.exceptions import UnsupportedPlatformError


class FakePlatformDetector:
    """Fake implementation of PlatformDetectorPort for testing.

    Either part may be None to simulate an unsupported host.

    Example:
        >>> fake = FakePlatformDetector("linux", "x64")
        >>> fake.detect()
        Platform(os='linux', arch='x64')

        >>> FakePlatformDetector(None, "x64").detect_os() is None
        True
    """

    def __init__(self, os: str | None = "linux", arch: str | None = "x64") -> None:
        """Initialize with the platform to report.

        Args:
            os: OS name returned by detect_os().
            arch: Architecture returned by detect_arch().
        """
        self._os = os
        self._arch = arch

    def detect_os(self) -> str | None:
        return self._os

    def detect_arch(self) -> str | None:
        return self._arch

    def detect(self) -> Platform:
        """Return the configured platform.

        Raises:
            UnsupportedPlatformError: If either part is None.
        """
        if self._os is None or self._arch is None:
            raise UnsupportedPlatformError(
                f"Unsupported platform: os={self._os!r}, arch={self._arch!r}"
            )
        return Platform(os=cast(OsName, self._os), arch=cast(ArchName, self._arch))
