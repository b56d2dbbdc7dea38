"""Platform detector adapter for detecting current OS and architecture.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform and struct modules.
"""

from __future__ import annotations

import platform
import struct
from typing import cast

from electron_installer.domain.binary import (
    SUPPORTED_ARCH,
    SUPPORTED_OS,
    ArchName,
    OsName,
    Platform,
)
from electron_installer.domain.exceptions import UnsupportedPlatformError


class OsPlatformDetector:
    """Adapter that detects the current platform.

    Implements PlatformDetectorPort. Each part can be overridden
    independently (ELECTRON_PLATFORM / ELECTRON_ARCHITECTURE, resolved
    into InstallerSettings by the caller); otherwise the host is inspected.

    Operating system, by substring of the lowercased system name:
        - darwin, openbsd, freebsd -> darwin
        - win -> win32
        - linux -> linux

    Architecture, by pointer width:
        - 4 bytes -> ia32
        - 8 bytes -> x64
    """

    # Checked in order: "darwin" contains "win"
    _OS_MARKERS: tuple[tuple[str, OsName], ...] = (
        ("darwin", "darwin"),
        ("openbsd", "darwin"),
        ("freebsd", "darwin"),
        ("win", "win32"),
        ("linux", "linux"),
    )

    _POINTER_WIDTHS: dict[int, ArchName] = {
        4: "ia32",
        8: "x64",
    }

    def __init__(
        self,
        platform_override: str | None = None,
        architecture_override: str | None = None,
    ) -> None:
        """Initialize the detector.

        Args:
            platform_override: Forced OS name, or None to inspect the host.
            architecture_override: Forced architecture, or None to inspect the host.
        """
        self._platform_override = platform_override
        self._architecture_override = architecture_override

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os and arch fields.

        Raises:
            UnsupportedPlatformError: If the OS or architecture is not supported.
        """
        os_name = self.detect_os()
        arch_name = self.detect_arch()
        if os_name is None or arch_name is None:
            raise UnsupportedPlatformError(
                "The installer could not select an Electron package for this OS "
                f"(os={os_name!r}, arch={arch_name!r}). "
                "Please install Electron manually into the bin folder of your project."
            )
        return Platform(os=cast(OsName, os_name), arch=cast(ArchName, arch_name))

    def detect_os(self) -> str | None:
        """Detect and normalize the operating system.

        Returns:
            'win32', 'linux', 'darwin', or None if unsupported.
        """
        if self._platform_override:
            override = self._platform_override.lower()
            return override if override in SUPPORTED_OS else None

        system = platform.system().lower()
        for marker, os_name in self._OS_MARKERS:
            if marker in system:
                return os_name
        return None

    def detect_arch(self) -> str | None:
        """Detect and normalize the CPU architecture.

        Returns:
            'ia32', 'x64', or None if unsupported.
        """
        if self._architecture_override:
            override = self._architecture_override.lower()
            return override if override in SUPPORTED_ARCH else None

        return self._POINTER_WIDTHS.get(struct.calcsize("P"))
