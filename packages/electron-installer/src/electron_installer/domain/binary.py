"""Binary-related domain value objects.

This module contains value objects describing the Electron build to fetch:
the target platform and the in-memory package descriptor handed to a
downloader.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from electron_installer.domain.exceptions import (
    ElectronInstallerError,
    UnsupportedPlatformError,
)
from electron_installer.domain.version import ElectronVersion

OsName = Literal["win32", "linux", "darwin"]
ArchName = Literal["ia32", "x64"]

SUPPORTED_OS: tuple[OsName, ...] = ("win32", "linux", "darwin")
SUPPORTED_ARCH: tuple[ArchName, ...] = ("ia32", "x64")

# Location of the binary inside an extracted Electron archive
_STAGED_BINARY_NAMES: dict[str, str] = {
    "win32": "electron.exe",
    "linux": "electron",
    "darwin": "Electron.app",
}


@dataclass(frozen=True)
class Platform:
    """Platform value object representing OS and architecture.

    Attributes:
        os: Operating system, one of 'win32', 'linux' or 'darwin'.
        arch: Architecture, one of 'ia32' or 'x64'.
    """

    os: OsName
    arch: ArchName

    def __post_init__(self) -> None:
        """Validate platform configuration."""
        self._validate_os()
        self._validate_arch()

    def _validate_os(self) -> None:
        """Validate os is a valid value."""
        if self.os not in SUPPORTED_OS:
            raise UnsupportedPlatformError(
                f"os must be one of {SUPPORTED_OS}, got: {self.os!r}"
            )

    def _validate_arch(self) -> None:
        """Validate arch is a valid value."""
        if self.arch not in SUPPORTED_ARCH:
            raise UnsupportedPlatformError(
                f"arch must be one of {SUPPORTED_ARCH}, got: {self.arch!r}"
            )

    @property
    def staged_binary_name(self) -> str:
        """Name of the binary (or app bundle) inside the extracted archive."""
        return _STAGED_BINARY_NAMES[self.os]

    @property
    def executable_name(self) -> str:
        """Name of the binary placed in the project's bin directory."""
        return "electron.exe" if self.os == "win32" else "electron"


@dataclass(frozen=True)
class PackageDescriptor:
    """In-memory description of one Electron archive to download.

    Built fresh for every download attempt and discarded afterwards.

    Attributes:
        name: Package name.
        version: Normalized four-segment version, e.g. '1.6.2.0'.
        pretty_version: Version as requested, e.g. '1.6.2'.
        target_dir: Directory the archive is extracted into.
        installation_source: Always 'dist' for archive downloads.
        dist_type: Archive type, 'zip' or 'tar'.
        dist_url: Remote URL of the archive.
    """

    name: str
    version: str
    pretty_version: str
    target_dir: Path
    installation_source: str
    dist_type: Literal["zip", "tar"]
    dist_url: str

    def __post_init__(self) -> None:
        """Validate descriptor configuration."""
        if not self.dist_url:
            raise ElectronInstallerError("dist_url cannot be empty")

    @classmethod
    def for_archive(
        cls,
        name: str,
        version: str,
        target_dir: Path,
        url: str,
    ) -> PackageDescriptor:
        """Create a descriptor for a distribution archive URL.

        Args:
            name: Package name.
            version: Requested version string.
            target_dir: Directory the archive is extracted into.
            url: Archive URL; '.zip' selects zip, anything else tar.

        Returns:
            PackageDescriptor with dist_type derived from the URL.
        """
        dist_type: Literal["zip", "tar"] = (
            "zip" if url.lower().endswith(".zip") else "tar"
        )
        return cls(
            name=name,
            version=ElectronVersion.from_string(version).normalized(),
            pretty_version=version,
            target_dir=target_dir,
            installation_source="dist",
            dist_type=dist_type,
            dist_url=url,
        )

