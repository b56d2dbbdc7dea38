"""Domain layer: Entities with zero framework dependencies."""

from electron_installer.domain.binary import PackageDescriptor, Platform
from electron_installer.domain.binding import ElectronBinary
from electron_installer.domain.exceptions import ElectronInstallerError
from electron_installer.domain.settings import InstallerSettings
from electron_installer.domain.version import ElectronVersion

__all__ = [
    "PackageDescriptor",
    "Platform",
    "ElectronBinary",
    "ElectronInstallerError",
    "InstallerSettings",
    "ElectronVersion",
]
