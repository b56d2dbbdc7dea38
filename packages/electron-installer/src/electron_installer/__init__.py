"""electron-installer: install a platform-specific Electron binary into a project."""

__version__ = "1.6.2"

from electron_installer.domain.binding import ElectronBinary
from electron_installer.domain.exceptions import ElectronInstallerError
from electron_installer.domain.settings import InstallerSettings
from electron_installer.factories import create_installer
from electron_installer.hook import install_electron

__all__ = [
    "ElectronBinary",
    "ElectronInstallerError",
    "InstallerSettings",
    "create_installer",
    "install_electron",
]
