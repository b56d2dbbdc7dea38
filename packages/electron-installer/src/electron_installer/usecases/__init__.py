"""Use cases: Application logic layer."""

from electron_installer.usecases.version_resolver import (
    KnownVersionsCache,
    VersionResolver,
)
from electron_installer.usecases.cdn_url_builder import CdnUrlBuilder
from electron_installer.usecases.electron_downloader import (
    DownloadResult,
    ElectronDownloader,
)
from electron_installer.usecases.binary_placer import BinaryPlacer
from electron_installer.usecases.installation_checker import (
    InstallationChecker,
    InstallationCheckResult,
    InstallationStatus,
)
from electron_installer.usecases.binding_generator import BindingGenerator
from electron_installer.usecases.electron_installer import (
    ElectronInstaller,
    InstallResult,
    InstallStatus,
)

__all__ = [
    "KnownVersionsCache",
    "VersionResolver",
    "CdnUrlBuilder",
    "DownloadResult",
    "ElectronDownloader",
    "BinaryPlacer",
    "InstallationChecker",
    "InstallationCheckResult",
    "InstallationStatus",
    "BindingGenerator",
    "ElectronInstaller",
    "InstallResult",
    "InstallStatus",
]
