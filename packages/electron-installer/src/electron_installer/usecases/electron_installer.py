"""Electron installer use case: the full post-install workflow."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from electron_installer.domain.binding import ElectronBinary
from electron_installer.domain.exceptions import BinaryDownloadError

if TYPE_CHECKING:
    from electron_installer.adapters.ports import (
        HostContextPort,
        LoggingPort,
        PlatformDetectorPort,
    )
    from electron_installer.domain.settings import InstallerSettings
    from electron_installer.usecases.binary_placer import BinaryPlacer
    from electron_installer.usecases.binding_generator import BindingGenerator
    from electron_installer.usecases.electron_downloader import ElectronDownloader
    from electron_installer.usecases.installation_checker import InstallationChecker
    from electron_installer.usecases.version_resolver import VersionResolver


class InstallStatus(Enum):
    """Outcome of an installer run."""

    INSTALLED = "installed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class InstallResult:
    """Result of an installer run.

    Attributes:
        status: INSTALLED or SKIPPED.
        version: Installed version (the one actually downloaded, or the
            one already present when skipped).
        binary_path: Path of the binary in the bin directory.
        binding_path: Path of the binding file.
    """

    status: InstallStatus
    version: str
    binary_path: Path
    binding_path: Path


class ElectronInstaller:
    """Use case that installs Electron into a host project.

    Steps:
    1. Resolve the version to install
    2. Detect the platform
    3. Skip if the installed binary is current (unless forced)
    4. Download, stepping down through lower versions on 404
    5. Place the binary in the bin directory
    6. Write the binding file with the version actually downloaded
    """

    def __init__(
        self,
        host: HostContextPort,
        settings: InstallerSettings,
        resolver: VersionResolver,
        platform_detector: PlatformDetectorPort,
        checker: InstallationChecker,
        downloader: ElectronDownloader,
        placer: BinaryPlacer,
        binding_generator: BindingGenerator,
        logger: LoggingPort,
        force: bool = False,
    ) -> None:
        self._host = host
        self._settings = settings
        self._resolver = resolver
        self._platform_detector = platform_detector
        self._checker = checker
        self._downloader = downloader
        self._placer = placer
        self._binding_generator = binding_generator
        self._logger = logger
        self._force = force

    def __call__(self) -> InstallResult:
        """Run the installation.

        Returns:
            InstallResult describing what was done.

        Raises:
            VersionResolutionError: If no version can be determined.
            UnsupportedPlatformError: If the platform is not supported.
            BinaryDownloadError: If no archive could be downloaded.
            BinaryNotFoundError: If the archive did not contain the binary.
            InstallDirectoryError: If the bin directory can not be created.
        """
        settings = self._settings
        version = self._resolver.resolve(self._host, settings)
        platform = self._platform_detector.detect()

        binary_path = settings.bin_dir / platform.executable_name
        binding_path = settings.binding_file

        if not self._force:
            check = self._checker(binding_path, binary_path, version)
            if not check.should_install:
                self._logger.info(
                    f"Electron {check.installed_version} is already installed at {binary_path}"
                )
                return InstallResult(
                    status=InstallStatus.SKIPPED,
                    version=check.installed_version or version,
                    binary_path=binary_path,
                    binding_path=binding_path,
                )

        self._logger.info(f"Installing Electron {version} for {platform.os}-{platform.arch}")

        result = self._downloader.download(settings.staging_dir, version)
        if not result.success:
            raise BinaryDownloadError(
                result.error or f"Electron {version} could not be downloaded",
                url=result.url,
                status_code=result.status_code,
            )

        placed = self._placer.place(
            settings.staging_dir,
            platform,
            settings.bin_dir,
            settings.placement_for(platform.os),
        )

        binary = ElectronBinary.from_path(placed.absolute(), result.version)
        self._binding_generator.write(binding_path, binary)

        self._logger.info(f"Electron {result.version} installed at {placed}")
        return InstallResult(
            status=InstallStatus.INSTALLED,
            version=result.version,
            binary_path=placed,
            binding_path=binding_path,
        )
