"""Electron downloader use case: download with a lower-version retry ladder."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from electron_installer.domain.binary import PackageDescriptor
from electron_installer.domain.exceptions import TransportError

if TYPE_CHECKING:
    from electron_installer.adapters.ports import LoggingPort, PackageDownloaderPort
    from electron_installer.usecases.cdn_url_builder import CdnUrlBuilder
    from electron_installer.usecases.version_resolver import VersionResolver

ELECTRON_PACKAGE_NAME = "Electron"


@dataclass(frozen=True)
class DownloadResult:
    """Result of a download operation.

    Immutable value object containing the outcome of the retry ladder.

    Attributes:
        success: True if an archive was downloaded and extracted.
        version: The version actually downloaded (success), or the
            version of the last attempt (failure).
        url: URL of the last attempt, if one was made.
        status_code: HTTP status of the failed attempt, if any.
        error: Error message if the download failed, None otherwise.
    """

    success: bool
    version: str
    url: str | None
    status_code: int | None
    error: str | None

    @classmethod
    def create_success(cls, version: str, url: str) -> DownloadResult:
        """Create a success result.

        Args:
            version: The version that was downloaded.
            url: The URL it was downloaded from.

        Returns:
            DownloadResult indicating success.
        """
        return cls(success=True, version=version, url=url, status_code=None, error=None)

    @classmethod
    def create_failure(
        cls,
        version: str,
        error: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> DownloadResult:
        """Create a failure result with error message.

        Args:
            version: Version of the last attempt.
            error: Description of the error that occurred.
            url: URL of the last attempt.
            status_code: HTTP status code of the last attempt.

        Returns:
            DownloadResult indicating failure.
        """
        return cls(
            success=False,
            version=version,
            url=url,
            status_code=status_code,
            error=error,
        )


class ElectronDownloader:
    """Orchestrates the Electron archive download.

    Each attempt builds a fresh PackageDescriptor and hands it to the
    downloader port. A 404 means the CDN has no build for that version,
    so the next lower known version is tried. Any other failure ends the
    ladder. Attempts are bounded by the number of known versions.
    """

    def __init__(
        self,
        port: PackageDownloaderPort,
        resolver: VersionResolver,
        url_builder: CdnUrlBuilder,
        logger: LoggingPort,
    ) -> None:
        """Initialize the Electron downloader.

        Args:
            port: PackageDownloaderPort implementation for the actual transfer.
            resolver: Version resolver providing the retry ladder.
            url_builder: Builds the archive URL per version.
            logger: Log sink for retry warnings and errors.
        """
        self._port = port
        self._resolver = resolver
        self._url_builder = url_builder
        self._logger = logger

    def create_descriptor(self, target_dir: Path, version: str) -> PackageDescriptor:
        """Build the in-memory package descriptor for one attempt.

        Raises:
            UnsupportedPlatformError: If no archive exists for this platform.
        """
        url = self._url_builder.artifact_url(version)
        return PackageDescriptor.for_archive(
            name=ELECTRON_PACKAGE_NAME,
            version=version,
            target_dir=target_dir,
            url=url,
        )

    def download(self, target_dir: Path, version: str) -> DownloadResult:
        """Download Electron into target_dir, stepping down on 404.

        Args:
            target_dir: Staging directory for the extracted archive.
            version: Version to try first.

        Returns:
            DownloadResult with the version actually downloaded on success,
            or the error of the attempt that ended the ladder.

        Raises:
            UnsupportedPlatformError: If no archive exists for this platform.
        """
        # One rung per known version plus the requested one
        attempts = len(self._resolver.known_versions()) + 1
        tried: list[str] = []

        while attempts:
            attempts -= 1
            tried.append(version)
            descriptor = self.create_descriptor(target_dir, version)

            try:
                self._port.download(descriptor, target_dir)
                return DownloadResult.create_success(version, descriptor.dist_url)
            except TransportError as e:
                if not e.is_not_found:
                    self._logger.error(
                        f'TransportError: "{e.message}". HTTP status code: {e.status_code}'
                    )
                    return DownloadResult.create_failure(
                        version, e.message, descriptor.dist_url, e.status_code
                    )

                lower = self._resolver.lower_version(version)
                if lower is None:
                    message = (
                        f"Electron {version} was not found at {descriptor.dist_url} "
                        "and no lower version is known"
                    )
                    self._logger.error(message)
                    return DownloadResult.create_failure(
                        version, message, descriptor.dist_url, e.status_code
                    )

                self._logger.warning(
                    f'Retrying the download with a lower version number: "{lower}"'
                )
                version = lower
            except Exception as e:
                message = f"While downloading version {version} the following error occurred: {e}"
                self._logger.error(message)
                return DownloadResult.create_failure(version, message, descriptor.dist_url)

        return DownloadResult.create_failure(
            tried[-1],
            f"Gave up downloading Electron after {len(tried)} attempts; "
            f"last version tried: {tried[-1]}",
        )
