"""CDN URL builder use case."""

from __future__ import annotations

from typing import TYPE_CHECKING

from electron_installer.domain.exceptions import UnsupportedPlatformError

if TYPE_CHECKING:
    from electron_installer.adapters.ports import PlatformDetectorPort
    from electron_installer.domain.settings import InstallerSettings

ELECTRON_CDNURL_DEFAULT = "https://github.com/electron/electron/"

# A base URL ending with this is the project page, not a release
_GITHUB_PROJECT_SUFFIX = "github.com/electron/electron/"

ARCHIVE_FILENAME = "electron-v{version}-{os}-{arch}.zip"


class CdnUrlBuilder:
    """Builds download URLs for Electron archives."""

    def __init__(
        self,
        settings: InstallerSettings,
        platform_detector: PlatformDetectorPort,
    ) -> None:
        self._settings = settings
        self._platform_detector = platform_detector

    def base_url(self, version: str) -> str:
        """Return the base URL for downloads.

        Uses settings.cdn_url (environment, then server variable, then the
        extra block) or the GitHub project. The URL always ends with a
        single '/'. The bare GitHub project URL gets the release path for
        version appended; a URL that already names a release is kept as is.

        Args:
            version: Version being downloaded.

        Returns:
            Base URL ending with '/'.
        """
        url = self._settings.cdn_url or ELECTRON_CDNURL_DEFAULT

        if not url.endswith("/"):
            url += "/"

        if url.lower()[-len(_GITHUB_PROJECT_SUFFIX) :] == _GITHUB_PROJECT_SUFFIX:
            url += f"releases/download/v{version}/"

        return url

    def artifact_url(self, version: str) -> str:
        """Return the URL of the Electron archive for the current platform.

        Raises:
            UnsupportedPlatformError: If the OS or architecture is unsupported.
        """
        os_name = self._platform_detector.detect_os()
        arch_name = self._platform_detector.detect_arch()
        if os_name is None or arch_name is None:
            raise UnsupportedPlatformError(
                "The installer could not select an Electron package for this OS. "
                "Please install Electron manually into the bin folder of your project."
            )

        filename = ARCHIVE_FILENAME.format(version=version, os=os_name, arch=arch_name)
        return self.base_url(version) + filename
