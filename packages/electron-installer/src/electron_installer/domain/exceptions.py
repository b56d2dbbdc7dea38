"""Domain exceptions.

Exception hierarchy:
- ElectronInstallerError: Base exception for every error raised by the package.
  - InvalidVersionError: A version string cannot be parsed.
  - VersionResolutionError: No Electron version could be determined.
  - UnsupportedPlatformError: OS or architecture is not supported.
  - TransportError: A downloader adapter failed to fetch a resource.
  - BinaryDownloadError: The download ladder ended without a binary.
  - BinaryNotFoundError: The staged binary is missing after download.
  - InstallDirectoryError: The bin directory cannot be created.
  - BinaryExecutionError: The installed binary could not be queried.
  - BindingFileError: The binding file is unreadable or malformed.
"""

from __future__ import annotations


class ElectronInstallerError(Exception):
    """Raised when the Electron installation cannot proceed.

    This is the base exception for all errors raised by the installer.
    Host adapters (Django commands, the pyproject hook) may catch it and
    re-raise as host-specific errors, but the core always uses it.
    """

    pass


class InvalidVersionError(ElectronInstallerError):
    """Raised when a version string is not a dotted numeric version."""

    pass


class VersionResolutionError(ElectronInstallerError):
    """Raised when no Electron version can be determined.

    Attributes:
        package_name: The package whose version could not be determined.
    """

    def __init__(self, package_name: str) -> None:
        super().__init__(f"Can not determine required version of {package_name}")
        self.package_name = package_name


class UnsupportedPlatformError(ElectronInstallerError):
    """Raised when no Electron build exists for the current OS or architecture."""

    pass


class TransportError(ElectronInstallerError):
    """Raised by downloader adapters when a resource cannot be fetched.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed (optional).
        status_code: HTTP status code, or None for network failures.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        """Return True if the server answered 404 Not Found."""
        return self.status_code == 404


class BinaryDownloadError(ElectronInstallerError):
    """Raised when the Electron archive could not be downloaded.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to download (optional).
        status_code: HTTP status code of the last attempt (optional).
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code
        self.original_error = original_error


class BinaryNotFoundError(ElectronInstallerError):
    """Raised when the expected binary is missing from the staging directory."""

    pass


class InstallDirectoryError(ElectronInstallerError):
    """Raised when the target bin directory cannot be created."""

    pass


class BinaryExecutionError(ElectronInstallerError):
    """Raised when the installed binary fails to report its version."""

    pass


class BindingFileError(ElectronInstallerError):
    """Raised when a binding file exists but cannot be read back."""

    pass
