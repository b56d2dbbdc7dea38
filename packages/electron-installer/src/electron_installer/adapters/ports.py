"""Port interfaces for the Electron installer core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from electron_installer.domain.binary import PackageDescriptor, Platform


@runtime_checkable
class HostContextPort(Protocol):
    """Port interface for the host that triggers the installation.

    The host plays the role of a package manager: it knows the project
    layout, the project's declared configuration and its lock data.

    Contract:
        - project_root, bin_dir and vendor_dir are absolute paths
        - extra() returns the metadata block keyed by this plugin (may be empty)
        - server_vars() returns server context variables (may be empty)
        - aliases() returns lock aliases as {"package": ..., "alias": ...} mappings
        - locked_version() and required_constraint() return None when unknown
    """

    @property
    def project_root(self) -> Path:
        """Root directory of the host project."""
        ...

    @property
    def bin_dir(self) -> Path:
        """Directory executables are placed into."""
        ...

    @property
    def vendor_dir(self) -> Path:
        """Directory holding downloaded packages."""
        ...

    def extra(self) -> Mapping[str, Any]:
        """Return the project's extra metadata block for this plugin."""
        ...

    def server_vars(self) -> Mapping[str, Any]:
        """Return server context variables."""
        ...

    def aliases(self) -> list[Mapping[str, str]]:
        """Return version aliases recorded in the host's lock data."""
        ...

    def locked_version(self, package_name: str) -> str | None:
        """Return the pretty version the host installed for a package.

        Args:
            package_name: Package to look up.

        Returns:
            Pretty version string, or None if the package is not installed.
        """
        ...

    def required_constraint(self, package_name: str) -> str | None:
        """Return the version constraint the project declares for a package.

        Args:
            package_name: Package to look up.

        Returns:
            Constraint string (e.g. '^1.4.15'), or None if not declared.
        """
        ...


@runtime_checkable
class PackageDownloaderPort(Protocol):
    """Port interface for downloading and extracting a package archive.

    Contract:
        - download() fetches descriptor.dist_url and extracts it into target_dir
        - Raises TransportError with status_code for HTTP failures
          (404 signals a missing version)
        - Raises TransportError with status_code=None for network failures
        - target_dir is left untouched unless the download succeeds
    """

    def download(self, descriptor: PackageDescriptor, target_dir: Path) -> None:
        """Download and extract a package.

        Args:
            descriptor: Package to download.
            target_dir: Directory to extract the archive into.

        Raises:
            TransportError: If the archive cannot be fetched.
        """
        ...


@runtime_checkable
class ReleaseListingPort(Protocol):
    """Port interface for listing published Electron releases.

    Contract:
        - fetch_tags() returns version strings, in any order, possibly with noise
        - Raises TransportError if the listing cannot be fetched
    """

    def fetch_tags(self) -> list[str]:
        """Fetch the published release versions.

        Returns:
            Version strings without the 'v' prefix.
        """
        ...


@runtime_checkable
class BinaryExecutorPort(Protocol):
    """Port interface for querying an installed binary.

    Contract:
        - query_version(path) runs the binary with its version flag
        - Returns the version string with any leading 'v' removed
        - Raises BinaryExecutionError if the binary cannot report a version
    """

    def query_version(self, path: Path) -> str:
        """Return the version reported by the binary at path."""
        ...


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for platform detection.

    Contract:
        - detect_os() and detect_arch() never raise; they return None
          when the host is unsupported
        - detect() raises UnsupportedPlatformError when either part is None
    """

    def detect_os(self) -> str | None:
        """Return 'win32', 'linux', 'darwin', or None."""
        ...

    def detect_arch(self) -> str | None:
        """Return 'ia32', 'x64', or None."""
        ...

    def detect(self) -> Platform:
        """Return the detected Platform."""
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for reporting progress to the host's log sink.

    Contract:
        - info(), warning() and error() are fire-and-forget
        - Implementations may format, filter, or route messages as needed
    """

    def info(self, message: str) -> None:
        """Log an informational message."""
        ...

    def warning(self, message: str) -> None:
        """Log a warning message."""
        ...

    def error(self, message: str) -> None:
        """Log an error message."""
        ...
