"""Fake package downloader for testing.

Provides a test double for PackageDownloaderPort with scripted per-URL
outcomes and no network operations.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from electron_installer.domain.exceptions import TransportError

if TYPE_CHECKING:
    from electron_installer.domain.binary import PackageDescriptor


class FakePackageDownloader:
    """Fake implementation of PackageDownloaderPort for testing.

    Every URL not configured otherwise succeeds. A URL can be scripted to
    answer with an HTTP status (raising TransportError) or to raise an
    arbitrary exception. On success the fake can populate the target
    directory with files, mimicking an extracted archive.

    Example:
        >>> fake = FakePackageDownloader()
        >>> fake.set_status("https://cdn/electron-v2.0.0-linux-x64.zip", 404)
        >>> fake.urls
        []
    """

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        """Initialize the fake.

        Args:
            files: Relative paths and contents written into target_dir on
                every successful download.
        """
        self._files = dict(files or {})
        self._statuses: dict[str, int] = {}
        self._exceptions: dict[str, BaseException] = {}
        self._default_status: int | None = None
        self._calls: list[tuple[PackageDescriptor, Path]] = []

    @property
    def calls(self) -> list[tuple[PackageDescriptor, Path]]:
        """Return the (descriptor, target_dir) pairs of every download() call."""
        return self._calls

    @property
    def urls(self) -> list[str]:
        """Return the URLs requested, in order."""
        return [descriptor.dist_url for descriptor, _ in self._calls]

    def set_status(self, url: str, status_code: int) -> None:
        """Make a URL fail with an HTTP status code."""
        self._statuses[url] = status_code

    def set_default_status(self, status_code: int | None) -> None:
        """Make every URL without a scripted outcome fail with status_code."""
        self._default_status = status_code

    def set_exception(self, url: str, exception: BaseException) -> None:
        """Make a URL raise an exception."""
        self._exceptions[url] = exception

    def clear_calls(self) -> None:
        """Clear the recorded calls list."""
        self._calls.clear()

    def download(self, descriptor: PackageDescriptor, target_dir: Path) -> None:
        """Record the call, then fail as scripted or populate target_dir.

        Raises:
            TransportError: If the URL is scripted with a status code.
            Any exception configured via set_exception().
        """
        url = descriptor.dist_url
        self._calls.append((descriptor, target_dir))

        if url in self._exceptions:
            raise self._exceptions[url]

        status_code = self._statuses.get(url, self._default_status)
        if status_code is not None:
            raise TransportError(
                f"HTTP {status_code} for {url}", url=url, status_code=status_code
            )

        target_dir.mkdir(parents=True, exist_ok=True)
        for relative, content in self._files.items():
            path = target_dir / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
