"""HTTPX-based implementation of the PackageDownloaderPort.

This adapter uses httpx to fetch an Electron archive and extracts it
into the staging directory.
"""

from __future__ import annotations

import os
import shutil
import stat
import tarfile
import tempfile
import zipfile
from pathlib import Path

import httpx

from electron_installer.adapters.ports import PackageDownloaderPort
from electron_installer.domain.binary import PackageDescriptor
from electron_installer.domain.exceptions import TransportError

_CHUNK_SIZE = 1024 * 1024


class HttpxPackageDownloader:
    """HTTPX-based adapter for downloading Electron archives.

    The archive is streamed to a temporary file and extracted into a
    temporary directory next to target_dir. Only after extraction
    succeeds is the old target_dir replaced, so a failed attempt leaves
    the filesystem as it was.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        """Initialize the HTTPX package downloader.

        Args:
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
        """
        self._client = client

    def download(self, descriptor: PackageDescriptor, target_dir: Path) -> None:
        """Download and extract an archive into target_dir.

        Args:
            descriptor: Package to download; dist_url and dist_type are used.
            target_dir: Directory to extract into. Replaced on success.

        Raises:
            TransportError: For network failures (status_code=None) and
                HTTP errors (status_code set, 404 for a missing version).
            OSError: For filesystem errors while staging.
        """
        url = descriptor.dist_url
        target_dir.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.TemporaryDirectory(
            prefix=".electron-download-", dir=target_dir.parent
        ) as tmp:
            archive_path = Path(tmp) / f"archive.{descriptor.dist_type}"
            try:
                if self._client is not None:
                    self._fetch(self._client, url, archive_path)
                else:
                    with httpx.Client(follow_redirects=True) as client:
                        self._fetch(client, url, archive_path)
            except httpx.HTTPStatusError as e:
                raise TransportError(
                    f"Download of {url} failed: {e}",
                    url=url,
                    status_code=e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                raise TransportError(f"Download of {url} failed: {e}", url=url) from e

            extract_dir = Path(tmp) / "extracted"
            self._extract(archive_path, descriptor.dist_type, extract_dir)

            if target_dir.exists():
                shutil.rmtree(target_dir)
            shutil.move(str(extract_dir), str(target_dir))

    def _fetch(self, client: httpx.Client, url: str, destination: Path) -> None:
        with client.stream("GET", url, follow_redirects=True) as response:
            response.raise_for_status()
            with destination.open("wb") as fh:
                for chunk in response.iter_bytes(_CHUNK_SIZE):
                    fh.write(chunk)

    def _extract(self, archive_path: Path, dist_type: str, destination: Path) -> None:
        destination.mkdir(parents=True)
        try:
            if dist_type == "zip":
                with zipfile.ZipFile(archive_path) as zf:
                    _extract_zip(zf, destination)
            else:
                with tarfile.open(archive_path) as tar:
                    tar.extractall(destination, filter="data")
        except (zipfile.BadZipFile, tarfile.TarError) as e:
            raise TransportError(
                f"Downloaded archive is corrupt: {e}", url=str(archive_path)
            ) from e


def _is_within(root: str, path: str) -> bool:
    return os.path.commonpath([root, os.path.normpath(path)]) == root


def _extract_zip(zf: zipfile.ZipFile, destination: Path) -> None:
    """Extract a zip archive, keeping Unix permission bits and symlinks.

    Raises:
        TransportError: If a member or a link target escapes destination.
    """
    root = os.path.normpath(os.path.abspath(destination))
    for info in zf.infolist():
        target = os.path.join(root, info.filename)
        if os.path.isabs(info.filename) or not _is_within(root, target):
            raise TransportError(f"Archive member escapes the staging directory: {info.filename}")

        mode = info.external_attr >> 16
        if stat.S_ISLNK(mode):
            link = zf.read(info).decode("utf-8")
            if os.path.isabs(link) or not _is_within(
                root, os.path.join(os.path.dirname(target), link)
            ):
                raise TransportError(
                    f"Archive link escapes the staging directory: {info.filename} -> {link}"
                )
            os.makedirs(os.path.dirname(target), exist_ok=True)
            os.symlink(link, target)
            continue

        extracted = zf.extract(info, root)
        if not info.is_dir() and mode & 0o777:
            os.chmod(extracted, mode & 0o777)


# Runtime protocol check
assert isinstance(HttpxPackageDownloader(), PackageDownloaderPort)
