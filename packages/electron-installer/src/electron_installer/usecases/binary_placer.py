"""Binary placer use case: expose the staged Electron binary in the bin directory."""

from __future__ import annotations

import os
import shutil
import uuid
from pathlib import Path
from typing import TYPE_CHECKING

from electron_installer.domain.exceptions import (
    BinaryNotFoundError,
    InstallDirectoryError,
)

if TYPE_CHECKING:
    from electron_installer.adapters.ports import LoggingPort
    from electron_installer.domain.binary import Platform
    from electron_installer.domain.settings import PlacementStrategy

# Executable inside a macOS app bundle
APP_BUNDLE_EXECUTABLE = Path("Contents") / "MacOS" / "Electron"


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


class BinaryPlacer:
    """Places the Electron binary from the staging directory into bin_dir.

    The target is always swapped in with os.replace from a temporary
    sibling, so a concurrent reader sees either the old or the new entry.
    """

    def __init__(self, logger: LoggingPort) -> None:
        self._logger = logger

    def place(
        self,
        staging_dir: Path,
        platform: Platform,
        bin_dir: Path,
        strategy: PlacementStrategy,
    ) -> Path:
        """Copy or symlink the staged binary into bin_dir.

        Args:
            staging_dir: Directory the archive was extracted into.
            platform: Platform the archive was built for.
            bin_dir: Project executable directory.
            strategy: 'copy' or 'symlink'.

        Returns:
            Path of the placed binary.

        Raises:
            BinaryNotFoundError: If the staged binary does not exist.
            InstallDirectoryError: If bin_dir cannot be created.
        """
        source = staging_dir / platform.staged_binary_name
        if not (source.exists() or source.is_symlink()):
            raise BinaryNotFoundError(f"Electron binary not found at {source}")

        try:
            bin_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise InstallDirectoryError(f"Can not create directory {bin_dir}: {e}") from e

        self._make_executable(source)

        target = bin_dir / platform.executable_name
        temporary = target.with_name(f".{target.name}.{uuid.uuid4().hex}.tmp")

        try:
            if strategy == "copy":
                self._copy(source, temporary)
                self._make_executable(temporary)
            else:
                temporary.symlink_to(source.resolve(), target_is_directory=source.is_dir())

            # os.replace can not overwrite a directory
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            os.replace(temporary, target)
        finally:
            if temporary.exists() or temporary.is_symlink():
                _remove(temporary)

        self._logger.info(f"Electron binary placed at {target} ({strategy})")
        return target

    def _copy(self, source: Path, destination: Path) -> None:
        if source.is_dir():
            shutil.copytree(source, destination, symlinks=True)
        else:
            shutil.copy2(source, destination)

    def _make_executable(self, path: Path) -> None:
        mode = 0o777 & ~_current_umask()
        candidates = [path]
        if path.is_dir():
            candidates.append(path / APP_BUNDLE_EXECUTABLE)

        for candidate in candidates:
            try:
                candidate.chmod(mode)
            except OSError:
                # Best-effort: some filesystems reject chmod
                continue
