"""Binding value object exposing the installed Electron binary to consuming code.

Usage:

    from electron_installer import ElectronBinary

    binary = ElectronBinary.load(Path("vendor/electron-installer/electron-binary.yaml"))
    if binary is not None:
        subprocess.run([binary.bin, "app/"])
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from electron_installer.domain.exceptions import BindingFileError

_REQUIRED_KEYS = ("bin", "dir", "version")


@dataclass(frozen=True)
class ElectronBinary:
    """Location and version of an installed Electron binary.

    Attributes:
        bin: Absolute path to the binary.
        dir: Directory containing the binary.
        version: Installed Electron version.
    """

    bin: str
    dir: str
    version: str

    @classmethod
    def from_path(cls, binary_path: Path, version: str) -> ElectronBinary:
        """Create a binding for a binary path.

        Args:
            binary_path: Path to the installed binary.
            version: Version of the installed binary.

        Returns:
            ElectronBinary whose dir is the binary's parent directory.
        """
        return cls(bin=str(binary_path), dir=str(binary_path.parent), version=version)

    def to_dict(self) -> dict[str, str]:
        """Return the binding as a plain mapping."""
        return {"bin": self.bin, "dir": self.dir, "version": self.version}

    @classmethod
    def from_dict(cls, data: Any) -> ElectronBinary:
        """Create a binding from a parsed mapping.

        Raises:
            BindingFileError: If the mapping is missing keys or has wrong types.
        """
        if not isinstance(data, dict):
            raise BindingFileError(f"Binding must be a mapping, got: {type(data).__name__}")

        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise BindingFileError(f"Binding is missing keys: {', '.join(missing)}")

        return cls(
            bin=str(data["bin"]),
            dir=str(data["dir"]),
            version=str(data["version"]),
        )

    @classmethod
    def load(cls, binding_path: Path) -> ElectronBinary | None:
        """Read a binding file back.

        Args:
            binding_path: Path to the binding file.

        Returns:
            ElectronBinary, or None if the file does not exist.

        Raises:
            BindingFileError: If the file exists but is not a valid binding.
        """
        if not binding_path.is_file():
            return None

        try:
            data = yaml.safe_load(binding_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise BindingFileError(
                f"Can not read binding file {binding_path}: {e}"
            ) from e

        return cls.from_dict(data)
