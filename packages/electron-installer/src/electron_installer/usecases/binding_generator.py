"""Binding generator use case: write the binary location for consuming code."""

from __future__ import annotations

import os
import uuid
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from electron_installer.domain.exceptions import BindingFileError

if TYPE_CHECKING:
    from electron_installer.domain.binding import ElectronBinary

BINDING_HEADER = (
    "# Generated by electron-installer. Do not edit.\n"
    "# Load with electron_installer.ElectronBinary.load().\n"
)


class BindingGenerator:
    """Generates the YAML binding file from an ElectronBinary."""

    def render(self, binary: ElectronBinary) -> str:
        """Render the binding file contents.

        Args:
            binary: Installed binary to describe.

        Returns:
            YAML string, identical for identical input
        """
        body = yaml.safe_dump(binary.to_dict(), default_flow_style=False, sort_keys=True)
        return BINDING_HEADER + body

    def write(self, binding_path: Path, binary: ElectronBinary) -> Path:
        """Write the binding file atomically.

        Args:
            binding_path: Destination of the binding file.
            binary: Installed binary to describe.

        Returns:
            The binding path.

        Raises:
            BindingFileError: If the file can not be written.
        """
        temporary = binding_path.with_name(f".{binding_path.name}.{uuid.uuid4().hex}.tmp")
        try:
            binding_path.parent.mkdir(parents=True, exist_ok=True)
            temporary.write_text(self.render(binary), encoding="utf-8")
            os.replace(temporary, binding_path)
        except OSError as e:
            if temporary.exists():
                temporary.unlink()
            raise BindingFileError(f"Can not write binding file {binding_path}: {e}") from e
        return binding_path
