"""Pytest configuration for Django unit tests."""

from pathlib import Path
from types import SimpleNamespace

import pytest

from electron_installer.domain.binding import ElectronBinary
from electron_installer.usecases.binding_generator import BindingGenerator


@pytest.fixture
def installer_settings(tmp_path: Path) -> dict:
    """Minimal valid ELECTRON_INSTALLER dict rooted at tmp_path."""
    return {"BIN_DIR": "bin", "VENDOR_DIR": "vendor"}


@pytest.fixture
def settings_object(tmp_path: Path, installer_settings: dict) -> SimpleNamespace:
    """Stand-in for django.conf.settings with BASE_DIR set to tmp_path."""
    return SimpleNamespace(BASE_DIR=tmp_path, ELECTRON_INSTALLER=installer_settings)


@pytest.fixture
def installed_binary(tmp_path: Path) -> ElectronBinary:
    """Write an Electron binary and its binding file under tmp_path.

    Returns:
        The ElectronBinary recorded in vendor/electron-installer/electron-binary.yaml.
    """
    binary_path = tmp_path / "bin" / "electron"
    binary_path.parent.mkdir(parents=True)
    binary_path.write_bytes(b"binary")
    binary = ElectronBinary.from_path(binary_path, "1.6.2")
    BindingGenerator().write(
        tmp_path / "vendor" / "electron-installer" / "electron-binary.yaml", binary
    )
    return binary
