"""Settings reader for the Django Electron installer adapter."""

from __future__ import annotations

from typing import Any

from electron_installer.domain.exceptions import ElectronInstallerError
from electron_installer.domain.settings import (
    EXTRA_BINDING_FILE,
    EXTRA_CDNURL,
    EXTRA_PLACEMENT,
    EXTRA_VERSION,
)

SETTINGS_NAME = "ELECTRON_INSTALLER"

# Keys of the extra block that only the host reads
EXTRA_BIN_DIR = "bin-dir"
EXTRA_VENDOR_DIR = "vendor-dir"
EXTRA_ALIASES = "aliases"

# Required fields that must be present in Django settings
_REQUIRED_FIELDS = ("BIN_DIR", "VENDOR_DIR")

# Map UPPER_CASE Django keys to the lowercase extra block keys
_FIELD_MAPPING = {
    "BIN_DIR": EXTRA_BIN_DIR,
    "VENDOR_DIR": EXTRA_VENDOR_DIR,
    "VERSION": EXTRA_VERSION,
    "CDNURL": EXTRA_CDNURL,
    "PLACEMENT": EXTRA_PLACEMENT,
    "BINDING_FILE": EXTRA_BINDING_FILE,
}


def get_installer_config(django_settings: dict[str, Any]) -> dict[str, Any]:
    """Convert the Django ELECTRON_INSTALLER dict to the plugin's extra block.

    Example:

        ELECTRON_INSTALLER = {
            "BIN_DIR": BASE_DIR / "bin",
            "VENDOR_DIR": BASE_DIR / "vendor",
            "PLACEMENT": "copy",
            "ALIASES": {"uuf6429/electron-installer": "1.4.15"},
        }

    Args:
        django_settings: Django settings dict with UPPER_CASE keys

    Returns:
        Extra block with lowercase keys, as read by InstallerSettings.from_sources

    Raises:
        ElectronInstallerError: If required settings are missing, unknown
            keys are present, or a value has the wrong type
    """
    if django_settings is None:
        raise ElectronInstallerError(f"{SETTINGS_NAME} settings not found")

    if not isinstance(django_settings, dict):
        raise ElectronInstallerError(
            f"{SETTINGS_NAME} must be a dict, got: {type(django_settings).__name__}"
        )

    missing = [key for key in _REQUIRED_FIELDS if key not in django_settings]
    if missing:
        raise ElectronInstallerError(
            f"Missing required {SETTINGS_NAME} settings: {', '.join(sorted(missing))}"
        )

    unknown = set(django_settings) - set(_FIELD_MAPPING) - {"ALIASES"}
    if unknown:
        raise ElectronInstallerError(
            f"Unknown {SETTINGS_NAME} settings: {', '.join(sorted(unknown))}"
        )

    config: dict[str, Any] = {}
    for django_key, extra_key in _FIELD_MAPPING.items():
        value = django_settings.get(django_key)
        if value is not None:
            config[extra_key] = str(value)

    aliases = django_settings.get("ALIASES", {})
    if not isinstance(aliases, dict):
        raise ElectronInstallerError(
            f"{SETTINGS_NAME}['ALIASES'] must map package names to versions"
        )
    config[EXTRA_ALIASES] = [
        {"package": str(package), "alias": str(alias)}
        for package, alias in aliases.items()
    ]

    return config
