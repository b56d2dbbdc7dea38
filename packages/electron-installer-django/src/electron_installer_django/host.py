"""Django implementation of the HostContextPort."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from django.conf import settings as django_settings

from electron_installer.adapters.pyproject_host import installed_version
from electron_installer.domain.settings import (
    ENV_ARCHITECTURE,
    ENV_CDNURL,
    ENV_PLATFORM,
    ENV_VERSION,
)
from electron_installer_django.settings import (
    EXTRA_ALIASES,
    EXTRA_BIN_DIR,
    EXTRA_VENDOR_DIR,
    SETTINGS_NAME,
    get_installer_config,
)

_SERVER_VAR_NAMES = (ENV_VERSION, ENV_PLATFORM, ENV_ARCHITECTURE, ENV_CDNURL)


class DjangoHostContext:
    """Host context backed by Django settings.

    The project root is BASE_DIR (or the working directory when BASE_DIR
    is not set). Relative BIN_DIR and VENDOR_DIR are resolved against it.
    Top-level settings named like the environment variables
    (ELECTRON_VERSION, ELECTRON_CDNURL, ...) act as server variables.
    """

    def __init__(self, settings: Any = None) -> None:
        """Read the ELECTRON_INSTALLER settings.

        Args:
            settings: Settings object; defaults to django.conf.settings.

        Raises:
            ElectronInstallerError: If ELECTRON_INSTALLER is missing or invalid.
        """
        self._settings = settings if settings is not None else django_settings
        self._extra = get_installer_config(getattr(self._settings, SETTINGS_NAME, None))
        base_dir = getattr(self._settings, "BASE_DIR", None)
        self._project_root = Path(base_dir) if base_dir else Path.cwd()

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def bin_dir(self) -> Path:
        return self._project_root / self._extra[EXTRA_BIN_DIR]

    @property
    def vendor_dir(self) -> Path:
        return self._project_root / self._extra[EXTRA_VENDOR_DIR]

    def extra(self) -> Mapping[str, Any]:
        return self._extra

    def server_vars(self) -> Mapping[str, Any]:
        return {
            name: getattr(self._settings, name)
            for name in _SERVER_VAR_NAMES
            if getattr(self._settings, name, None) is not None
        }

    def aliases(self) -> list[Mapping[str, str]]:
        return list(self._extra[EXTRA_ALIASES])

    def locked_version(self, package_name: str) -> str | None:
        return installed_version(package_name)

    def required_constraint(self, package_name: str) -> str | None:
        # Django settings do not declare package requirements
        return None
