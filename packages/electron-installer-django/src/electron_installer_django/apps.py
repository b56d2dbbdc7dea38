"""Django app configuration for the Electron installer."""

import logging
from typing import Callable

from django.apps import AppConfig
from django.conf import settings as django_settings

from electron_installer.domain.binding import ElectronBinary
from electron_installer.domain.exceptions import ElectronInstallerError
from electron_installer_django.binding import get_electron_binary
from electron_installer_django.settings import SETTINGS_NAME

logger = logging.getLogger(__name__)


class ElectronInstallerConfig(AppConfig):
    """Django app configuration for the Electron installer adapter."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "electron_installer_django"
    verbose_name = "Electron Installer"

    # Dependency injection factory (can be overridden for testing)
    binary_loader: Callable[[], "ElectronBinary | None"] = staticmethod(get_electron_binary)

    def ready(self) -> None:
        """Report on startup whether the Electron binary is installed.

        Never raises: a missing binary must not stop the project from starting.
        """
        if getattr(django_settings, SETTINGS_NAME, None) is None:
            logger.warning(
                f"{SETTINGS_NAME} settings not found. "
                "Electron installer adapter may not work correctly."
            )
            return

        try:
            binary = self.binary_loader()
        except ElectronInstallerError as e:
            logger.warning(f"Electron installer configuration is invalid: {e}")
            return

        if binary is None:
            logger.warning(
                "Electron is not installed. Run 'manage.py electron_install'."
            )
            return

        logger.info(f"Electron {binary.version} available at {binary.bin}")
