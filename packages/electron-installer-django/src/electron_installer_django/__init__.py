"""Django adapter for the Electron installer."""

from electron_installer_django.binding import get_electron_binary
from electron_installer_django.host import DjangoHostContext
from electron_installer_django.settings import get_installer_config

__version__ = "1.6.2"

__all__ = [
    "DjangoHostContext",
    "get_electron_binary",
    "get_installer_config",
]
