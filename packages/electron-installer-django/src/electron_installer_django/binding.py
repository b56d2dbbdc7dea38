"""Access to the installed Electron binary from Django code."""

from __future__ import annotations

import os
from typing import Any

from electron_installer.domain.binding import ElectronBinary
from electron_installer.factories import resolve_settings
from electron_installer_django.host import DjangoHostContext


def get_electron_binary(settings: Any = None) -> ElectronBinary | None:
    """Return the installed Electron binary, or None if it is not installed.

    Example:
        >>> binary = get_electron_binary()
        >>> subprocess.run([binary.bin, "app/"])

    Raises:
        ElectronInstallerError: If the settings or the binding file are invalid.
    """
    host = DjangoHostContext(settings)
    installer_settings = resolve_settings(host, os.environ)
    return ElectronBinary.load(installer_settings.binding_file)
