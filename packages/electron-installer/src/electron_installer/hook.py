"""Post-install entry point for projects configured through pyproject.toml.

Call from a build or setup script after dependencies are installed:

    from electron_installer.hook import install_electron

    install_electron()

or run ``python -m electron_installer [project_root]``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from electron_installer.adapters.pyproject_host import PyprojectHostContext
from electron_installer.factories import create_http_client, create_installer
from electron_installer.usecases.electron_installer import InstallResult

logger = logging.getLogger(__name__)


def install_electron(project_root: str | Path = ".", force: bool = False) -> InstallResult:
    """Install Electron into the project at project_root.

    Args:
        project_root: Directory containing pyproject.toml.
        force: Reinstall even if the installed binary is current.

    Returns:
        InstallResult of the run.

    Raises:
        ElectronInstallerError: If the installation fails.
    """
    host = PyprojectHostContext(Path(project_root))
    logger.debug(f"Installing Electron for project at {host.project_root}")
    with create_http_client() as client:
        return create_installer(host, client, force=force)()
