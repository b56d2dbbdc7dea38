"""Django management command to install the Electron binary."""

from __future__ import annotations

import os
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from electron_installer.domain.exceptions import ElectronInstallerError
from electron_installer.domain.settings import ENV_VERSION
from electron_installer.factories import create_http_client, create_installer
from electron_installer.usecases.electron_installer import InstallStatus
from electron_installer_django.adapters import CommandOutputLogger
from electron_installer_django.host import DjangoHostContext


class Command(BaseCommand):
    """Download and install Electron into the project's bin directory."""

    help = "Install the Electron binary for the current platform"

    # Dependency injection factory (can be overridden for testing)
    installer_factory = staticmethod(create_installer)
    client_factory = staticmethod(create_http_client)

    def add_arguments(self, parser: Any) -> None:
        """Add command-line arguments."""
        # --version below replaces Django's built-in one
        parser.conflict_handler = "resolve"
        parser.add_argument(
            "--force",
            action="store_true",
            dest="force",
            default=False,
            help="Reinstall even if the installed binary is current",
        )
        parser.add_argument(
            "--version",
            type=str,
            dest="electron_version",
            default=None,
            help=f"Electron version to install (same as {ENV_VERSION})",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the install command.

        Args:
            *args: Variable length argument list (unused)
            **options: Arbitrary keyword arguments containing command options

        Raises:
            CommandError: If the configuration is invalid or the installation fails
        """
        force = options.get("force", False)
        version = options.get("electron_version")

        environ = dict(os.environ)
        if version:
            environ[ENV_VERSION] = version

        logger = CommandOutputLogger(self.stdout, self.stderr, self.style)

        try:
            host = DjangoHostContext()
            with self.client_factory() as client:
                installer = self.installer_factory(
                    host, client, environ=environ, logger=logger, force=force
                )
                result = installer()
        except ElectronInstallerError as e:
            raise CommandError(f"Electron installation failed: {e}") from e

        if result.status is InstallStatus.SKIPPED:
            self.stdout.write(
                self.style.SUCCESS(
                    f"Electron {result.version} is already installed at: {result.binary_path}\n"
                    f"Use --force to reinstall."
                )
            )
            return

        self.stdout.write(self.style.SUCCESS("Installation complete!"))
        self.stdout.write(f"  Version: {result.version}")
        self.stdout.write(f"  Binary: {result.binary_path}")
        self.stdout.write(f"  Binding: {result.binding_path}")
