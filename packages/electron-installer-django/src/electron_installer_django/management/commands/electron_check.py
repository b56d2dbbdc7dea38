"""Django management command to check the installed Electron binary."""

import json
import os
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from electron_installer.domain.binary import Platform
from electron_installer.domain.exceptions import ElectronInstallerError
from electron_installer.domain.version import extract_version
from electron_installer.adapters.platform_detector import OsPlatformDetector
from electron_installer.factories import create_installation_checker, resolve_settings
from electron_installer.usecases.installation_checker import InstallationChecker
from electron_installer_django.adapters import CommandOutputLogger
from electron_installer_django.host import DjangoHostContext


class Command(BaseCommand):
    """Check that Electron is installed and current (exit non-zero otherwise)."""

    help = "Check the installed Electron binary against the configured version"

    def add_arguments(self, parser: Any) -> None:
        """Add command-line arguments."""
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            dest="format",
            help="Output format: text (default) or json",
        )

    def create_checker(self) -> InstallationChecker:
        """Create the checker; overridden in tests."""
        return create_installation_checker(
            CommandOutputLogger(self.stdout, self.stderr, self.style)
        )

    def detect_platform(self, platform_override: str | None, arch_override: str | None) -> Platform:
        """Detect the platform; overridden in tests."""
        return OsPlatformDetector(platform_override, arch_override).detect()

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the check.

        The expected version is the one recorded in the binding file unless
        ELECTRON_VERSION (or the VERSION setting) names one explicitly.

        Raises:
            CommandError: If Electron is missing, outdated, or unreadable
        """
        output_format = options.get("format", "text")

        try:
            host = DjangoHostContext()
            settings = resolve_settings(host, os.environ)
            platform = self.detect_platform(settings.platform, settings.architecture)
        except ElectronInstallerError as e:
            raise CommandError(f"Invalid Electron installer configuration: {e}") from e

        binary_path = settings.bin_dir / platform.executable_name
        requested = extract_version(settings.version, None) or "0"
        result = self.create_checker()(settings.binding_file, binary_path, requested)

        data = {
            "status": result.status.value,
            "binary": str(result.binary_path),
            "binding": str(settings.binding_file),
            "installed_version": result.installed_version,
            "requested_version": settings.version,
            "error": result.error_message,
        }

        if output_format == "json":
            self.stdout.write(json.dumps(data, indent=2))
            if result.should_install:
                raise CommandError(f"Electron is {result.status.value}")
            return

        if result.should_install:
            raise CommandError(
                f"FAIL: Electron is {result.status.value}: {result.error_message}\n"
                "   Fix: run 'manage.py electron_install'."
            )

        self.stdout.write(
            self.style.SUCCESS(
                f"Electron {result.installed_version} is installed at {result.binary_path}"
            )
        )
