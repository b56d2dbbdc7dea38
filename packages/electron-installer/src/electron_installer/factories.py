"""Factory functions for wiring the installer around production adapters.

Hosts (the pyproject hook, the Django commands) call these instead of
assembling the use cases themselves.
"""

from __future__ import annotations

import os
from typing import Mapping

import httpx

from electron_installer.adapters.httpx_package_downloader import HttpxPackageDownloader
from electron_installer.adapters.httpx_release_listing import HttpxReleaseListing
from electron_installer.adapters.logging_adapter import StdlibLoggingAdapter
from electron_installer.adapters.platform_detector import OsPlatformDetector
from electron_installer.adapters.ports import HostContextPort, LoggingPort
from electron_installer.adapters.subprocess_binary_executor import (
    SubprocessBinaryExecutor,
)
from electron_installer.domain.settings import InstallerSettings
from electron_installer.usecases.binary_placer import BinaryPlacer
from electron_installer.usecases.binding_generator import BindingGenerator
from electron_installer.usecases.cdn_url_builder import CdnUrlBuilder
from electron_installer.usecases.electron_downloader import ElectronDownloader
from electron_installer.usecases.electron_installer import ElectronInstaller
from electron_installer.usecases.installation_checker import InstallationChecker
from electron_installer.usecases.version_resolver import (
    KnownVersionsCache,
    VersionResolver,
)

# Archives are tens of megabytes
DEFAULT_TIMEOUT = httpx.Timeout(30.0, read=300.0)


def resolve_settings(
    host: HostContextPort,
    environ: Mapping[str, str] | None = None,
) -> InstallerSettings:
    """Collect InstallerSettings from the environment and the host.

    Args:
        host: Host context providing server variables and the extra block.
        environ: Process environment; defaults to os.environ.

    Returns:
        InstallerSettings for one installer run.

    Raises:
        ElectronInstallerError: If a configured value is invalid.
    """
    return InstallerSettings.from_sources(
        environ=os.environ if environ is None else environ,
        server_vars=host.server_vars(),
        extra=host.extra(),
        bin_dir=host.bin_dir,
        vendor_dir=host.vendor_dir,
        project_root=host.project_root,
    )


def create_installation_checker(logger: LoggingPort | None = None) -> InstallationChecker:
    """Create an InstallationChecker that queries the real binary."""
    return InstallationChecker(
        binary_executor=SubprocessBinaryExecutor(),
        logger=logger or StdlibLoggingAdapter(),
    )


def create_http_client() -> httpx.Client:
    """Create the httpx.Client shared by the release listing and the downloader.

    The caller owns the client and closes it, usually with a ``with`` block.
    """
    return httpx.Client(follow_redirects=True, timeout=DEFAULT_TIMEOUT)


def create_installer(
    host: HostContextPort,
    client: httpx.Client,
    environ: Mapping[str, str] | None = None,
    logger: LoggingPort | None = None,
    force: bool = False,
) -> ElectronInstaller:
    """Create an ElectronInstaller wired with the production adapters.

    The release listing and the archive downloader share client. The
    installer never closes it; run the installer inside the client's
    ``with`` block.

    Args:
        host: Host context the installation runs in.
        client: HTTP client, see create_http_client().
        environ: Process environment; defaults to os.environ.
        logger: Log sink; defaults to the 'electron_installer' logger.
        force: Reinstall even if the installed binary is current.

    Returns:
        A ready-to-call ElectronInstaller.

    Raises:
        ElectronInstallerError: If a configured value is invalid.

    Example:
        >>> host = PyprojectHostContext(Path("."))
        >>> with create_http_client() as client:
        ...     result = create_installer(host, client)()
        >>> result.binary_path
        PosixPath('/project/bin/electron')
    """
    log = logger or StdlibLoggingAdapter()
    settings = resolve_settings(host, environ)
    platform_detector = OsPlatformDetector(
        platform_override=settings.platform,
        architecture_override=settings.architecture,
    )
    resolver = VersionResolver(KnownVersionsCache(HttpxReleaseListing(client=client), log), log)

    return ElectronInstaller(
        host=host,
        settings=settings,
        resolver=resolver,
        platform_detector=platform_detector,
        checker=create_installation_checker(log),
        downloader=ElectronDownloader(
            port=HttpxPackageDownloader(client=client),
            resolver=resolver,
            url_builder=CdnUrlBuilder(settings, platform_detector),
            logger=log,
        ),
        placer=BinaryPlacer(log),
        binding_generator=BindingGenerator(),
        logger=log,
        force=force,
    )
