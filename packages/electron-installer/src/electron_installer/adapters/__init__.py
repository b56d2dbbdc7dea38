"""Interface adapters: ports and their production implementations."""

from electron_installer.adapters.ports import (
    BinaryExecutorPort,
    HostContextPort,
    LoggingPort,
    PackageDownloaderPort,
    PlatformDetectorPort,
    ReleaseListingPort,
)
from electron_installer.adapters.httpx_package_downloader import HttpxPackageDownloader
from electron_installer.adapters.httpx_release_listing import HttpxReleaseListing
from electron_installer.adapters.logging_adapter import StdlibLoggingAdapter
from electron_installer.adapters.platform_detector import OsPlatformDetector
from electron_installer.adapters.pyproject_host import PyprojectHostContext
from electron_installer.adapters.subprocess_binary_executor import (
    SubprocessBinaryExecutor,
)

__all__ = [
    "BinaryExecutorPort",
    "HostContextPort",
    "LoggingPort",
    "PackageDownloaderPort",
    "PlatformDetectorPort",
    "ReleaseListingPort",
    "HttpxPackageDownloader",
    "HttpxReleaseListing",
    "StdlibLoggingAdapter",
    "OsPlatformDetector",
    "PyprojectHostContext",
    "SubprocessBinaryExecutor",
]
