"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without network, subprocess or host I/O.
"""

from electron_installer.adapters.fakes.fake_host_context import FakeHostContext
from electron_installer.adapters.fakes.fake_package_downloader import (
    FakePackageDownloader,
)
from electron_installer.adapters.fakes.fake_release_listing import FakeReleaseListing
from electron_installer.adapters.fakes.fake_binary_executor import FakeBinaryExecutor
from electron_installer.adapters.fakes.fake_platform_detector import (
    FakePlatformDetector,
)
from electron_installer.adapters.fakes.fake_logging import FakeLoggingAdapter, LogRecord

__all__ = [
    "FakeHostContext",
    "FakePackageDownloader",
    "FakeReleaseListing",
    "FakeBinaryExecutor",
    "FakePlatformDetector",
    "FakeLoggingAdapter",
    "LogRecord",
]
