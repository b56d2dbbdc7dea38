"""Shared fixtures for BDD tests."""

from pathlib import Path

import pytest

from electron_installer.adapters.fakes import FakeHostContext, FakeLoggingAdapter


@pytest.fixture
def context() -> dict:
    """Shared context for passing state between steps."""
    return {}


@pytest.fixture
def logger() -> FakeLoggingAdapter:
    """Log sink recording every message."""
    return FakeLoggingAdapter()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a temporary project directory.

    Returns:
        Path to a directory with bin/ and vendor/ subdirectories.
    """
    (tmp_path / "bin").mkdir()
    (tmp_path / "vendor").mkdir()
    return tmp_path


@pytest.fixture
def host_kwargs() -> dict:
    """Keyword arguments collected by given steps for FakeHostContext."""
    return {
        "extra": {},
        "aliases": [],
        "locked": {},
        "constraints": {},
        "server_vars": {},
    }


@pytest.fixture
def make_host(project_root: Path, host_kwargs: dict):
    """Build a FakeHostContext from the collected keyword arguments."""

    def _make() -> FakeHostContext:
        return FakeHostContext(project_root, **host_kwargs)

    return _make
