"""Unit tests for SubprocessBinaryExecutor adapter."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from electron_installer.adapters.ports import BinaryExecutorPort
from electron_installer.adapters.subprocess_binary_executor import SubprocessBinaryExecutor
from electron_installer.domain.exceptions import BinaryExecutionError

RUN = "electron_installer.adapters.subprocess_binary_executor.subprocess.run"
BINARY = Path("/project/bin/electron")


def _completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess([str(BINARY), "-v"], returncode, stdout, stderr)


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.SubprocessBinaryExecutor")
class TestSubprocessBinaryExecutor:
    """Test SubprocessBinaryExecutor.query_version()."""

    def test_satisfies_port(self):
        """Test that the executor satisfies BinaryExecutorPort."""
        assert isinstance(SubprocessBinaryExecutor(), BinaryExecutorPort)

    def test_strips_v_prefix(self):
        """Test that 'v1.6.2' is reported as '1.6.2'."""
        with patch(RUN, return_value=_completed("v1.6.2\n")) as run:
            assert SubprocessBinaryExecutor(timeout=5).query_version(BINARY) == "1.6.2"
        assert run.call_args.args[0] == [str(BINARY), "-v"]
        assert run.call_args.kwargs["timeout"] == 5

    def test_uses_first_line(self):
        """Test that only the first output line is used."""
        with patch(RUN, return_value=_completed("v1.4.15\nextra noise\n")):
            assert SubprocessBinaryExecutor().query_version(BINARY) == "1.4.15"

    def test_non_zero_exit(self):
        """Test that a failing binary raises."""
        with patch(RUN, return_value=_completed(stderr="segfault", returncode=139)):
            with pytest.raises(BinaryExecutionError, match="exited with 139"):
                SubprocessBinaryExecutor().query_version(BINARY)

    def test_empty_output(self):
        """Test that a silent binary raises."""
        with patch(RUN, return_value=_completed("  \n")):
            with pytest.raises(BinaryExecutionError, match="printed no version"):
                SubprocessBinaryExecutor().query_version(BINARY)

    def test_timeout(self):
        """Test that a hanging binary raises."""
        with patch(RUN, side_effect=subprocess.TimeoutExpired([str(BINARY)], 10)):
            with pytest.raises(BinaryExecutionError, match="within"):
                SubprocessBinaryExecutor().query_version(BINARY)

    def test_not_executable(self, tmp_path: Path):
        """Test that a missing binary raises."""
        with pytest.raises(BinaryExecutionError, match="Can not run"):
            SubprocessBinaryExecutor().query_version(tmp_path / "missing")
