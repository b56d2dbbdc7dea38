"""Subprocess-based implementation of the BinaryExecutorPort."""

from __future__ import annotations

import subprocess
from pathlib import Path

from electron_installer.adapters.ports import BinaryExecutorPort
from electron_installer.domain.exceptions import BinaryExecutionError


class SubprocessBinaryExecutor:
    """Runs the installed Electron binary to ask for its version.

    Equivalent to running ``electron -v`` on the command line.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        """Initialize the executor.

        Args:
            timeout: Seconds to wait for the binary before giving up.
        """
        self._timeout = timeout

    def query_version(self, path: Path) -> str:
        """Return the version reported by ``<path> -v``.

        Raises:
            BinaryExecutionError: If the binary cannot be run, times out,
                exits non-zero, or prints nothing.
        """
        try:
            completed = subprocess.run(
                [str(path), "-v"],
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise BinaryExecutionError(
                f"{path} did not report its version within {self._timeout}s"
            ) from e
        except OSError as e:
            raise BinaryExecutionError(f"Can not run {path}: {e}") from e

        if completed.returncode != 0:
            raise BinaryExecutionError(
                f"{path} -v exited with {completed.returncode}: {completed.stderr.strip()}"
            )

        lines = completed.stdout.strip().splitlines()
        if not lines or not lines[0].strip():
            raise BinaryExecutionError(f"{path} -v printed no version")

        version = lines[0].strip()
        return version[1:] if version.startswith("v") else version


# Runtime protocol check
assert isinstance(SubprocessBinaryExecutor(), BinaryExecutorPort)
