"""Installation checker use case for deciding whether Electron must be (re)installed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from electron_installer.domain.binding import ElectronBinary
from electron_installer.domain.exceptions import (
    BinaryExecutionError,
    BindingFileError,
    InvalidVersionError,
)
from electron_installer.domain.version import ElectronVersion

if TYPE_CHECKING:
    from electron_installer.adapters.ports import BinaryExecutorPort, LoggingPort


class InstallationStatus(Enum):
    """Status of the installed Electron binary.

    Attributes:
        CURRENT: Installed version is at least the requested one.
        OUTDATED: Installed version is lower than the requested one.
        MISSING: Binding file or binary does not exist.
        UNREADABLE: Installed version can not be determined reliably.
    """

    CURRENT = "current"
    OUTDATED = "outdated"
    MISSING = "missing"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class InstallationCheckResult:
    """Result of installation check.

    Immutable value object containing the result of comparing the
    installed Electron binary with the requested version.

    Attributes:
        status: The installation status.
        binary_path: Path to the binary checked.
        installed_version: Installed version, if it could be determined.
        requested_version: Version the caller asked for.
        error_message: Reason the binary is not current, None for CURRENT.
    """

    status: InstallationStatus
    binary_path: Path
    installed_version: str | None
    requested_version: str
    error_message: str | None

    @property
    def should_install(self) -> bool:
        """True unless the installed binary is current."""
        return self.status is not InstallationStatus.CURRENT

    @classmethod
    def create_success(
        cls, binary_path: Path, installed_version: str, requested_version: str
    ) -> InstallationCheckResult:
        """Create a CURRENT installation check result.

        Args:
            binary_path: Path to the verified binary.
            installed_version: Version reported by the installation.
            requested_version: Version the caller asked for.

        Returns:
            InstallationCheckResult with CURRENT status and no error message.
        """
        return cls(
            status=InstallationStatus.CURRENT,
            binary_path=binary_path,
            installed_version=installed_version,
            requested_version=requested_version,
            error_message=None,
        )

    @classmethod
    def create_failure(
        cls,
        status: InstallationStatus,
        binary_path: Path,
        requested_version: str,
        error_message: str,
        installed_version: str | None = None,
    ) -> InstallationCheckResult:
        """Create a non-current installation check result.

        Args:
            status: The failure status (OUTDATED, MISSING, or UNREADABLE).
            binary_path: Path to the binary.
            requested_version: Version the caller asked for.
            error_message: Description of why the binary is not current.
            installed_version: Installed version, if known.

        Returns:
            InstallationCheckResult with the specified status.
        """
        return cls(
            status=status,
            binary_path=binary_path,
            installed_version=installed_version,
            requested_version=requested_version,
            error_message=error_message,
        )


class InstallationChecker:
    """Use case for checking the installed Electron binary.

    The installed version is read from two places: the binding file
    written by the last install, and the binary itself (run with '-v').
    When both are readable they must agree. When only one is readable it
    is trusted. Anything else is UNREADABLE and triggers a reinstall.
    """

    def __init__(
        self,
        binary_executor: BinaryExecutorPort,
        logger: LoggingPort,
    ) -> None:
        """Initialize the installation checker use case.

        Args:
            binary_executor: Port for querying the binary's version.
            logger: Log sink for unreadable-version warnings.
        """
        self._binary_executor = binary_executor
        self._logger = logger

    def __call__(
        self,
        binding_path: Path,
        binary_path: Path,
        requested: str,
    ) -> InstallationCheckResult:
        """Execute installation check workflow.

        Args:
            binding_path: Path to the binding file.
            binary_path: Path to the placed binary.
            requested: Version that is about to be installed.

        Returns:
            InstallationCheckResult with:
            - MISSING if the binding file or the binary does not exist
            - UNREADABLE if the installed version can not be determined
            - CURRENT if installed >= requested
            - OUTDATED otherwise
        """
        if not binding_path.is_file():
            return InstallationCheckResult.create_failure(
                status=InstallationStatus.MISSING,
                binary_path=binary_path,
                requested_version=requested,
                error_message=f"Binding file does not exist at {binding_path}",
            )

        if not (binary_path.exists() or binary_path.is_symlink()):
            return InstallationCheckResult.create_failure(
                status=InstallationStatus.MISSING,
                binary_path=binary_path,
                requested_version=requested,
                error_message=f"Binary does not exist at {binary_path}",
            )

        recorded = self._recorded_version(binding_path)
        live = self._live_version(binary_path)

        if recorded is not None and live is not None and recorded != live:
            return self._unreadable(
                binary_path,
                requested,
                f"Binding records version {recorded} but the binary reports {live}",
            )

        installed = recorded or live
        if installed is None:
            return self._unreadable(
                binary_path, requested, "Installed Electron version is unknown"
            )

        try:
            is_current = ElectronVersion.from_string(installed) >= ElectronVersion.from_string(
                requested
            )
        except InvalidVersionError as e:
            return self._unreadable(binary_path, requested, str(e))

        if is_current:
            return InstallationCheckResult.create_success(binary_path, installed, requested)

        return InstallationCheckResult.create_failure(
            status=InstallationStatus.OUTDATED,
            binary_path=binary_path,
            requested_version=requested,
            error_message=f"Installed version {installed} is lower than {requested}",
            installed_version=installed,
        )

    def _recorded_version(self, binding_path: Path) -> str | None:
        try:
            binding = ElectronBinary.load(binding_path)
        except BindingFileError as e:
            self._logger.warning(str(e))
            return None
        return binding.version if binding is not None else None

    def _live_version(self, binary_path: Path) -> str | None:
        try:
            return self._binary_executor.query_version(binary_path)
        except BinaryExecutionError as e:
            self._logger.warning(f"Can not query Electron version: {e}")
            return None

    def _unreadable(
        self, binary_path: Path, requested: str, message: str
    ) -> InstallationCheckResult:
        self._logger.warning(f"{message}; Electron will be reinstalled.")
        return InstallationCheckResult.create_failure(
            status=InstallationStatus.UNREADABLE,
            binary_path=binary_path,
            requested_version=requested,
            error_message=message,
        )
