"""pyproject.toml implementation of the HostContextPort.

Reads the project layout and the plugin's configuration from the
``[tool.electron-installer]`` table:

    [tool.electron-installer]
    bin-dir = "bin"
    vendor-dir = "vendor"
    version = "1.6.2"
    cdnurl = "https://mirror.example.com/electron/"
    placement = "copy"
    binding-file = "vendor/electron-binary.yaml"

    [[tool.electron-installer.aliases]]
    package = "uuf6429/electron-installer"
    alias = "1.4.15"
"""

from __future__ import annotations

import tomllib
from importlib import metadata
from pathlib import Path
from typing import Any, Mapping

from packaging.requirements import InvalidRequirement, Requirement
from packaging.utils import canonicalize_name

from electron_installer.domain.exceptions import ElectronInstallerError

TOOL_TABLE = "electron-installer"
DEFAULT_BIN_DIR = "bin"
DEFAULT_VENDOR_DIR = "vendor"


def _distribution_name(package_name: str) -> str:
    """Map a 'vendor/name' package identifier to its distribution name."""
    return canonicalize_name(package_name.rsplit("/", 1)[-1])


def installed_version(package_name: str) -> str | None:
    """Return the installed distribution version of a package, or None."""
    # Distribution versions track the Electron release they install
    try:
        return metadata.version(_distribution_name(package_name))
    except metadata.PackageNotFoundError:
        return None


class PyprojectHostContext:
    """Host context backed by a project's pyproject.toml.

    Outside a web host there is no server context, so server_vars() is
    always empty and overrides come from the environment or the tool table.
    """

    def __init__(self, project_root: Path) -> None:
        """Load pyproject.toml from project_root.

        Args:
            project_root: Directory containing pyproject.toml.

        Raises:
            ElectronInstallerError: If pyproject.toml is missing or invalid.
        """
        self._project_root = project_root.resolve()
        pyproject = self._project_root / "pyproject.toml"
        try:
            with pyproject.open("rb") as fh:
                self._data: dict[str, Any] = tomllib.load(fh)
        except FileNotFoundError as e:
            raise ElectronInstallerError(
                f"No pyproject.toml found in {self._project_root}"
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ElectronInstallerError(f"Invalid {pyproject}: {e}") from e

        tool_table = self._data.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(tool_table, dict):
            raise ElectronInstallerError(f"[tool.{TOOL_TABLE}] must be a table")
        self._extra: dict[str, Any] = tool_table

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def bin_dir(self) -> Path:
        return self._project_root / str(self._extra.get("bin-dir", DEFAULT_BIN_DIR))

    @property
    def vendor_dir(self) -> Path:
        return self._project_root / str(self._extra.get("vendor-dir", DEFAULT_VENDOR_DIR))

    def extra(self) -> Mapping[str, Any]:
        return self._extra

    def server_vars(self) -> Mapping[str, Any]:
        return {}

    def aliases(self) -> list[Mapping[str, str]]:
        aliases = self._extra.get("aliases", [])
        if not isinstance(aliases, list):
            raise ElectronInstallerError(
                f"[tool.{TOOL_TABLE}] aliases must be an array of tables"
            )
        return [alias for alias in aliases if isinstance(alias, dict)]

    def locked_version(self, package_name: str) -> str | None:
        return installed_version(package_name)

    def required_constraint(self, package_name: str) -> str | None:
        wanted = _distribution_name(package_name)
        for raw in self._declared_requirements():
            try:
                requirement = Requirement(raw)
            except InvalidRequirement:
                continue
            if canonicalize_name(requirement.name) == wanted:
                return str(requirement.specifier) or None
        return None

    def _declared_requirements(self) -> list[str]:
        project = self._data.get("project", {})
        requirements = list(project.get("dependencies", []))
        for group in project.get("optional-dependencies", {}).values():
            requirements.extend(group)
        return [req for req in requirements if isinstance(req, str)]

