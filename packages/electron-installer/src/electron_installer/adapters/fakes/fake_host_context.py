"""Fake host context for testing.

Provides a test double for HostContextPort backed by plain attributes,
so tests can describe a project without writing pyproject.toml files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping


class FakeHostContext:
    """Fake implementation of HostContextPort for testing.

    Example:
        >>> host = FakeHostContext(Path("/project"), locked={"uuf6429/electron-installer": "1.4.15"})
        >>> host.locked_version("uuf6429/electron-installer")
        '1.4.15'
        >>> host.bin_dir
        PosixPath('/project/bin')
    """

    def __init__(
        self,
        project_root: Path,
        extra: Mapping[str, Any] | None = None,
        server_vars: Mapping[str, Any] | None = None,
        aliases: list[Mapping[str, str]] | None = None,
        locked: Mapping[str, str] | None = None,
        constraints: Mapping[str, str] | None = None,
        bin_dir: Path | None = None,
        vendor_dir: Path | None = None,
    ) -> None:
        """Initialize with the project description.

        Args:
            project_root: Project root directory.
            extra: The plugin's extra metadata block.
            server_vars: Server context variables.
            aliases: Lock aliases.
            locked: Installed versions by package name.
            constraints: Declared version constraints by package name.
            bin_dir: Executable directory; defaults to project_root / 'bin'.
            vendor_dir: Vendor directory; defaults to project_root / 'vendor'.
        """
        self._project_root = project_root
        self._extra = dict(extra or {})
        self._server_vars = dict(server_vars or {})
        self._aliases = list(aliases or [])
        self._locked = dict(locked or {})
        self._constraints = dict(constraints or {})
        self._bin_dir = bin_dir or project_root / "bin"
        self._vendor_dir = vendor_dir or project_root / "vendor"

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def bin_dir(self) -> Path:
        return self._bin_dir

    @property
    def vendor_dir(self) -> Path:
        return self._vendor_dir

    def extra(self) -> Mapping[str, Any]:
        return self._extra

    def server_vars(self) -> Mapping[str, Any]:
        return self._server_vars

    def aliases(self) -> list[Mapping[str, str]]:
        return self._aliases

    def locked_version(self, package_name: str) -> str | None:
        return self._locked.get(package_name)

    def required_constraint(self, package_name: str) -> str | None:
        return self._constraints.get(package_name)
