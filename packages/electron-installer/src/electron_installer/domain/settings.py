"""Installer settings domain entity.

All overrides (environment, server context, project extra block) are
collected here once at the start of a run and threaded through the use
cases, instead of being read ad hoc.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Mapping

from electron_installer.domain.exceptions import ElectronInstallerError

PACKAGE_NAME = "uuf6429/electron-installer"

ENV_VERSION = "ELECTRON_VERSION"
ENV_PLATFORM = "ELECTRON_PLATFORM"
ENV_ARCHITECTURE = "ELECTRON_ARCHITECTURE"
ENV_CDNURL = "ELECTRON_CDNURL"

# Keys of the extra metadata block keyed by PACKAGE_NAME
EXTRA_VERSION = "version"
EXTRA_CDNURL = "cdnurl"
EXTRA_PLACEMENT = "placement"
EXTRA_BINDING_FILE = "binding-file"

# Staging directory and binding file, relative to the vendor directory
STAGING_SUBDIR = Path("electron-installer") / "electron"
BINDING_FILENAME = Path("electron-installer") / "electron-binary.yaml"

PlacementStrategy = Literal["copy", "symlink"]
_VALID_PLACEMENTS = ("copy", "symlink")


def _first_set(*values: Any) -> str | None:
    """Return the first value that is a non-empty string."""
    for value in values:
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


@dataclass(frozen=True)
class InstallerSettings:
    """Resolved installer configuration.

    Attributes:
        bin_dir: Directory the Electron binary is placed into.
        vendor_dir: Directory holding the staging area and the binding file.
        version: Requested version override, or None to resolve from the host.
        platform: Platform override ('win32', 'linux', 'darwin'), or None.
        architecture: Architecture override ('ia32', 'x64'), or None.
        cdn_url: CDN base URL override, or None for the default host.
        binding_path: Explicit binding file location, or None for the default.
        placement: 'copy', 'symlink', or None for the per-OS default.
    """

    bin_dir: Path
    vendor_dir: Path
    version: str | None = None
    platform: str | None = None
    architecture: str | None = None
    cdn_url: str | None = None
    binding_path: Path | None = None
    placement: PlacementStrategy | None = None

    def __post_init__(self) -> None:
        """Validate settings configuration."""
        self._validate_dirs()
        self._validate_placement()

    def _validate_dirs(self) -> None:
        """Validate directories are not empty."""
        for name in ("bin_dir", "vendor_dir"):
            value = str(getattr(self, name))
            if not value or value == ".":
                raise ElectronInstallerError(f"{name} cannot be empty")

    def _validate_placement(self) -> None:
        """Validate placement is a known strategy."""
        if self.placement is not None and self.placement not in _VALID_PLACEMENTS:
            raise ElectronInstallerError(
                f"placement must be one of {_VALID_PLACEMENTS}, got: {self.placement!r}"
            )

    @property
    def staging_dir(self) -> Path:
        """Directory the Electron archive is extracted into."""
        return self.vendor_dir / STAGING_SUBDIR

    @property
    def binding_file(self) -> Path:
        """Location of the generated binding file."""
        if self.binding_path is not None:
            return self.binding_path
        return self.vendor_dir / BINDING_FILENAME

    def placement_for(self, os_name: str) -> PlacementStrategy:
        """Return the placement strategy for the given OS.

        Windows defaults to copying, everything else to symlinking.
        """
        if self.placement is not None:
            return self.placement
        return "copy" if os_name == "win32" else "symlink"

    @classmethod
    def from_sources(
        cls,
        environ: Mapping[str, str],
        server_vars: Mapping[str, Any],
        extra: Mapping[str, Any],
        bin_dir: Path,
        vendor_dir: Path,
        project_root: Path | None = None,
    ) -> InstallerSettings:
        """Build settings from every override source.

        Each key is looked up in the environment first, then in the server
        context, then in the project's extra block. Empty values are
        treated as unset.

        Args:
            environ: Process environment.
            server_vars: Host-provided server context variables.
            extra: The project's extra metadata block for this plugin.
            bin_dir: Project executable directory.
            vendor_dir: Project vendor directory.
            project_root: Base for a relative 'binding-file' path.

        Returns:
            InstallerSettings with every override applied.

        Raises:
            ElectronInstallerError: If a value is invalid.
        """
        binding_file = _first_set(extra.get(EXTRA_BINDING_FILE))
        binding_path = None
        if binding_file is not None:
            binding_path = Path(binding_file)
            if not binding_path.is_absolute() and project_root is not None:
                binding_path = project_root / binding_path

        platform = _first_set(environ.get(ENV_PLATFORM), server_vars.get(ENV_PLATFORM))
        architecture = _first_set(
            environ.get(ENV_ARCHITECTURE), server_vars.get(ENV_ARCHITECTURE)
        )
        placement = _first_set(extra.get(EXTRA_PLACEMENT))

        return cls(
            bin_dir=bin_dir,
            vendor_dir=vendor_dir,
            version=_first_set(
                environ.get(ENV_VERSION),
                server_vars.get(ENV_VERSION),
                extra.get(EXTRA_VERSION),
            ),
            platform=platform.lower() if platform else None,
            architecture=architecture.lower() if architecture else None,
            cdn_url=_first_set(
                environ.get(ENV_CDNURL),
                server_vars.get(ENV_CDNURL),
                extra.get(EXTRA_CDNURL),
            ),
            binding_path=binding_path,
            placement=placement.lower() if placement else None,  # type: ignore[arg-type]
        )
