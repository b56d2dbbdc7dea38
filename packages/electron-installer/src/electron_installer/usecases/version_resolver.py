"""Version resolver use case: which Electron version to install."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from electron_installer.domain.exceptions import (
    TransportError,
    VersionResolutionError,
)
from electron_installer.domain.settings import PACKAGE_NAME
from electron_installer.domain.version import (
    ElectronVersion,
    extract_version,
    sort_versions_descending,
)

if TYPE_CHECKING:
    from electron_installer.adapters.ports import (
        HostContextPort,
        LoggingPort,
        ReleaseListingPort,
    )
    from electron_installer.domain.settings import InstallerSettings

# Used when the release listing cannot be reached
FALLBACK_VERSIONS: tuple[str, ...] = (
    "1.6.2",
    "1.6.1",
    "1.4.15",
    "1.4.14",
    "1.4.13",
    "1.4.12",
)


class KnownVersionsCache:
    """Memoized, descending list of known Electron versions.

    Owned by a VersionResolver and scoped to one installer run: the
    release listing is queried at most once.
    """

    def __init__(
        self,
        listing: ReleaseListingPort | None,
        logger: LoggingPort,
        fallback: tuple[str, ...] = FALLBACK_VERSIONS,
    ) -> None:
        """Initialize the cache.

        Args:
            listing: Port for fetching release tags, or None to use the fallback only.
            logger: Log sink for fallback warnings.
            fallback: Versions used when the listing is unavailable.
        """
        self._listing = listing
        self._logger = logger
        self._fallback = fallback
        self._versions: list[str] | None = None

    @property
    def logger(self) -> LoggingPort:
        """Log sink shared with the owning resolver."""
        return self._logger

    def get(self) -> list[str]:
        """Return the known versions, highest first."""
        if self._versions is None:
            self._versions = self._load()
        return list(self._versions)

    def clear(self) -> None:
        """Forget the memoized list."""
        self._versions = None

    def _load(self) -> list[str]:
        if self._listing is not None:
            try:
                versions = sort_versions_descending(self._listing.fetch_tags())
            except TransportError as e:
                self._logger.warning(
                    f"Can not fetch the Electron release list ({e}); "
                    "using the bundled version list."
                )
            else:
                if versions:
                    return versions
                self._logger.warning(
                    "The Electron release list is empty; using the bundled version list."
                )
        return sort_versions_descending(self._fallback)


class VersionResolver:
    """Use case for resolving the Electron version to install.

    Precedence, highest first:
    1. settings.version (ELECTRON_VERSION env var, server var, extra 'version')
    2. a lock alias for the plugin package
    3. the plugin's locked/installed version
    4. the plugin's declared requirement constraint
    5. the latest known version

    Each candidate is passed through extract_version(); candidates that
    yield nothing fall through to the next source.
    """

    def __init__(
        self, cache: KnownVersionsCache, logger: LoggingPort | None = None
    ) -> None:
        """Initialize the version resolver.

        Args:
            cache: Known-versions cache for this run.
            logger: Log sink; defaults to the cache's.
        """
        self._cache = cache
        self._logger = logger if logger is not None else cache.logger

    def known_versions(self) -> list[str]:
        """Return known versions sorted highest first."""
        return self._cache.get()

    def latest_version(self) -> str | None:
        """Return the highest known version, or None if none are known."""
        versions = self.known_versions()
        return versions[0] if versions else None

    def lower_version(self, version: str) -> str | None:
        """Return the first known version strictly lower than version.

        Args:
            version: Version to step down from.

        Returns:
            The next lower known version, or None if version is at or
            below the lowest known one.
        """
        current = ElectronVersion.from_string(version)
        for candidate in self.known_versions():
            if ElectronVersion.from_string(candidate) < current:
                return candidate
        return None

    def resolve(self, host: HostContextPort, settings: InstallerSettings) -> str:
        """Resolve the version to install.

        Args:
            host: Host context providing lock data and declared requirements.
            settings: Resolved installer settings.

        Returns:
            A concrete version string such as '1.6.2'.

        Raises:
            VersionResolutionError: If no source yields a version.
        """
        latest = self.latest_version()

        if settings.version:
            version = extract_version(settings.version, latest)
            if version is not None:
                return version
            self._logger.warning(
                f'Ignoring configured Electron version "{settings.version}": '
                "no X.Y.Z version found in it"
            )

        for candidate in self._candidates(host):
            version = extract_version(candidate, latest)
            if version is not None:
                return version

        if latest is None:
            raise VersionResolutionError(PACKAGE_NAME)
        return latest

    def _candidates(self, host: HostContextPort) -> Iterator[str | None]:
        for alias in host.aliases():
            if alias.get("package") == PACKAGE_NAME:
                yield alias.get("alias")
        yield host.locked_version(PACKAGE_NAME)
        yield host.required_constraint(PACKAGE_NAME)
