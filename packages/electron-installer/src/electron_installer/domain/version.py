"""Version value object and version-string extraction rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from electron_installer.domain.exceptions import InvalidVersionError

# "dev-master#<commit-ref> as 1.4.15" and similar inline aliases
_COMMIT_REF_PATTERN = re.compile(r"dev-master#.*?(\d+\.\d+\.\d+)", re.IGNORECASE)

# "1.9.8", "^1.9.8", "v1.9.8" or "1.9.8-p02"
_TRIPLE_PATTERN = re.compile(r"(\d+\.\d+\.\d+)(?:-p\d{2})?", re.IGNORECASE)

_DOTTED_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)*")

_DEV_MASTER = "dev-master"


@dataclass(frozen=True)
class ElectronVersion:
    """Dotted numeric version with segment-wise numeric ordering.

    Missing trailing segments compare as zero, so ``1.4`` equals
    ``1.4.0`` and ``1.10.0`` is greater than ``1.9.9``.

    Attributes:
        segments: Numeric version components, most significant first.
    """

    segments: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate version components."""
        if not self.segments:
            raise InvalidVersionError("Version must have at least one component")
        if any(segment < 0 for segment in self.segments):
            raise InvalidVersionError(
                f"Version components must be non-negative, got: {self.segments!r}"
            )

    @classmethod
    def from_string(cls, version_string: str) -> ElectronVersion:
        """Parse a version such as '1.6.2' or 'v1.4.15'.

        Args:
            version_string: Version string to parse.

        Returns:
            ElectronVersion instance.

        Raises:
            InvalidVersionError: If the string is not a dotted numeric version.
        """
        version = version_string.strip()
        if version[:1] in ("v", "V"):
            version = version[1:]

        if not _DOTTED_PATTERN.fullmatch(version):
            raise InvalidVersionError(
                f"Invalid version format, expected dotted numbers, got: {version_string!r}"
            )

        return cls(segments=tuple(int(part) for part in version.split(".")))

    def _key(self, width: int) -> tuple[int, ...]:
        return self.segments + (0,) * (width - len(self.segments))

    def _compare(self, other: ElectronVersion) -> int:
        width = max(len(self.segments), len(other.segments))
        mine, theirs = self._key(width), other._key(width)
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElectronVersion):
            return NotImplemented
        return self._compare(other) == 0

    def __hash__(self) -> int:
        segments = list(self.segments)
        while len(segments) > 1 and segments[-1] == 0:
            segments.pop()
        return hash(tuple(segments))

    def __lt__(self, other: ElectronVersion) -> bool:
        return self._compare(other) < 0

    def __le__(self, other: ElectronVersion) -> bool:
        return self._compare(other) <= 0

    def __gt__(self, other: ElectronVersion) -> bool:
        return self._compare(other) > 0

    def __ge__(self, other: ElectronVersion) -> bool:
        return self._compare(other) >= 0

    def normalized(self) -> str:
        """Return the four-segment normalized form, e.g. '1.6.2.0'."""
        return ".".join(str(segment) for segment in self._key(4)[:4])

    def __str__(self) -> str:
        """Return string representation of version."""
        return ".".join(str(segment) for segment in self.segments)


def compare_versions(left: str, right: str) -> int:
    """Compare two version strings.

    Returns:
        -1, 0 or 1 as left is lower than, equal to, or greater than right.
    """
    return ElectronVersion.from_string(left)._compare(ElectronVersion.from_string(right))


def extract_version(raw: str | None, latest: str | None) -> str | None:
    """Extract a concrete version from a declared version or constraint.

    Rules, first match wins:
        1. ``dev-master`` resolves to ``latest``.
        2. ``dev-master#<ref> ... X.Y.Z`` resolves to the first triple after the ref.
        3. Any string containing ``X.Y.Z`` (optionally ``-pNN``) resolves to the triple.

    Args:
        raw: Declared version, alias or constraint. May be None.
        latest: The latest known version, used for ``dev-master``.

    Returns:
        The extracted version string, or None if nothing matches.
    """
    if not raw:
        return None

    value = raw.strip()
    if value.lower() == _DEV_MASTER:
        return latest

    match = _COMMIT_REF_PATTERN.search(value)
    if match:
        return match.group(1)

    match = _TRIPLE_PATTERN.search(value)
    if match:
        return match.group(1)

    return None


def sort_versions_descending(raw_versions: Iterable[str | None]) -> list[str]:
    """Clean up a raw version list into a strictly descending ladder.

    Strips a leading 'v', drops empty and unparsable entries and
    de-duplicates by version equality (first spelling wins).

    Args:
        raw_versions: Version strings in any order, possibly with noise.

    Returns:
        Versions sorted from highest to lowest.
    """
    seen: dict[ElectronVersion, str] = {}
    for raw in raw_versions:
        if raw is None or not raw.strip():
            continue
        try:
            version = ElectronVersion.from_string(raw)
        except InvalidVersionError:
            continue
        seen.setdefault(version, str(version))

    return [seen[version] for version in sorted(seen, reverse=True)]
