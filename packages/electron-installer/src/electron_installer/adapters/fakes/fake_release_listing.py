"""Fake release listing for testing."""

from __future__ import annotations


class FakeReleaseListing:
    """Fake implementation of ReleaseListingPort for testing.

    Returns preconfigured tags, or raises a configured exception, and
    counts how often the listing was fetched.
    """

    def __init__(self, tags: list[str] | None = None) -> None:
        self._tags = list(tags or [])
        self._exception: BaseException | None = None
        self.fetch_count = 0

    def set_tags(self, tags: list[str]) -> None:
        """Configure the tags returned by fetch_tags()."""
        self._tags = list(tags)

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from fetch_tags(), or None to clear."""
        self._exception = exception

    def fetch_tags(self) -> list[str]:
        self.fetch_count += 1
        if self._exception is not None:
            raise self._exception
        return list(self._tags)
