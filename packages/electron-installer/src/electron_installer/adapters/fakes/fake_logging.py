"""Fake logging adapter for testing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LogRecord:
    """A message captured by FakeLoggingAdapter."""

    level: str
    message: str


class FakeLoggingAdapter:
    """Fake implementation of LoggingPort that records every message.

    Example:
        >>> fake = FakeLoggingAdapter()
        >>> fake.warning("Retrying")
        >>> fake.messages("warning")
        ['Retrying']
    """

    def __init__(self) -> None:
        self.records: list[LogRecord] = []

    def info(self, message: str) -> None:
        self.records.append(LogRecord("info", message))

    def warning(self, message: str) -> None:
        self.records.append(LogRecord("warning", message))

    def error(self, message: str) -> None:
        self.records.append(LogRecord("error", message))

    def messages(self, level: str | None = None) -> list[str]:
        """Return recorded messages, optionally filtered by level."""
        return [r.message for r in self.records if level is None or r.level == level]

    def clear(self) -> None:
        """Forget recorded messages."""
        self.records.clear()
