"""Diagnostic model: a single reported issue anchored to one line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class Severity(Enum):
    """Severity level for a diagnostic.

    Lower ``priority`` sorts first. ``UNKNOWN`` covers diagnostics that
    arrive without a recognised severity and always sorts last.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"
    UNKNOWN = "unknown"

    @property
    def priority(self) -> int:
        return _PRIORITY[self]

    @classmethod
    def parse(cls, value: Any) -> Severity:
        """Map a loose severity value (enum, name, or None) onto a member."""
        if isinstance(value, Severity):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.UNKNOWN
        return cls.UNKNOWN


_PRIORITY: dict[Severity, int] = {
    Severity.ERROR: 1,
    Severity.WARNING: 2,
    Severity.INFO: 3,
    Severity.HINT: 4,
    Severity.UNKNOWN: 99,
}


@dataclass(frozen=True)
class CharRange:
    """Character offsets into the buffer, end exclusive."""

    start: int
    end: int


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic attached to a buffer line.

    Attributes:
        line: Zero-based line index the diagnostic belongs to.
        severity: How serious the issue is.
        message: Human-readable description.
        range: Character range the diagnostic covers.
    """

    line: int
    severity: Severity
    message: str
    range: CharRange

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Diagnostic:
        """Build a diagnostic from the mapping shape a language-server bridge emits.

        Raises KeyError, TypeError or ValueError for malformed input.
        """
        raw_range = data["range"]
        return cls(
            line=int(data["line"]),
            severity=Severity.parse(data.get("severity")),
            message=str(data.get("message", "")),
            range=CharRange(start=int(raw_range["start"]), end=int(raw_range["end"])),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "severity": self.severity.value,
            "message": self.message,
            "range": {"start": self.range.start, "end": self.range.end},
        }

    def __str__(self) -> str:
        return f"{self.severity.value.upper()} [line={self.line}]: {self.message}"
