"""Editor notifications that trigger a panel refresh."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionChanged:
    document_id: str


@dataclass(frozen=True)
class DiagnosticsUpdated:
    document_id: str
    diagnostic_count: int
