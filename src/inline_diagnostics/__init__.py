"""Inline diagnostics: a cursor-line diagnostic panel built from styled fragments."""

from inline_diagnostics.config import DEFAULT_CONFIG, PanelConfig, resolve_config
from inline_diagnostics.engine import (
    Buffer,
    BufferSnapshot,
    Host,
    InlineDiagnostics,
    InMemoryBuffer,
    InMemoryHost,
    compute_fragments,
)
from inline_diagnostics.errors import ConfigError, DiagnosticsFormatError, InlineDiagnosticsError
from inline_diagnostics.model import CharRange, Diagnostic, Fragment, Severity
from inline_diagnostics.plugin import InlineDiagnosticsPlugin

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # model
    "Severity",
    "CharRange",
    "Diagnostic",
    "Fragment",
    # config
    "PanelConfig",
    "DEFAULT_CONFIG",
    "resolve_config",
    # engine
    "Buffer",
    "Host",
    "BufferSnapshot",
    "InlineDiagnostics",
    "InMemoryBuffer",
    "InMemoryHost",
    "compute_fragments",
    "InlineDiagnosticsPlugin",
    # errors
    "InlineDiagnosticsError",
    "ConfigError",
    "DiagnosticsFormatError",
]
