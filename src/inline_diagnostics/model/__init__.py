"""Model layer -- public type re-exports."""

from inline_diagnostics.model.diagnostic import CharRange, Diagnostic, Severity
from inline_diagnostics.model.fragment import Fragment

__all__ = [
    # diagnostic
    "Severity",
    "CharRange",
    "Diagnostic",
    # fragment
    "Fragment",
]
