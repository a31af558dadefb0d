"""Error types for inline diagnostics."""


class InlineDiagnosticsError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(InlineDiagnosticsError):
    """Raised when a configuration file exists but cannot be used."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class DiagnosticsFormatError(InlineDiagnosticsError):
    """Raised when a diagnostics file does not hold a list of diagnostics."""

    def __init__(self, message: str, index: int | None = None):
        self.index = index
        super().__init__(message)
