"""Reading diagnostics and panel configuration from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from inline_diagnostics.config import PanelConfig, resolve_config
from inline_diagnostics.errors import ConfigError, DiagnosticsFormatError
from inline_diagnostics.model.diagnostic import Diagnostic

logger = logging.getLogger(__name__)


def load_config_file(path: str | Path | None) -> PanelConfig:
    """Resolve the JSON object at ``path`` over the defaults.

    A missing path or file yields the defaults. A file that exists but does
    not hold a JSON object raises ConfigError.
    """
    if path is None:
        return resolve_config(None)
    config_path = Path(path)
    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return resolve_config(None)

    try:
        source = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{config_path} is not UTF-8 text: {exc}", path=str(config_path)) from exc
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}", path=str(config_path)) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object", path=str(config_path))

    try:
        return resolve_config(data)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ConfigError(f"Invalid value in {config_path}: {exc}", path=str(config_path)) from exc


def parse_diagnostics(data: object) -> list[Diagnostic]:
    """Build diagnostics from a decoded JSON list of diagnostic objects."""
    if not isinstance(data, list):
        raise DiagnosticsFormatError("Diagnostics must be a JSON list")
    diagnostics = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise DiagnosticsFormatError(f"Diagnostic #{index} is not an object", index=index)
        try:
            diagnostics.append(Diagnostic.from_dict(item))
        except (KeyError, TypeError, ValueError) as exc:
            raise DiagnosticsFormatError(
                f"Diagnostic #{index} is malformed: {exc!r}", index=index
            ) from exc
    return diagnostics


def load_diagnostics(path: str | Path) -> list[Diagnostic]:
    """Read a JSON list of diagnostics from ``path``."""
    source = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise DiagnosticsFormatError(f"Invalid JSON in {path}: {exc}") from exc
    return parse_diagnostics(data)
