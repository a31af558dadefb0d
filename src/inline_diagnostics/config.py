"""Panel configuration: built-in defaults merged with host overrides."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from inline_diagnostics.model.diagnostic import Severity


@dataclass(frozen=True)
class PanelConfig:
    """Fully populated panel configuration, built once per update."""

    panel_bg: str = "#2d4f5e"
    panel_fg: str = "#c0ccd4"
    error_color: str = "#ff6b6b"
    warning_color: str = "#ffd93d"
    info_color: str = "#6bcb77"
    hint_color: str = "#4d96ff"
    arrow: str = "←"
    bullet: str = "●"
    left_cap: str = "\ue0b6"
    right_cap: str = "\ue0b4"
    max_lines: int = 4
    # Unrecognised override keys, kept but unused.
    extra: tuple[tuple[str, Any], ...] = field(default=(), compare=False)

    def color_for(self, severity: Severity) -> str:
        """Bullet color for a severity; unknown severities use the info color."""
        if severity is Severity.ERROR:
            return self.error_color
        if severity is Severity.WARNING:
            return self.warning_color
        if severity is Severity.HINT:
            return self.hint_color
        return self.info_color

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        data.update(dict(self.extra))
        return data


CONFIG_KEYS: frozenset[str] = frozenset(
    f.name for f in fields(PanelConfig) if f.name != "extra"
)

GLYPH_KEYS: tuple[str, ...] = ("arrow", "bullet", "left_cap", "right_cap")

DEFAULT_CONFIG = PanelConfig()


def resolve_config(overrides: Mapping[str, Any] | None = None) -> PanelConfig:
    """Merge ``overrides`` over the defaults with a flat key overwrite.

    Colors are not validated. ``max_lines`` is coerced to int since host
    config sources often hand numbers over as floats; an infinite value
    raises OverflowError. Glyphs must be strings, otherwise TypeError.
    """
    if not overrides:
        return DEFAULT_CONFIG

    known: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for key, value in overrides.items():
        if key in CONFIG_KEYS:
            known[key] = value
        else:
            extra[str(key)] = value

    for key in GLYPH_KEYS:
        if key in known and not isinstance(known[key], str):
            raise TypeError(f"{key} must be a string, got {type(known[key]).__name__}")

    if "max_lines" in known:
        known["max_lines"] = int(known["max_lines"])

    return replace(DEFAULT_CONFIG, extra=tuple(sorted(extra.items())), **known)
