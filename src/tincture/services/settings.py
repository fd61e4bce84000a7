"""Settings dataclass and JSON persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

from ..editor.text_element import DEFAULT_STROKE_COLOR, TextElement, WrapFunction
from ..render.colors import ColorFilter, ColorSegment
from ..theme.models import APPEARANCES, Appearance
from ..utils.logging import setup_logging

__all__ = ["Settings", "SettingsStore", "configure_logging"]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".tincture"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_VERSION = 1
_ENV_OVERRIDES: Mapping[str, str] = {
    "TINCTURE_THEME": "theme",
    "TINCTURE_STROKE_COLOR": "stroke_color",
    "TINCTURE_LOG_DIR": "log_dir",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "TINCTURE_DEBUG_LOGGING": "debug_logging",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}


@dataclass(slots=True)
class Settings:
    """User-configurable rendering and diagnostics settings."""

    theme: Appearance = "light"
    stroke_color: str = DEFAULT_STROKE_COLOR
    debug_logging: bool = False
    log_dir: str | None = None

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug_logging else logging.INFO

    def create_element(self, original_text: str = "", *, wrap: WrapFunction | None = None) -> TextElement:
        """Return a new element using the configured stroke color."""

        text = wrap(original_text) if wrap is not None else None
        return TextElement(original_text=original_text, text=text, stroke_color=self.stroke_color)

    def per_char_colors(
        self, element: TextElement, dark_mode_filter: ColorFilter | None = None
    ) -> list[str] | None:
        return element.per_char_colors(self.theme, dark_mode_filter)

    def line_segments(
        self, element: TextElement, dark_mode_filter: ColorFilter | None = None
    ) -> list[list[ColorSegment]]:
        """Return the draw segments of ``element`` for the configured theme."""

        return element.line_segments(self.theme, dark_mode_filter)


class SettingsStore:
    """Persistence adapter for :class:`Settings`."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> Settings:
        """Load settings from disk, applying runtime and environment overrides when present."""

        payload = self._read_payload()
        settings = Settings()
        if payload:
            try:
                settings = Settings(**_filter_fields(payload))
            except TypeError as exc:
                LOGGER.warning("Settings payload contained unexpected data: %s", exc)
                settings = Settings()

        if overrides:
            settings = self._apply_overrides(settings, overrides, source="runtime")

        settings = self._apply_env_overrides(settings)
        return _validate(settings)

    def save(self, settings: Settings) -> Path:
        """Persist settings to disk with atomic file writes."""

        payload: Dict[str, Any] = asdict(settings)
        payload["version"] = _SETTINGS_VERSION
        body = json.dumps(payload, indent=2, sort_keys=True)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Settings saved to %s (theme=%s)", self._path, settings.theme)
        return self._path

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("Settings file %s must contain a JSON object", self._path)
            return {}
        return data

    def _apply_overrides(
        self,
        settings: Settings,
        overrides: Mapping[str, Any],
        *,
        source: str,
    ) -> Settings:
        filtered = {key: value for key, value in _filter_fields(overrides).items() if value is not None}
        if filtered:
            LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
            settings = replace(settings, **filtered)
        return settings

    def _apply_env_overrides(self, settings: Settings) -> Settings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="environment")
        return settings


def configure_logging(settings: Settings, *, console: bool = True, force: bool = False) -> Path:
    """Install the rotating log handlers described by ``settings``."""

    return setup_logging(settings.log_level, log_dir=settings.log_dir, console=console, force=force)


def _filter_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    allowed = {field.name for field in fields(Settings)}
    return {key: value for key, value in payload.items() if key in allowed}


def _validate(settings: Settings) -> Settings:
    theme = str(settings.theme).strip().lower()
    if theme not in APPEARANCES:
        LOGGER.warning("Unknown theme %r; falling back to 'light'", settings.theme)
        theme = "light"
    stroke_color = str(settings.stroke_color or "").strip() or DEFAULT_STROKE_COLOR
    if theme != settings.theme or stroke_color != settings.stroke_color:
        settings = replace(settings, theme=theme, stroke_color=stroke_color)  # type: ignore[arg-type]
    return settings
