"""Service layer helpers (settings persistence, logging setup)."""

from .settings import Settings, SettingsStore, configure_logging

__all__ = ["Settings", "SettingsStore", "configure_logging"]
