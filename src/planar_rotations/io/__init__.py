"""Settings file IO."""

from .settings_loader import SettingsLoader, load_settings

__all__ = ["SettingsLoader", "load_settings"]
