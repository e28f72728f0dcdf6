"""
Settings provider base classes and implementations.

Providers hand out RegistrySettings; the file provider reads them from a
YAML document, the runtime provider keeps them in memory.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
from pathlib import Path

import yaml

from confreg.core.exceptions import SettingsError
from confreg.logger import get_confreg_logger
from .settings import RegistrySettings


class SettingsProvider(ABC):
    """
    Abstract base class for settings providers.

    Defines the interface that all settings providers must implement.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = get_confreg_logger(component=f"SettingsProvider_{name}")

    @abstractmethod
    def get_settings(self) -> RegistrySettings:
        """Get current settings."""
        pass

    @abstractmethod
    def update_settings(self, updates: Dict[str, Any]) -> RegistrySettings:
        """Update settings with new values."""
        pass

    @abstractmethod
    def reset_to_defaults(self) -> None:
        """Reset settings to defaults."""
        pass


class FileSettingsProvider(SettingsProvider):
    """
    File-based settings provider that reads from a YAML file.

    A missing file yields the default settings.
    """

    def __init__(self, config_file: str, name: str = "file"):
        super().__init__(name)
        self.config_file = Path(config_file)
        self._config_cache: Optional[Dict[str, Any]] = None
        self._last_modified: Optional[float] = None

    def get_settings(self) -> RegistrySettings:
        """Get current settings from file."""
        self._refresh_cache()
        return RegistrySettings.from_dict(self._config_cache or {})

    def update_settings(self, updates: Dict[str, Any]) -> RegistrySettings:
        """Update settings and save them to file."""
        current = self.get_settings().to_dict()
        current.update(updates)

        # Round-trip through the dataclass so bad values fail before writing
        settings = RegistrySettings.from_dict(current)
        self._save_config(settings.to_dict())
        return settings

    def reset_to_defaults(self) -> None:
        """Reset to defaults by removing the settings file."""
        if self.config_file.exists():
            self.config_file.unlink()

        self._config_cache = None
        self._last_modified = None
        self.logger.info("Settings reset", config_file=str(self.config_file))

    def _refresh_cache(self):
        """Refresh settings cache if the file has changed."""
        if not self.config_file.exists():
            self._config_cache = None
            self._last_modified = None
            return

        current_mtime = self.config_file.stat().st_mtime
        if self._last_modified is not None and current_mtime <= self._last_modified:
            return

        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self.logger.error("Failed to read settings file", config_file=str(self.config_file), error=str(e))
            raise SettingsError(str(self.config_file), str(e)) from e

        if not isinstance(data, dict):
            raise SettingsError(str(self.config_file), "top level must be a mapping")

        self._config_cache = data
        self._last_modified = current_mtime

    def _save_config(self, config: Dict[str, Any]):
        """Save settings to file."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w') as f:
            yaml.safe_dump(config, f, default_flow_style=False, indent=2)

        self._config_cache = config
        self._last_modified = self.config_file.stat().st_mtime


class RuntimeSettingsProvider(SettingsProvider):
    """
    Runtime settings provider that keeps settings in memory.
    """

    def __init__(self, initial_settings: Optional[RegistrySettings] = None, name: str = "runtime"):
        super().__init__(name)
        self._settings = initial_settings or RegistrySettings()

    def get_settings(self) -> RegistrySettings:
        """Get current settings from memory."""
        return RegistrySettings.from_dict(self._settings.to_dict())

    def update_settings(self, updates: Dict[str, Any]) -> RegistrySettings:
        """Update settings in memory."""
        current = self._settings.to_dict()
        current.update(updates)
        self._settings = RegistrySettings.from_dict(current)
        return self.get_settings()

    def reset_to_defaults(self) -> None:
        """Reset to default settings."""
        self._settings = RegistrySettings()
