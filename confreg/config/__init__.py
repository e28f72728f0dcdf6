"""
Settings management for the confreg package.

This module provides:
- RegistrySettings: settings a registry and the package logging are built from
- SettingsProvider: abstract provider interface with file and runtime implementations
"""

from .settings import RegistrySettings
from .provider import SettingsProvider, FileSettingsProvider, RuntimeSettingsProvider


def load_settings(config_file: str = None) -> RegistrySettings:
    """Load settings from a YAML file, or the defaults when no file is given."""
    if config_file is None:
        return RuntimeSettingsProvider().get_settings()
    return FileSettingsProvider(config_file).get_settings()


__all__ = [
    'RegistrySettings',
    'SettingsProvider',
    'FileSettingsProvider',
    'RuntimeSettingsProvider',
    'load_settings'
]
