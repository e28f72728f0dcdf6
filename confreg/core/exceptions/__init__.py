"""
Core exceptions for the confreg package.

All exceptions derive from ConfRegError. Duplicate registrations are not
errors: the registry logs them and reports failure through its return value.
"""

# Base exceptions
from .base import (
    ConfRegError,
    ConfigurationError,
    SettingsError
)

# Registry exceptions
from .registry import ProviderConstructionError

__all__ = [
    # Base exceptions
    'ConfRegError',
    'ConfigurationError',
    'SettingsError',

    # Registry exceptions
    'ProviderConstructionError'
]
