"""
Provider and feature registry.

This module provides:
- Configuration: read interface of a configuration
- ConfigurationRegistry: mutable registry of providers, features and properties
- ClassRef / Instance: explicit provider reference variants
- Feature: base class of feature objects
- priority / get_binding_priority: binding priority declarations
"""

from .configuration import Configuration, ConfigurationRegistry
from .contracts import (
    ClassRef, Instance, ProviderRef, as_provider_ref,
    is_assignable, init_contracts_map, create_provider
)
from .feature import Feature
from .priority import priority, get_binding_priority, binding_priority_lookup

__all__ = [
    # Registry
    'Configuration',
    'ConfigurationRegistry',

    # Provider references and helpers
    'ClassRef',
    'Instance',
    'ProviderRef',
    'as_provider_ref',
    'is_assignable',
    'init_contracts_map',
    'create_provider',

    # Features
    'Feature',

    # Priorities
    'priority',
    'get_binding_priority',
    'binding_priority_lookup'
]
