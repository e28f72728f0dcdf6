"""
Registry settings.

This module defines the settings a registry and the package logging are
assembled from: the runtime kind, the default binding priority, logging
options and the initial registry properties.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from confreg.core.enums import RuntimeType, Priorities
from confreg.registry.priority import binding_priority_lookup


@dataclass
class RegistrySettings:
    """
    Settings for building a ConfigurationRegistry.

    The properties mapping seeds the registry properties; the default
    priority is used for providers that do not declare one.
    """

    runtime_type: Optional[RuntimeType] = RuntimeType.SERVER
    default_priority: int = int(Priorities.USER)

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Initial registry properties
    properties: Dict[str, Any] = field(default_factory=dict)

    def priority_lookup(self):
        """Binding priority lookup falling back to ``default_priority``."""
        return binding_priority_lookup(self.default_priority)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'runtime_type': self.runtime_type.value if self.runtime_type else None,
            'default_priority': self.default_priority,
            'log_level': self.log_level,
            'json_logs': self.json_logs,
            'properties': dict(self.properties)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RegistrySettings':
        """Create settings from dictionary."""
        settings = cls()

        if 'runtime_type' in data:
            runtime_type = data['runtime_type']
            if isinstance(runtime_type, str):
                runtime_type = RuntimeType(runtime_type.lower())
            settings.runtime_type = runtime_type or None

        settings.default_priority = int(data.get('default_priority', settings.default_priority))
        settings.log_level = data.get('log_level', settings.log_level)
        settings.json_logs = data.get('json_logs', settings.json_logs)
        settings.properties = dict(data.get('properties') or {})

        return settings
