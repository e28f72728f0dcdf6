from confreg.core import (
    ConfRegError, ConfigurationError, SettingsError, ProviderConstructionError,
    RuntimeType, Priorities
)
from confreg.config import RegistrySettings, load_settings
from confreg.registry import (
    Configuration, ConfigurationRegistry, ClassRef, Instance, Feature,
    priority, get_binding_priority, init_contracts_map, create_provider
)
from confreg.logger import init_logger, get_confreg_logger


def build_registry(config_file: str = None) -> ConfigurationRegistry:
    """Load settings, configure logging and return a registry built from them."""
    settings = load_settings(config_file)
    init_logger(settings)
    return ConfigurationRegistry.from_settings(settings)
