"""
Shared pytest configuration and fixtures for the confreg tests.
"""

import pytest

from confreg.core.enums import RuntimeType
from confreg.registry import ConfigurationRegistry

from sample_providers import (
    MessageReader, MessageWriter, JsonProvider, TextWriter, LoggingFeature
)


@pytest.fixture
def server_registry():
    """An empty server-side registry."""
    return ConfigurationRegistry(RuntimeType.SERVER)


@pytest.fixture
def populated_registry(server_registry):
    """
    A registry holding a writer, a reader/writer and one feature,
    registered in that order.
    """
    server_registry.register(TextWriter(), {MessageWriter: 1})
    server_registry.register(JsonProvider(), {MessageReader: 2, MessageWriter: 2})
    server_registry.set_feature(LoggingFeature(), True)
    server_registry.set_property("timeout", 30)
    return server_registry
