"""
Runtime-related enums for the confreg package.
"""

from enum import Enum, IntEnum


class RuntimeType(Enum):
    """Operating context a configuration registry belongs to."""
    CLIENT = "client"
    SERVER = "server"


class Priorities(IntEnum):
    """
    Standard binding priorities.

    Consumers decide whether lower or higher values win; USER is the
    priority of providers that declare none.
    """
    AUTHENTICATION = 1000
    AUTHORIZATION = 2000
    HEADER_DECORATOR = 3000
    ENTITY_CODER = 4000
    USER = 5000
