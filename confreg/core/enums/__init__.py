"""
Core enums for the confreg package.
"""

from .runtime import (
    RuntimeType,
    Priorities
)

__all__ = [
    'RuntimeType',
    'Priorities'
]
