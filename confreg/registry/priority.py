"""
Binding priority declarations.

Provider classes declare their priority with the ``priority`` decorator.
get_binding_priority is the default lookup the registry uses when it has to
re-derive bindings for an inherited provider.
"""

from typing import Callable

from confreg.core.enums import Priorities

PRIORITY_ATTRIBUTE = "__binding_priority__"

PriorityLookup = Callable[[type], int]


def priority(value: int):
    """
    Class decorator recording the binding priority of a provider.

    Example:
        >>> @priority(Priorities.AUTHENTICATION)
        ... class TokenFilter:
        ...     pass
    """
    def decorator(cls):
        setattr(cls, PRIORITY_ATTRIBUTE, int(value))
        return cls
    return decorator


def get_binding_priority(cls: type, default: int = Priorities.USER) -> int:
    """Return the declared priority of ``cls``, inherited through its MRO, or ``default``."""
    return int(getattr(cls, PRIORITY_ATTRIBUTE, default))


def binding_priority_lookup(default: int) -> PriorityLookup:
    """Build a priority lookup falling back to ``default`` instead of USER."""
    def lookup(cls: type) -> int:
        return get_binding_priority(cls, default)
    return lookup
