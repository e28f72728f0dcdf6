"""
Provider references and contract helpers.

A provider handed to the registry is either an instance or a class that
still has to be created. Both forms are modelled explicitly by ClassRef and
Instance; raw objects are normalised with as_provider_ref.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from confreg.core.exceptions import ProviderConstructionError


@dataclass(frozen=True)
class ClassRef:
    """A provider given by its class, created on registration."""
    cls: type


@dataclass(frozen=True)
class Instance:
    """A provider given as a ready instance."""
    obj: Any


ProviderRef = Union[ClassRef, Instance]


def as_provider_ref(provider: Any) -> ProviderRef:
    """Wrap a raw class or instance into its ProviderRef variant."""
    if isinstance(provider, (ClassRef, Instance)):
        return provider
    if isinstance(provider, type):
        return ClassRef(provider)
    return Instance(provider)


def is_assignable(contract: Any, cls: type) -> bool:
    """
    Check whether instances of ``cls`` satisfy ``contract``.

    Works for plain classes, ABCs with registered virtual subclasses and
    ``runtime_checkable`` protocols. Anything issubclass cannot check
    is reported as not assignable.
    """
    try:
        return issubclass(cls, contract)
    except TypeError:
        return False


def init_contracts_map(priority: int, *contracts: type) -> Dict[type, int]:
    """Map every contract to the same binding priority."""
    return {contract: priority for contract in contracts}


def create_provider(cls: type) -> Any:
    """
    Instantiate a provider class through its no-argument constructor.

    Raises:
        ProviderConstructionError: for any failure, chained to the cause
    """
    try:
        return cls()
    except Exception as e:
        raise ProviderConstructionError(cls, f"{type(e).__name__}: {e}") from e
