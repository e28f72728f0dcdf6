"""
Configuration registry for providers, features and properties.

This module provides the read interface of a configuration (Configuration)
and the mutable registry implementing it (ConfigurationRegistry). A registry
is populated during setup and read by the runtime afterwards; it does no
locking of its own.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from confreg.core.enums import RuntimeType
from confreg.logger import get_confreg_logger
from .contracts import (
    ClassRef, Instance, as_provider_ref, create_provider,
    init_contracts_map, is_assignable
)
from .feature import Feature
from .priority import PriorityLookup, get_binding_priority


class Configuration(ABC):
    """
    Read-only view of a configuration.

    Anything implementing this interface can act as the parent of a
    ConfigurationRegistry.
    """

    @abstractmethod
    def get_classes(self) -> Set[type]:
        """Concrete types of all registered providers and features."""
        pass

    @abstractmethod
    def get_contracts(self, cls: type) -> Mapping[type, int]:
        """Contract to priority mapping of the first instance assignable to ``cls``."""
        pass

    @abstractmethod
    def get_instances(self) -> Tuple[Any, ...]:
        """All registered provider and feature instances, without duplicates."""
        pass

    @abstractmethod
    def get_properties(self) -> Mapping[str, Any]:
        pass

    @abstractmethod
    def get_property(self, name: str) -> Any:
        pass

    @abstractmethod
    def get_property_names(self) -> Iterable[str]:
        pass

    @abstractmethod
    def get_runtime_type(self) -> Optional[RuntimeType]:
        pass

    @abstractmethod
    def is_enabled(self, feature) -> bool:
        """Check a feature instance or feature class."""
        pass

    @abstractmethod
    def is_registered(self, obj) -> bool:
        """Check a provider or feature instance, or a class."""
        pass


class ConfigurationRegistry(Configuration):
    """
    Registry of properties, providers with their contracts, and features.

    Providers are keyed by equality and carry a mapping of contract type to
    binding priority. Only contracts the provider's class satisfies are kept.
    Features carry an enabled flag. The runtime type is fixed at construction.

    Instances are iterated in insertion order, providers before features;
    get_contracts returns the metadata of the first match in that order.

    Example:
        >>> registry = ConfigurationRegistry(RuntimeType.SERVER)
        >>> registry.register_with_priority(JsonWriter, Priorities.USER, MessageWriter)
        True
        >>> registry.get_contracts(MessageWriter)
        mappingproxy({<class 'MessageWriter'>: 5000})
    """

    def __init__(self, runtime_type: Optional[RuntimeType] = None):
        self._runtime_type = runtime_type
        self._props: Dict[str, Any] = {}
        # Entries are matched by ==, so unhashable value objects are accepted
        self._providers: List[Tuple[Any, Dict[type, int]]] = []
        self._features: List[Tuple[Feature, bool]] = []
        self.logger = get_confreg_logger(component="ConfigurationRegistry")

    @classmethod
    def from_parent(cls, parent: Optional[Configuration], default_contracts: Iterable[type] = (),
                    priority_lookup: PriorityLookup = get_binding_priority) -> 'ConfigurationRegistry':
        """
        Build a registry inheriting the state of ``parent``.

        Features keep the enabled flag the parent reports. Providers keep the
        contracts the parent holds for their class; providers without any are
        bound to ``default_contracts`` at the priority ``priority_lookup``
        returns for their class. Classes the parent knows without an instance
        are created and inherited the same way.

        Raises:
            ProviderConstructionError: if such a class cannot be created
        """
        if parent is None:
            return cls()

        registry = cls(parent.get_runtime_type())
        default_contracts = tuple(default_contracts)

        provider_classes = set(parent.get_classes())
        for obj in parent.get_instances():
            if isinstance(obj, Feature):
                registry.set_feature(obj, parent.is_enabled(obj))
            else:
                registry._register_parent_provider(obj, parent, default_contracts, priority_lookup)
            provider_classes.discard(type(obj))

        for provider_class in sorted(provider_classes, key=lambda c: (c.__module__, c.__qualname__)):
            registry._register_parent_provider(
                create_provider(provider_class), parent, default_contracts, priority_lookup
            )

        registry._props.update(parent.get_properties())

        registry.logger.debug(
            "Registry inherited from parent",
            providers=len(registry._providers),
            features=len(registry._features),
            properties=len(registry._props)
        )
        return registry

    @classmethod
    def from_settings(cls, settings) -> 'ConfigurationRegistry':
        """Build a fresh registry from RegistrySettings."""
        registry = cls(settings.runtime_type)
        for name, value in settings.properties.items():
            registry.set_property(name, value)
        return registry

    def _register_parent_provider(self, provider, parent: Configuration,
                                  default_contracts: Tuple[type, ...],
                                  priority_lookup: PriorityLookup):
        contracts = parent.get_contracts(type(provider))
        if contracts:
            metadata = self._provider_metadata(provider)
            if metadata is None:
                self._providers.append((provider, dict(contracts)))
            else:
                metadata.clear()
                metadata.update(contracts)
        else:
            self.register_with_priority(
                Instance(provider), priority_lookup(type(provider)), *default_contracts
            )

    def _provider_metadata(self, provider) -> Optional[Dict[type, int]]:
        for obj, metadata in self._providers:
            if obj == provider:
                return metadata
        return None

    def _feature_flag(self, feature) -> Optional[bool]:
        for obj, enabled in self._features:
            if obj == feature:
                return enabled
        return None

    # Queries

    def get_classes(self) -> Set[type]:
        return {type(obj) for obj in self.get_instances()}

    def get_contracts(self, cls: type) -> Mapping[type, int]:
        for obj in self.get_instances():
            if is_assignable(cls, type(obj)):
                # Features carry no contract metadata
                metadata = self._provider_metadata(obj)
                return MappingProxyType(metadata if metadata is not None else {})
        return MappingProxyType({})

    def get_instances(self) -> Tuple[Any, ...]:
        instances: List[Any] = []
        for obj, _ in [*self._providers, *self._features]:
            if not any(seen == obj for seen in instances):
                instances.append(obj)
        return tuple(instances)

    def get_properties(self) -> Mapping[str, Any]:
        return MappingProxyType(self._props)

    def get_property(self, name: str) -> Any:
        return self._props.get(name)

    def get_property_names(self) -> Iterable[str]:
        return self._props.keys()

    def get_runtime_type(self) -> Optional[RuntimeType]:
        return self._runtime_type

    @property
    def runtime_type(self) -> Optional[RuntimeType]:
        return self._runtime_type

    def is_enabled(self, feature) -> bool:
        """
        Check whether a feature is enabled.

        For an instance only its presence counts, not the enabled flag it was
        set with. For a class, true if it is a subclass of the class of some
        registered feature.
        """
        if isinstance(feature, type):
            return any(issubclass(feature, type(f)) for f, _ in self._features)
        return self._feature_flag(feature) is not None

    def is_registered(self, obj) -> bool:
        """
        Instances match by equality, classes by exact type.

        A class object registered as ``Instance(cls)`` is found with
        ``is_registered(Instance(cls))``; plain ``is_registered(cls)`` is the
        class form and looks for instances of ``cls``.
        """
        if isinstance(obj, Instance):
            return self._is_instance_registered(obj.obj)
        if isinstance(obj, ClassRef):
            return self._is_class_registered(obj.cls)
        if isinstance(obj, type):
            return self._is_class_registered(obj)
        return self._is_instance_registered(obj)

    def _is_class_registered(self, cls: type) -> bool:
        return any(type(obj) is cls for obj in self.get_instances())

    def _is_instance_registered(self, instance) -> bool:
        return any(obj == instance for obj in self.get_instances())

    # Mutation

    def set_property(self, name: Optional[str], value: Any):
        """Store a property; an empty name or a None value removes the entry."""
        if not name or value is None:
            self._props.pop(name, None)
        else:
            self._props[name] = value

    def set_feature(self, feature: Feature, enabled: bool = True):
        for index, (obj, _) in enumerate(self._features):
            if obj == feature:
                self._features[index] = (obj, enabled)
                return
        self._features.append((feature, enabled))

    def register_with_priority(self, provider, priority: int, *contracts: type) -> bool:
        """Register ``provider`` for every contract at the same priority."""
        return self.register(provider, init_contracts_map(priority, *contracts))

    def register(self, provider, contracts: Mapping[type, int]) -> bool:
        """
        Register a provider instance or class with its contracts.

        A class is instantiated through its no-argument constructor. Contracts
        the provider's class does not satisfy are dropped. Repeated metadata
        for the same provider is merged.

        Args:
            provider: Instance, class, or an explicit Instance/ClassRef
            contracts: Mapping of contract type to binding priority

        Returns:
            False if the class or instance is already registered, True otherwise

        Raises:
            ProviderConstructionError: if a class cannot be instantiated
        """
        ref = as_provider_ref(provider)
        if isinstance(ref, ClassRef):
            if self._is_class_registered(ref.cls):
                self.logger.warning(
                    "Provider class has already been registered",
                    provider_class=ref.cls.__qualname__
                )
                return False
            instance = create_provider(ref.cls)
        else:
            instance = ref.obj

        if self._is_instance_registered(instance):
            self.logger.warning(
                "Provider has already been registered",
                provider_class=type(instance).__qualname__
            )
            return False

        metadata = self._provider_metadata(instance)
        if metadata is None:
            metadata = {}
            self._providers.append((instance, metadata))
        for contract, priority in contracts.items():
            if is_assignable(contract, type(instance)):
                metadata[contract] = priority

        self.logger.debug(
            "Provider registered",
            provider_class=type(instance).__qualname__,
            contracts=[getattr(c, '__qualname__', repr(c)) for c in metadata]
        )
        return True
