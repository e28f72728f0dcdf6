"""
Registry-specific exceptions for the confreg package.
"""

from .base import ConfigurationError


class ProviderConstructionError(ConfigurationError):
    """
    Raised when a provider class cannot be instantiated without arguments.

    Every failure cause (missing no-argument constructor, constructor raising,
    non-class argument) ends up here; the underlying exception is chained.
    """

    def __init__(self, provider_class, reason: str = None):
        self.provider_class = provider_class
        name = getattr(provider_class, '__qualname__', repr(provider_class))
        super().__init__(config_key=name, reason=reason or "provider could not be created")
