"""Feature base class."""

from abc import ABC, abstractmethod


class Feature(ABC):
    """
    An optional behaviour that can be switched on for a configuration.

    The registry only tracks features with an enabled flag; configure() is
    invoked by whoever consumes the configuration.
    """

    @abstractmethod
    def configure(self, context) -> bool:
        """Apply the feature to ``context``; return True if it took effect."""
        pass
