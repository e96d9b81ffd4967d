"""
Factory for building validators by name.

Lets callers (the CLI, configuration files, mask definitions) refer to a
validator with a short string instead of importing its class.
"""

from typing import Callable, Dict, List, Optional

from .exceptions import InvalidConfigurationError
from .interfaces import ISlotValidator
from .logging_config import get_logger

logger = get_logger(__name__)

ValidatorFactoryFunc = Callable[..., ISlotValidator]


class ValidatorFactory:
    """
    Registry mapping validator names to constructors.

    New factories start with the built-in validators registered.
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize factory.

        Args:
            register_defaults: Register the built-in validators
        """
        self._registry: Dict[str, ValidatorFactoryFunc] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self):
        # Imported here: the validators package depends on core
        from ..validators.slot_validators import (
            GenerousValidator,
            DigitValidator,
            MaskedDigitValidator,
            LetterValidator,
        )

        self.register('any', GenerousValidator)
        self.register('digit', DigitValidator)
        self.register('masked_digit', MaskedDigitValidator)
        self.register('letter', LetterValidator)

    def register(self, name: str, factory_func: ValidatorFactoryFunc):
        """
        Register a validator factory, replacing any previous entry.

        Args:
            name: Validator name
            factory_func: Callable returning a validator
        """
        if name in self._registry:
            logger.debug(f"Replacing validator factory '{name}'")
        self._registry[name] = factory_func

    def create(self, name: str, *args, **kwargs) -> ISlotValidator:
        """
        Create a validator instance.

        Args:
            name: Validator name
            *args: Positional arguments for the factory function
            **kwargs: Keyword arguments for the factory function

        Returns:
            Validator instance

        Raises:
            InvalidConfigurationError: If no factory is registered under name
        """
        if name not in self._registry:
            raise InvalidConfigurationError(
                f"Validator '{name}' not registered (known: {', '.join(self.names())})",
                value=name
            )

        return self._registry[name](*args, **kwargs)

    def names(self) -> List[str]:
        """Get registered validator names, sorted."""
        return sorted(self._registry)

    def is_registered(self, name: str) -> bool:
        """Check whether a validator name is registered."""
        return name in self._registry


# Global factory instance (can be replaced for testing)
_default_factory: Optional[ValidatorFactory] = None


def get_factory() -> ValidatorFactory:
    """Get the default factory instance."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ValidatorFactory()
    return _default_factory


def set_factory(factory: Optional[ValidatorFactory]):
    """Set the default factory instance (useful for testing)."""
    global _default_factory
    _default_factory = factory
