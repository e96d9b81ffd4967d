"""
Core module providing foundational components for the package.

Includes the validator interface, exceptions, logging and the factory.
"""

from .interfaces import ISlotValidator
from .exceptions import SlotValidatorError, InvalidConfigurationError
from .factory import ValidatorFactory, get_factory, set_factory

__all__ = [
    'ISlotValidator',
    'SlotValidatorError',
    'InvalidConfigurationError',
    'ValidatorFactory',
    'get_factory',
    'set_factory',
]
