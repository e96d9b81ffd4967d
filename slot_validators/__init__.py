"""
Single-character validators for formatted input slots.

Each validator answers one question: may this character be entered into
the slot it guards? Validators are immutable values, so equal
configurations collapse into one entry of a SlotValidatorSet.
"""

from .core.exceptions import SlotValidatorError, InvalidConfigurationError
from .core.interfaces import ISlotValidator
from .validators import (
    GenerousValidator,
    DigitValidator,
    MaskedDigitValidator,
    LetterValidator,
    SlotValidatorSet,
)

__version__ = '1.0.0'

__all__ = [
    'SlotValidatorError',
    'InvalidConfigurationError',
    'ISlotValidator',
    'GenerousValidator',
    'DigitValidator',
    'MaskedDigitValidator',
    'LetterValidator',
    'SlotValidatorSet',
]
