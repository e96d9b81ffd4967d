"""
Validators module for slot input.

Provides the single-character validators and the set that groups them.
"""

from .slot_validators import (
    GenerousValidator,
    DigitValidator,
    MaskedDigitValidator,
    LetterValidator,
    DEFAULT_DIGIT_MASK_CHARS,
)
from .validator_set import SlotValidatorSet

__all__ = [
    'GenerousValidator',
    'DigitValidator',
    'MaskedDigitValidator',
    'LetterValidator',
    'DEFAULT_DIGIT_MASK_CHARS',
    'SlotValidatorSet',
]
