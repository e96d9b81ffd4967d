"""
Slot validators.

Single-character predicates deciding whether a character may be entered
into a slot of a formatted field (phone numbers, dates, card numbers).

Every validator is an immutable value: equally configured instances compare
equal and share a hash, so a SlotValidatorSet keeps only one of them.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Tuple

from ..core.exceptions import InvalidConfigurationError
from ..core.interfaces import ISlotValidator
from ..core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_DIGIT_MASK_CHARS: Tuple[str, ...] = ('X', 'x', '*')

# Inclusive codepoint bounds of the Cyrillic alphabet check ('А' is Cyrillic)
RUSSIAN_FIRST = ord('А')
RUSSIAN_LAST = ord('я')


def _is_char(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 1


class GenerousValidator(ISlotValidator):
    """Allows any character to be input in the slot."""

    def validate(self, value: str) -> bool:
        """
        Accept the character unconditionally.

        Args:
            value: Candidate character (ignored)

        Returns:
            Always True
        """
        return True

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return -56328

    def __repr__(self) -> str:
        return 'GenerousValidator()'


class DigitValidator(ISlotValidator):
    """Allows decimal digits of any script ('7', '٣', '७', '７')."""

    def validate(self, value: str) -> bool:
        """
        Validate that the character is a decimal digit.

        Args:
            value: Candidate character

        Returns:
            True for a single Unicode decimal digit (category Nd), False otherwise
        """
        return _is_char(value) and value.isdecimal()

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return -56329

    def __repr__(self) -> str:
        return 'DigitValidator()'


@dataclass(frozen=True, init=False, repr=False)
class MaskedDigitValidator(ISlotValidator):
    """
    Allows digits and placeholder characters standing in for hidden digits.

    Used for slots where part of a number is masked, e.g. a card number
    displayed as ``**** **** **** 1234``.

    Digit acceptance is delegated to a DigitValidator. Two instances are equal
    only when their placeholders match in the same order; a MaskedDigitValidator
    never equals a plain DigitValidator.
    """

    placeholders: Tuple[str, ...]

    _digits: ClassVar[DigitValidator] = DigitValidator()

    def __init__(self, *placeholders: Optional[str]):
        """
        Initialize with placeholder characters.

        Args:
            *placeholders: Characters accepted besides digits. Defaults to
                'X', 'x' and '*' when none are given.

        Raises:
            InvalidConfigurationError: If None is passed in place of the
                placeholders or a placeholder is not a single character
        """
        if len(placeholders) == 1 and placeholders[0] is None:
            raise InvalidConfigurationError("placeholder set must not be null")

        if not placeholders:
            placeholders = DEFAULT_DIGIT_MASK_CHARS
        else:
            for char in placeholders:
                if not _is_char(char):
                    raise InvalidConfigurationError(
                        f"placeholder must be a single character, got {char!r}",
                        value=char
                    )
            logger.debug(f"MaskedDigitValidator with placeholders {placeholders!r}")

        # Frozen dataclass: assign through object, as the generated __init__ does
        object.__setattr__(self, 'placeholders', tuple(placeholders))

    def validate(self, value: str) -> bool:
        """
        Validate that the character is a digit or a placeholder.

        Args:
            value: Candidate character

        Returns:
            True if the character is a digit or equals a placeholder
        """
        if self._digits.validate(value):
            return True

        for char in self.placeholders:
            if char == value:
                return True

        return False

    def __repr__(self) -> str:
        args = ', '.join(repr(char) for char in self.placeholders)
        return f'MaskedDigitValidator({args})'


@dataclass(frozen=True)
class LetterValidator(ISlotValidator):
    """
    Allows letters of the English and/or Russian alphabet.

    Each flag must *match* membership in its alphabet, so a disabled alphabet
    admits everything outside it: ``LetterValidator(True, False)`` accepts
    any non-Cyrillic character through the Russian term. With both flags
    False the validator accepts any character that is in neither alphabet.

    The Russian check is the raw codepoint range 'А'..'я' (U+0410..U+044F);
    'Ё' and 'ё' lie outside it.
    """

    supports_english: bool = True
    supports_russian: bool = True

    def validate(self, value: str) -> bool:
        """
        Validate the character against the alphabet flags.

        Args:
            value: Candidate character

        Returns:
            True if either alphabet flag matches the character's membership
        """
        if not _is_char(value):
            return False
        return self._validate_english(value) or self._validate_russian(value)

    def _validate_english(self, value: str) -> bool:
        return self.supports_english == is_english_letter(value)

    def _validate_russian(self, value: str) -> bool:
        return self.supports_russian == is_russian_letter(value)


def is_english_letter(value: str) -> bool:
    """Check whether a character is in A-Z or a-z."""
    return 'A' <= value <= 'Z' or 'a' <= value <= 'z'


def is_russian_letter(value: str) -> bool:
    """Check whether a character's codepoint is in the 'А'..'я' range."""
    return RUSSIAN_FIRST <= ord(value) <= RUSSIAN_LAST
