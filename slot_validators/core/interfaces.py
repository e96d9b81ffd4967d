"""
Interface definitions using Python Protocols.

A slot validator is anything with a ``validate`` method taking exactly one
character. Protocols keep the family open: a caller can supply its own
predicate without inheriting from a base class, and it will still sit in a
SlotValidatorSet next to the built-in validators.

Example usage:
    class VowelValidator:
        def validate(self, value: str) -> bool:
            return value in 'aeiou'

        def __eq__(self, other):
            return isinstance(other, VowelValidator)

        def __hash__(self):
            return hash(VowelValidator)

    validator: ISlotValidator = VowelValidator()
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ISlotValidator(Protocol):
    """
    Protocol defining the contract for single-character validators.

    Implementations must be immutable and define value-based ``__eq__`` and
    ``__hash__`` so that equally configured validators deduplicate inside a
    set.

    Implementations:
    - GenerousValidator: accepts any character
    - DigitValidator: accepts Unicode decimal digits
    - MaskedDigitValidator: accepts digits or placeholder characters
    - LetterValidator: accepts Latin and/or Cyrillic letters
    - SlotValidatorSet: accepts what any member accepts
    """

    def validate(self, value: str) -> bool:
        """
        Decide whether a character may be entered into the slot.

        Args:
            value: The candidate character

        Returns:
            True if the character is acceptable, False otherwise

        Raises:
            No exceptions should be raised. Unacceptable input returns False.
        """
        ...
