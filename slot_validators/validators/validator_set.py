"""
Validator set attached to a slot.

A slot accepts a character when any of its validators does. Because
validators compare by configuration, adding the same kind of validator from
several mask definitions keeps a single entry.
"""

from typing import Iterable

from ..core.interfaces import ISlotValidator
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class SlotValidatorSet(set):
    """
    Deduplicating set of validators with any-of semantics.

    An empty set accepts nothing.
    """

    def __init__(self, validators: Iterable[ISlotValidator] = ()):
        super().__init__(validators)

    @classmethod
    def of(cls, *validators: ISlotValidator) -> 'SlotValidatorSet':
        """
        Build a set from validators.

        Args:
            *validators: Validators to include; duplicates collapse

        Returns:
            New SlotValidatorSet
        """
        validator_set = cls(validators)
        if len(validator_set) < len(validators):
            logger.debug(
                f"Collapsed {len(validators)} validators into {len(validator_set)}"
            )
        return validator_set

    def validate(self, value: str) -> bool:
        for validator in self:
            if validator.validate(value):
                return True
        return False

    def __repr__(self) -> str:
        members = ', '.join(sorted(repr(validator) for validator in self))
        return f'SlotValidatorSet({{{members}}})'
