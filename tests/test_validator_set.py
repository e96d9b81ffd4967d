"""
Tests for SlotValidatorSet.
"""

from slot_validators.core.interfaces import ISlotValidator
from slot_validators.validators import (
    GenerousValidator,
    DigitValidator,
    MaskedDigitValidator,
    LetterValidator,
    SlotValidatorSet,
)


class TestSlotValidatorSet:
    """Test SlotValidatorSet deduplication and any-of validation."""

    def test_duplicates_collapse(self):
        """Test equally configured validators are stored once."""
        validators = SlotValidatorSet.of(
            DigitValidator(),
            DigitValidator(),
            MaskedDigitValidator(),
            MaskedDigitValidator(),
            LetterValidator(True, False),
            LetterValidator(True, False),
        )

        assert len(validators) == 3

    def test_add_existing_does_not_grow(self):
        """Test adding an equal validator leaves the set unchanged."""
        validators = SlotValidatorSet()
        validators.add(GenerousValidator())
        validators.add(GenerousValidator())

        assert len(validators) == 1

    def test_different_configurations_kept(self):
        """Test validators with different configuration are distinct."""
        validators = SlotValidatorSet.of(
            MaskedDigitValidator(),
            MaskedDigitValidator('_'),
            LetterValidator(True, False),
            LetterValidator(False, True),
        )

        assert len(validators) == 4

    def test_any_member_accepts(self):
        """Test a character is accepted if any member accepts it."""
        validators = SlotValidatorSet.of(DigitValidator(), MaskedDigitValidator('_'))

        assert validators.validate('4') is True
        assert validators.validate('_') is True
        assert validators.validate('X') is False

    def test_empty_set_accepts_nothing(self):
        """Test an empty set rejects every character."""
        assert SlotValidatorSet().validate('a') is False

    def test_membership_by_value(self):
        """Test membership uses configuration equality."""
        validators = SlotValidatorSet([LetterValidator()])

        assert LetterValidator(True, True) in validators
        assert LetterValidator(False, True) not in validators

    def test_satisfies_protocol(self):
        """Test the set itself is a slot validator."""
        assert isinstance(SlotValidatorSet(), ISlotValidator)

    def test_repr_is_sorted(self):
        """Test repr lists members in a stable order."""
        validators = SlotValidatorSet.of(GenerousValidator(), DigitValidator())

        assert repr(validators) == 'SlotValidatorSet({DigitValidator(), GenerousValidator()})'
