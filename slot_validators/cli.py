"""
Command-line interface.

Runs a validator over every character of a string and reports which
characters a slot guarded by it would accept.
"""

import argparse
import sys
from typing import List, Optional

from .config.settings import get_settings
from .core.exceptions import InvalidConfigurationError, SlotValidatorError
from .core.factory import get_factory
from .core.interfaces import ISlotValidator
from .core.logging_config import configure_from_settings, get_logger

logger = get_logger(__name__)

EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_CONFIG_ERROR = 2


def build_validator(args: argparse.Namespace) -> ISlotValidator:
    """
    Build the validator selected on the command line.

    Args:
        args: Parsed arguments

    Returns:
        Validator instance

    Raises:
        InvalidConfigurationError: If the name or placeholders are invalid
    """
    settings = get_settings()
    factory = get_factory()
    name = args.validator or settings.default_validator

    if args.placeholders is not None and name != 'masked_digit':
        logger.warning(f"--placeholders only applies to masked_digit; ignored for '{name}'")
    if (args.no_english or args.no_russian) and name != 'letter':
        logger.warning(f"--no-english/--no-russian only apply to letter; ignored for '{name}'")

    if name == 'masked_digit':
        placeholders = args.placeholders
        if placeholders is None:
            placeholders = settings.mask_placeholder_chars
        if not placeholders:
            raise InvalidConfigurationError(
                "placeholder characters must not be empty",
                value=placeholders
            )
        return factory.create(name, *placeholders)

    if name == 'letter':
        return factory.create(
            name,
            supports_english=not args.no_english,
            supports_russian=not args.no_russian
        )

    return factory.create(name)


def check_text(validator: ISlotValidator, text: str) -> bool:
    """
    Print the verdict for each character of text.

    Args:
        validator: Validator to apply
        text: Characters to check

    Returns:
        True if every character was accepted
    """
    all_accepted = True
    for char in text:
        accepted = validator.validate(char)
        all_accepted = all_accepted and accepted
        print(f"{char!r}: {'accepted' if accepted else 'rejected'}")
    return all_accepted


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description='Check which characters a slot validator accepts'
    )

    parser.add_argument(
        'text',
        type=str,
        help='Characters to check, one verdict per character'
    )

    parser.add_argument(
        '--validator',
        type=str,
        default=None,
        help='Validator name: any, digit, masked_digit, letter '
             '(default: DEFAULT_VALIDATOR or masked_digit)'
    )

    parser.add_argument(
        '--placeholders',
        type=str,
        default=None,
        help='Placeholder characters for masked_digit '
             '(default: MASK_PLACEHOLDER_CHARS or "Xx*")'
    )

    parser.add_argument(
        '--no-english',
        action='store_true',
        help='letter: do not treat Latin letters as supported'
    )

    parser.add_argument(
        '--no-russian',
        action='store_true',
        help='letter: do not treat Cyrillic letters as supported'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the command line.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = create_parser().parse_args(argv)
    configure_from_settings(get_settings())

    try:
        validator = build_validator(args)
    except SlotValidatorError as e:
        logger.error(f"Invalid validator configuration: {e}")
        return EXIT_CONFIG_ERROR

    logger.debug(f"Checking {len(args.text)} characters with {validator!r}")

    if check_text(validator, args.text):
        return EXIT_ACCEPTED
    return EXIT_REJECTED


if __name__ == '__main__':
    sys.exit(main())
