# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prompt Toolkit validators built from argsparse value rules.

Programs that prompt for a missing option value interactively can reuse the
rules of the command line, so a prompted value is accepted exactly when the
same value would be accepted after the option.

Included Validators:
- type_validator: Accepts values of a built-in or registered type.
- option_value_validator: Applies every value rule of a declared option
  (enumerated set or type, then its value check hook).
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_toolkit.validation import Validator

from argsparse.exceptions import ConfigurationError, NoValidatorError
from argsparse.option_types import TypeRegistry

if TYPE_CHECKING:
    from argsparse.option_parser import OptionParser


def type_validator(type_name: str, types: TypeRegistry | None = None) -> Validator:
    """
    Validator for values of a named type.

    Raises:
        NoValidatorError: If the type is neither built-in nor registered in `types`.
    """
    types = types or TypeRegistry()
    if not types.is_known(type_name):
        raise NoValidatorError(
            f"{type_name.lower()}: type has no validation function. This is a bug."
        )

    def validate(text: str) -> bool:
        return types.check(type_name, text)

    return Validator.from_callable(
        validate, error_message=f"Invalid input. Expected a value of type {type_name}."
    )


def option_value_validator(parser: OptionParser, option: str) -> Validator:
    """Validator for the values of a declared value option."""
    spec = parser.registry[option]
    if not spec.expects_value:
        raise ConfigurationError(f"{option}: option does not take a value.")

    values = parser.registry.get_values(option)
    if values is not None:
        error_message = f"Invalid input. Choices: {{{', '.join(values)}}}."
    else:
        error_message = f"Invalid value for option {option}."

    def validate(text: str) -> bool:
        return parser.check_value(option, text)

    return Validator.from_callable(validate, error_message=error_message)
