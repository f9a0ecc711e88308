# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argsparse.

Two families of errors exist. `ConfigurationError` subclasses signal programmer
mistakes made while declaring options (bad option names, unknown properties,
short option conflicts, missing type validators). They are meant to be loud and
are never converted into a parse failure.

`ParseError` subclasses signal bad user input on the command line. The dispatch
loop raises them, and `OptionParser.parse()` turns any of them into a single
`ParseFailure` after printing the message and invoking usage.

Exception Hierarchy:
- ArgsparseError
    ├── ConfigurationError
    │   ├── InvalidOptionNameError
    │   ├── OptionAlreadyDefinedError
    │   ├── UnknownOptionError
    │   ├── UnknownPropertyError
    │   ├── InvalidPropertyValueError
    │   ├── ShortOptionConflictError
    │   ├── NoValidatorError
    │   └── AliasCycleError
    ├── ParseError
    │   ├── OptionSyntaxError
    │   ├── ValidationError
    │   ├── ExclusionError
    │   ├── ArityError
    │   └── MandatoryMissingError
    └── ParseFailure
"""


class ArgsparseError(Exception):
    """Base exception for argsparse."""


class ConfigurationError(ArgsparseError):
    """Exception raised when options are declared or configured incorrectly."""


class InvalidOptionNameError(ConfigurationError):
    """Exception raised when an option name has characters outside [A-Za-z0-9_-]."""


class OptionAlreadyDefinedError(ConfigurationError):
    """Exception raised when an option with the same long name already exists."""


class UnknownOptionError(ConfigurationError):
    """Exception raised when a property or hook targets an undefined option."""


class UnknownPropertyError(ConfigurationError):
    """Exception raised when a property token is not recognized."""


class InvalidPropertyValueError(ConfigurationError):
    """Exception raised when a property payload is empty or has forbidden characters."""


class ShortOptionConflictError(ConfigurationError):
    """Exception raised when a short letter is already claimed by another option."""


class NoValidatorError(ConfigurationError):
    """Exception raised when a type has neither a built-in nor a registered validator."""


class AliasCycleError(ConfigurationError):
    """Exception raised when alias expansion comes back to an option being expanded."""


class ParseError(ArgsparseError):
    """Exception raised when the command line cannot be parsed."""


class OptionSyntaxError(ParseError):
    """Exception raised when the tokenizer rejects the shape of the command line."""


class ValidationError(ParseError):
    """Exception raised when a value is rejected by a type, value set or hook."""


class ExclusionError(ParseError):
    """Exception raised when two mutually exclusive options are both given."""

    def __init__(self, option: str, excluded_by: str) -> None:
        self.option = option
        self.excluded_by = excluded_by
        super().__init__(f"{option}: option excluded by other option ({excluded_by}).")


class ArityError(ParseError):
    """Exception raised when the positional parameter count is out of bounds."""


class MandatoryMissingError(ParseError):
    """Exception raised when one or more mandatory options were not given."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            "\n".join(f"--{option}: option is mandatory." for option in missing)
        )


class ParseFailure(ArgsparseError):
    """Exception raised by `OptionParser.parse()` for any user-facing parse error."""
