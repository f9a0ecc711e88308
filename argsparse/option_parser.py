# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, a declarative, getopt-based option parser.

Options are declared up front with a compact spec and a list of properties;
the parser then turns a command line into a mapping of option values plus a
list of positional parameters, enforcing every relationship declared between
options.

Key Features:
- Declarative option registration via `define()` and `set_property()`
- Short and long options, value options, repeatable (cumulative) options
- Mutually exclusive options and option aliases
- Mandatory options, with every missing one reported at once
- Typed values, enumerated value sets and per-option check hooks
- Per-option setting hooks replacing the default behavior
- Bounds on the number of positional parameters
- Usage rendering on any parse failure, and a built-in `--help`

Public Interface:
- `define(optspec, description, *properties)`: Declare an option.
- `set_property(property, *options)`: Add a property to options.
- `parse(args)`: Parse a command line into a `ParseResult`.
- `is_set(option)`: Tell whether an option was given (or has a default).
- `render_usage()` / `render_report()`: Print usage or a parsed-state report.

Example Usage:
    parser = OptionParser(program="backup")
    parser.define("=verbose", "Be verbose.")
    parser.define("=output:", "Where to write.", "mandatory", "type:directory")
    parser.define("quiet", "Say nothing.", "exclude:verbose")

    result = parser.parse(["-o", "/tmp", "--verbose", "src"])

    # result.options == {'output': '/tmp', 'verbose': 1}
    # result.positionals == ['src']

Parsing happens in two stages. The command line is first handed to getopt,
which reorders it into `[options..., "--", positionals...]`. The dispatch loop
then walks that stream one option at a time: it resolves short letters, checks
exclusions, validates the value, and records the option through its setting
hook. Reaching `--` ends the loop with the positional count check and the
mandatory option check.
"""
from __future__ import annotations

import sys
from typing import Callable, Iterable, Sequence

from pydantic import ValidationError as PydanticValidationError
from rich.console import Console

from argsparse.console import console as default_console
from argsparse.console import error_console as default_error_console
from argsparse.exceptions import (
    AliasCycleError,
    ArityError,
    ConfigurationError,
    ExclusionError,
    MandatoryMissingError,
    OptionSyntaxError,
    ParseError,
    ParseFailure,
    UnknownOptionError,
    ValidationError,
)
from argsparse.hook_manager import Hook, HookManager, HookType
from argsparse.logger import logger
from argsparse.option import Option
from argsparse.option_types import TypeCheck, TypeRegistry
from argsparse.parser_config import ParserConfig
from argsparse.parser_types import OptionValue, ParseResult, ParseState
from argsparse.properties import Property, PropertyKind
from argsparse.registry import OptionRegistry
from argsparse.report import get_report
from argsparse.signals import HelpSignal
from argsparse.tokenizer import END_OF_OPTIONS, build_getopt_spec, tokenize
from argsparse.usage import get_usage, get_usage_long, get_usage_short

UsageCallback = Callable[["OptionParser"], None]


class OptionParser:
    """
    Declarative command-line option parser.

    All state belongs to the instance: declared options, their properties and
    hooks, and the parsed state. Parsing is synchronous and not reentrant: one
    parse at a time per parser.

    Parsed state survives successive `parse()` calls (counters keep counting)
    until `reset()` is called. A failed parse leaves it as it was.
    """

    def __init__(
        self,
        program: str | None = None,
        usage_description: str = "",
        add_help: bool = True,
        config: ParserConfig | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        """Initialize the OptionParser."""
        if config is None:
            settings: dict[str, object] = {
                "usage_description": usage_description,
                "add_help": add_help,
            }
            if program:
                settings["program"] = program
            config = self._validate_config(settings)
        self.config: ParserConfig = config
        self.console: Console = console or default_console
        self.error_console: Console = error_console or default_error_console
        self.registry: OptionRegistry = OptionRegistry(on_default=self._record_default)
        self.types: TypeRegistry = TypeRegistry()
        self.hooks: HookManager = HookManager()
        self._state: ParseState = ParseState()
        self._usage: UsageCallback | None = OptionParser.render_usage
        self._alias_path: list[str] = []
        if self.config.add_help:
            self._add_help()

    @staticmethod
    def _validate_config(settings: dict[str, object]) -> ParserConfig:
        try:
            return ParserConfig(**settings)
        except PydanticValidationError as error:
            raise ConfigurationError(str(error)) from error

    def _add_help(self) -> None:
        """Add the help option to the parser."""
        self.define("=help", "Show this help message")
        self.set_option_hook("help", self._help_hook)

    @staticmethod
    def _help_hook(parser: OptionParser, option: str, value: str | None) -> None:
        if parser._usage:
            parser._usage(parser)
        raise HelpSignal()

    @property
    def program(self) -> str:
        return self.config.program

    @property
    def usage_description(self) -> str:
        return self.config.usage_description

    @usage_description.setter
    def usage_description(self, description: str) -> None:
        self.config.usage_description = description

    def minimum_parameters(self, count: int | str) -> None:
        """Set the minimum number of positional parameters."""
        self._configure("minimum_parameters", count)

    def maximum_parameters(self, count: int | str) -> None:
        """Set the maximum number of positional parameters."""
        self._configure("maximum_parameters", count)

    def allow_no_argument(self, allow: bool | str) -> None:
        """Accept (or refuse) an empty command line."""
        self._configure("allow_no_argument", allow)

    def _configure(self, setting: str, value: object) -> None:
        try:
            setattr(self.config, setting, value)
        except PydanticValidationError as error:
            raise ConfigurationError(f"{setting}: {value!r}: invalid setting.") from error
        logger.debug("[%s] %s set to %r.", self.program, setting, value)

    def set_usage(self, usage: UsageCallback | None) -> None:
        """
        Set the callback invoked when parsing fails and on `--help`.

        Args:
            usage (Callable[[OptionParser], None] | None): The callback, or
                None to print nothing but the error message.
        """
        self._usage = usage

    def define(self, optspec: str, description: str, *properties: str) -> Option:
        """
        Declare a new option.

        Args:
            optspec (str): `name`, with a trailing `:` if the option expects a
                value, and `=` before the letter to use as short option
                (e.g. `"o=utput:"` declares `--output VALUE` and `-u VALUE`).
            description (str): Text shown in the long usage view.
            *properties (str): Property tokens such as `"mandatory"`,
                `"type:int"`, `"default:42"` or `"exclude:quiet"`.

        Returns:
            Option: The declared option.

        Raises:
            ConfigurationError: On a bad name, a duplicate, an unknown or
                malformed property, or a short letter conflict.
        """
        try:
            return self.registry.define(optspec, description, *properties)
        except ConfigurationError as error:
            logger.error("[%s] %s", self.program, error)
            raise

    def set_property(self, prop: str | Property, *options: str) -> Property:
        """
        Add a property to one or more options.

        `cumulative` and `cumulativeset` also add `value`. `default:<value>`
        records the value right away, so the option counts as set.

        Raises:
            ConfigurationError: On an unknown or malformed property, an
                undeclared option, or a short letter conflict.
        """
        try:
            return self.registry.set_property(prop, *options)
        except ConfigurationError as error:
            logger.error("[%s] %s", self.program, error)
            raise

    def has_property(self, option: str, prop: str) -> tuple[bool, str]:
        """Return (True, payload) if the option has the property, else (False, "")."""
        return self.registry.has_property(option, prop)

    def set_values(self, option: str, values: Iterable[str]) -> None:
        """Restrict a value option to an enumerated set of accepted values."""
        self.registry.set_values(option, values)

    def register_type(self, name: str, check: TypeCheck) -> None:
        """Register the validator of a custom `type:<name>`."""
        self.types.register(name, check)

    def register_hook(self, hook_type: HookType | str, option: str, hook: Hook) -> None:
        if option not in self.registry:
            raise UnknownOptionError(f"{option}: no such option.")
        self.hooks.register(hook_type, option, hook)

    def set_value_check(self, option: str, check: Callable[[str], bool]) -> None:
        """Register an extra acceptance test for the values of an option."""
        self.register_hook(HookType.CHECK_VALUE, option, check)

    def set_option_hook(self, option: str, hook: Hook) -> None:
        """
        Replace the default setting behavior of an option.

        The hook is called as `hook(parser, option, value)`, `value` being
        None for options without value. Returning False aborts the parse. The
        default setters (`set_option` and friends) may be called from the hook.
        """
        self.register_hook(HookType.SET, option, hook)

    def _record_default(self, option: str, value: str) -> None:
        self._state.options[option] = value

    @property
    def options(self) -> dict[str, OptionValue]:
        """Parsed option values by long name."""
        return self._state.options

    @property
    def positionals(self) -> list[str]:
        """Positional parameters of the last successful parse."""
        return self._state.positionals

    def is_set(self, option: str) -> bool:
        """True if the option was given on the command line or has a default."""
        return option in self._state.options

    def get(self, option: str, default: OptionValue | None = None) -> OptionValue | None:
        return self._state.options.get(option, default)

    def cumulated_values(self, option: str) -> list[str]:
        """Return the values collected for a cumulative option."""
        return list(self._state.cumulated.get(option, []))

    def reset(self) -> None:
        """
        Forget the parsed state and the short option map.

        Option definitions, properties and hooks are kept, and defaults are
        recorded again. Short options must be declared again with `short:`
        properties before the next parse if they are still wanted.
        """
        self._state.reset(self.registry.defaults())
        self.registry.clear_short_options()
        logger.debug("[%s] Parser state reset.", self.program)

    def set_option_without_value(self, option: str) -> None:
        """Default action for options without value: count one occurrence."""
        self._state.increment(option)

    def set_option_with_value(self, option: str, value: str) -> None:
        """Default action for value options: keep the last value."""
        self._state.store(option, value)

    def set_cumulative_option(self, option: str, value: str) -> None:
        """Default action for cumulative options: append the value and count it."""
        self._state.append(option, value)
        self._state.increment(option)

    def set_cumulativeset_option(self, option: str, value: str) -> None:
        """Default action for cumulativeset options: append unseen values only."""
        if value not in self._state.cumulated.get(option, []):
            self._state.append(option, value)
        self._state.increment(option)

    def set_alias(self, option: str) -> bool:
        """
        Set every option aliased by `option`, in declared order.

        Returns:
            bool: False if the option has no alias property.

        Raises:
            AliasCycleError: If an alias leads back to an option being expanded.
        """
        aliases = self.registry[option].aliases
        if not aliases:
            return False
        self._alias_path.append(option)
        try:
            for alias in aliases:
                if alias in self._alias_path:
                    cycle = " -> ".join([*self._alias_path, alias])
                    raise AliasCycleError(f"{option}: alias cycle detected ({cycle}).")
                self._set(alias)
        finally:
            self._alias_path.pop()
        return True

    def set_option(self, option: str, value: str | None = None) -> None:
        """
        The default option-setting hook.

        Checked in order: alias, cumulative, cumulativeset, value, and
        finally the occurrence counter.
        """
        if self.set_alias(option):
            return
        spec = self.registry[option]
        text = value if value is not None else ""
        if spec.has(PropertyKind.CUMULATIVE):
            self.set_cumulative_option(option, text)
        elif spec.has(PropertyKind.CUMULATIVESET):
            self.set_cumulativeset_option(option, text)
        elif spec.has(PropertyKind.VALUE):
            self.set_option_with_value(option, text)
        else:
            self.set_option_without_value(option)

    def _set(self, option: str, value: str | None = None) -> None:
        hook = self.hooks.get(HookType.SET, option)
        if hook is not None:
            result = hook(self, option, value)
        else:
            result = self.set_option(option, value)
        if result is False:
            raise ValidationError(f"{value or ''}: Invalid value for {option} option.")

    def check_value(self, option: str, value: str) -> bool:
        """
        Check a value for an option.

        The enumerated value set is checked if there is one, else the type;
        then the value check hook, if registered, must accept it too.

        Raises:
            NoValidatorError: If the option type has no validator.
        """
        spec = self.registry[option]
        values = self.registry.get_values(option)
        if values is not None:
            if value not in values:
                return False
        elif spec.type_name is not None:
            if not self.types.check(spec.type_name, value):
                return False
        check = self.hooks.get(HookType.CHECK_VALUE, option)
        if check is not None and not check(value):
            return False
        return True

    def _resolve(self, token: str) -> str:
        """Convert an option token to its long option name."""
        if token.startswith("--"):
            return token[2:]
        short = token[1:]
        long = self.registry.short_options.get(short)
        if long is None:
            raise OptionSyntaxError(
                f"-{short}: option doesnt have any matching long option."
            )
        return long

    def _check_exclusions(self, option: str, exclusions: dict[str, set[str]]) -> None:
        for given in self._state.options:
            if option in exclusions.get(given, ()):
                raise ExclusionError(option, given)

    def _finish(self, positionals: list[str]) -> None:
        minimum = self.config.minimum_parameters
        maximum = self.config.maximum_parameters
        count = len(positionals)
        if count < minimum:
            raise ArityError(
                f"not enough parameters (at least {minimum} expected, {count} provided)"
            )
        if count > maximum:
            raise ArityError(
                f"too many parameters (maximum allowed is {maximum}, {count} provided)"
            )
        self._state.positionals = positionals
        missing = [
            option.name
            for option in self.registry
            if option.mandatory and option.name not in self._state.options
        ]
        if missing:
            raise MandatoryMissingError(missing)

    def _dispatch(self, tokens: list[str]) -> None:
        exclusions = self.registry.exclusions()
        i = 0
        while i < len(tokens):
            token = tokens[i]
            i += 1
            if token == END_OF_OPTIONS:
                self._finish(tokens[i:])
                return
            option = self._resolve(token)
            spec = self.registry[option]
            self._check_exclusions(option, exclusions)
            value: str | None = None
            if spec.expects_value:
                value = tokens[i]
                i += 1
                if not self.check_value(option, value):
                    raise ValidationError(f"{value}: Invalid value for option {option}.")
            logger.debug("[%s] Setting '%s' (value=%r).", self.program, option, value)
            self._set(option, value)

    def parse_no_usage(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Parse a command line without printing anything.

        Args:
            args (Sequence[str] | None): The command line, `sys.argv[1:]` if None.

        Returns:
            ParseResult: The parsed state after this call.

        Raises:
            ParseError: The specific parse error (syntax, invalid value,
                exclusion, parameter count, missing mandatory options).
            ConfigurationError: On a configuration bug met while parsing.
        """
        args = list(sys.argv[1:] if args is None else args)
        if not args and not self.config.allow_no_argument:
            raise ParseError("no argument given.")

        shorts, longs = build_getopt_spec(self.registry)
        tokens = tokenize(args, shorts, longs, self.program)

        snapshot = self._state
        self._state = snapshot.copy()
        self._alias_path = []
        try:
            self._dispatch(tokens)
        except BaseException:
            self._state = snapshot
            raise
        return ParseResult.from_state(self._state)

    def parse(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Parse a command line.

        On failure, the error is printed on the error console, the usage
        callback is invoked and `ParseFailure` is raised.

        Args:
            args (Sequence[str] | None): The command line, `sys.argv[1:]` if None.

        Returns:
            ParseResult: Option values, positional parameters and cumulated values.

        Raises:
            ParseFailure: If the command line is invalid.
            ConfigurationError: On a configuration bug met while parsing.
            HelpSignal: After usage was shown for `--help`.
        """
        try:
            return self.parse_no_usage(args)
        except ParseError as error:
            logger.debug("[%s] Parse failed: %s", self.program, error)
            self.print_error(error)
            if self._usage:
                self._usage(self)
            raise ParseFailure(str(error)) from error

    def print_error(self, error: Exception) -> None:
        for line in str(error).splitlines() or [""]:
            self.error_console.print(
                f"{self.program}: {line}",
                style="error",
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )

    def get_usage_short(self) -> str:
        return get_usage_short(self.registry, self.program)

    def get_usage_long(self) -> str:
        return get_usage_long(self.registry)

    def get_usage(self) -> str:
        """Render the full usage text for this parser."""
        return get_usage(self.registry, self.program, self.usage_description)

    def render_usage(self) -> None:
        """Print the usage text on the console."""
        self.console.print(
            self.get_usage(),
            style="usage",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def get_report(self) -> str:
        """Render the report of the parsed state."""
        return get_report(self.registry, self._state)

    def render_report(self) -> None:
        """Print the report of the parsed state on the console."""
        self.console.print(
            self.get_report(), markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        options = list(self.registry)
        mandatory = sum(option.mandatory for option in options)
        hidden = sum(option.hidden for option in options)
        return (
            f"OptionParser(program={self.program!r}, options={len(options)}, "
            f"shorts={len(self.registry.short_options)}, mandatory={mandatory}, "
            f"hidden={hidden})"
        )

    def __repr__(self) -> str:
        return str(self)
