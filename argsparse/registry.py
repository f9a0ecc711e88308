# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OptionRegistry`, the store of declared options, their properties,
their short letters and their enumerated value sets.

The registry is filled before parsing and only read afterwards. It knows
nothing about parsed values; setting a `default:` property is reported through
the `on_default` callback so the owner can record the value right away.

Option spec grammar accepted by `define()`:
- `name`: an option without value, `--name`.
- `name:`: an option expecting a value, `--name VALUE`.
- `n=ame`: the letter after `=` is the short option, `-a`.

Option names may only contain ASCII letters, digits, dashes and underscores.
`foo-bar` and `foo_bar` are distinct options, though their identifiers
collide.
"""
from __future__ import annotations

import re
from typing import Callable, Iterable, Iterator

from argsparse.exceptions import (
    InvalidOptionNameError,
    InvalidPropertyValueError,
    OptionAlreadyDefinedError,
    ShortOptionConflictError,
    UnknownOptionError,
)
from argsparse.logger import logger
from argsparse.option import Option
from argsparse.properties import Property, PropertyKind

OPTION_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
SHORT_LETTER_PATTERN = re.compile(r"[A-Za-z0-9]")


def split_optspec(optspec: str) -> tuple[str, list[str]]:
    """
    Split an option spec into its long name and the properties it implies.

    Example:
        split_optspec("o=utput:") → ("output", ["value", "short:u"])
    """
    implied: list[str] = []
    marker = optspec.find("=")
    if 0 <= marker < len(optspec) - 1:
        implied.append(f"short:{optspec[marker + 1]}")
        optspec = optspec[:marker] + optspec[marker + 1 :]
    if optspec.endswith(":"):
        implied.insert(0, "value")
        optspec = optspec[:-1]
    return optspec, implied


class OptionRegistry:
    """
    Stores option definitions for one `OptionParser`.

    Attributes:
        short_options (dict[str, str]): Short letter to long option name.
    """

    def __init__(self, on_default: Callable[[str, str], None] | None = None) -> None:
        self._options: dict[str, Option] = {}
        self._values: dict[str, list[str]] = {}
        self.short_options: dict[str, str] = {}
        self._on_default = on_default

    def define(self, optspec: str, description: str, *properties: str) -> Option:
        """
        Declare a new option.

        The description is recorded first and properties are applied in
        order, so an invalid property leaves the option declared with the
        properties that came before it. A short letter conflict likewise
        leaves the option declared without a short letter.

        Raises:
            InvalidOptionNameError: If the long name is empty or has forbidden characters.
            OptionAlreadyDefinedError: If the long name is already declared.
            UnknownPropertyError: If a property is not recognized.
            InvalidPropertyValueError: If a property payload is malformed.
            ShortOptionConflictError: If the short letter is already claimed.
        """
        name, implied = split_optspec(optspec)
        if not OPTION_NAME_PATTERN.fullmatch(name):
            raise InvalidOptionNameError(f"{name}: bad option name.")
        if name in self._options:
            raise OptionAlreadyDefinedError(f"{name}: option is already defined.")

        option = Option(name=name, description=description)
        self._options[name] = option
        logger.debug("Defined option '%s'.", name)
        for token in (*implied, *properties):
            self.set_property(token, name)
        return option

    def set_property(self, token: str | Property, *names: str) -> Property:
        """
        Apply one property to one or more options.

        The token is parsed before any option is touched. Options are then
        updated in order: a failure on one option leaves the previous ones
        updated.

        Raises:
            UnknownPropertyError: If the token is not a known property.
            InvalidPropertyValueError: If the payload is malformed.
            UnknownOptionError: If an option is not declared.
            ShortOptionConflictError: If a short letter is already claimed.
        """
        prop = token if isinstance(token, Property) else Property.parse(token)
        for name in names:
            option = self._options.get(name)
            if option is None:
                raise UnknownOptionError(f"{name}: no such option.")
            self._apply(option, prop)
        return prop

    def _apply(self, option: Option, prop: Property) -> None:
        if prop.kind == PropertyKind.SHORT:
            self._claim_short(option.name, prop.payload)
            return
        if prop.kind in (PropertyKind.CUMULATIVE, PropertyKind.CUMULATIVESET):
            option.add(Property(PropertyKind.VALUE))
        option.add(prop)
        logger.debug("Set property '%s' on '%s'.", prop, option.name)
        if prop.kind == PropertyKind.DEFAULT and self._on_default:
            self._on_default(option.name, prop.payload)

    def _claim_short(self, name: str, letter: str) -> None:
        if not SHORT_LETTER_PATTERN.fullmatch(letter):
            raise InvalidPropertyValueError(f"{letter}: invalid short option letter.")
        owner = self.short_options.get(letter)
        if owner is not None:
            raise ShortOptionConflictError(
                f"{letter}: short option for {name} conflicts with "
                f"already-configured short option for {owner}."
            )
        self.short_options[letter] = name
        logger.debug("Mapped short option '-%s' to '--%s'.", letter, name)

    def has_property(self, name: str, property_name: str) -> tuple[bool, str]:
        """
        Check whether an option carries a property.

        Returns:
            tuple[bool, str]: (True, payload) if present, (False, "") otherwise.
                The payload is empty for flag properties.
        """
        option = self._options.get(name)
        try:
            kind = PropertyKind(property_name)
        except ValueError:
            return False, ""
        if option is None:
            return False, ""
        if kind == PropertyKind.SHORT:
            letter = self.short_of(name)
            return (True, letter) if letter else (False, "")
        prop = option.get(kind)
        if prop is None:
            return False, ""
        return True, prop.payload

    def short_of(self, name: str) -> str | None:
        """Return the first short letter mapped to an option."""
        return next(
            (short for short, long in self.short_options.items() if long == name), None
        )

    def long_to_short(self) -> dict[str, str]:
        mapping: dict[str, str] = {}
        for short, long in self.short_options.items():
            mapping.setdefault(long, short)
        return mapping

    def set_values(self, name: str, values: Iterable[str]) -> None:
        """Restrict an option to an enumerated set of values."""
        if name not in self._options:
            raise UnknownOptionError(f"{name}: no such option.")
        if isinstance(values, str):
            raise InvalidPropertyValueError(
                f"{name}: values must be a list of strings, not a string."
            )
        self._values[name] = [str(value) for value in values]

    def get_values(self, name: str) -> list[str] | None:
        return self._values.get(name)

    def exclusions(self) -> dict[str, set[str]]:
        """Build the symmetric map of mutually exclusive options."""
        exclusions: dict[str, set[str]] = {}
        for option in self._options.values():
            for excluded in option.excludes:
                exclusions.setdefault(option.name, set()).add(excluded)
                exclusions.setdefault(excluded, set()).add(option.name)
        return exclusions

    def defaults(self) -> dict[str, str]:
        return {
            option.name: option.default
            for option in self._options.values()
            if option.default is not None
        }

    def visible(self) -> list[Option]:
        return [option for option in self._options.values() if not option.hidden]

    def clear_short_options(self) -> None:
        self.short_options.clear()

    def get(self, name: str) -> Option | None:
        return self._options.get(name)

    def __getitem__(self, name: str) -> Option:
        try:
            return self._options[name]
        except KeyError:
            raise UnknownOptionError(f"{name}: no such option.") from None

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options.values()))

    def __len__(self) -> int:
        return len(self._options)
