# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State models for the argsparse dispatch loop.

Contents:
- `ParseState`: The mutable parsed state of an `OptionParser`: option values,
  cumulated values and positional parameters.
- `ParseResult`: The snapshot returned by a successful `OptionParser.parse()`.

Option values follow these rules:
- options without value map to the number of times they were given;
- options with a value map to the last value given (or their default);
- cumulative options map to the number of values given, the values themselves
  being kept in `cumulated[name]`.

Whether an option was set is told by key presence alone: an option given an
empty string value is set, an option never given is not.
"""
from __future__ import annotations

from argparse import Namespace
from copy import deepcopy
from dataclasses import dataclass, field

from argsparse.option_types import INT_PATTERN
from argsparse.utils import option_to_identifier

OptionValue = int | str


@dataclass
class ParseState:
    """Tracks parsed option values and positional parameters."""

    options: dict[str, OptionValue] = field(default_factory=dict)
    cumulated: dict[str, list[str]] = field(default_factory=dict)
    positionals: list[str] = field(default_factory=list)

    def copy(self) -> ParseState:
        return deepcopy(self)

    def increment(self, option: str) -> None:
        """Count one more occurrence of an option."""
        current = self.options.get(option, 0)
        self.options[option] = (int(current) if INT_PATTERN.fullmatch(str(current)) else 0) + 1

    def store(self, option: str, value: str) -> None:
        self.options[option] = value

    def append(self, option: str, value: str) -> None:
        self.cumulated.setdefault(option, []).append(value)

    def reset(self, defaults: dict[str, str] | None = None) -> None:
        """Forget everything parsed, then record the given defaults."""
        self.options = dict(defaults or {})
        self.cumulated = {}
        self.positionals = []


@dataclass(frozen=True)
class ParseResult:
    """
    The outcome of a successful parse.

    Attributes:
        options (dict[str, int | str]): Parsed option values by long name.
        positionals (list[str]): Non-option parameters, in order.
        cumulated (dict[str, list[str]]): Collected values of cumulative options.
    """

    options: dict[str, OptionValue]
    positionals: list[str]
    cumulated: dict[str, list[str]]

    @classmethod
    def from_state(cls, state: ParseState) -> ParseResult:
        state = state.copy()
        return cls(state.options, state.positionals, state.cumulated)

    def is_set(self, option: str) -> bool:
        return option in self.options

    def get(self, option: str, default: OptionValue | None = None) -> OptionValue | None:
        return self.options.get(option, default)

    def values(self, option: str) -> list[str]:
        """Return the collected values of a cumulative option."""
        return list(self.cumulated.get(option, []))

    def to_namespace(self) -> Namespace:
        """
        Expose the options as attributes named after their identifiers.

        Cumulative options are exposed as their value lists. Options whose
        names differ only by `-` and `_` collide here; the one declared later
        in the result wins.
        """
        namespace = Namespace()
        for option, value in self.options.items():
            attribute = option_to_identifier(option)
            if option in self.cumulated:
                setattr(namespace, attribute, list(self.cumulated[option]))
            else:
                setattr(namespace, attribute, value)
        return namespace

    def __contains__(self, option: object) -> bool:
        return option in self.options
