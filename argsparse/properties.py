# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `PropertyKind` and `Property`, the declarative annotations attached to
options.

Properties are written as compact string tokens when declaring options
(`"mandatory"`, `"type:int"`, `"exclude:foo bar"`) and are parsed once, at
insertion, into a tagged value. Nothing downstream re-parses the token.

Property kinds:
- Flag only: `hidden`, `mandatory`, `value`, `cumulative`, `cumulativeset`.
- String payload: `type:<name>`, `short:<char>`, `default:<value>`.
- Name list payload: `exclude:<option> [<option> ...]`,
  `alias:<option> [<option> ...]`.

Example:
    Property.parse("exclude:verbose debug")
    → Property(kind=PropertyKind.EXCLUDE, value=("verbose", "debug"))
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from argsparse.exceptions import InvalidPropertyValueError, UnknownPropertyError

FORBIDDEN_PAYLOAD_CHARS = frozenset("*?!,")


class PropertyKind(Enum):
    """
    Defines the kinds of properties an option may carry.

    Members:
        HIDDEN: Option is not shown in usage or report.
        MANDATORY: Option must be given on the command line (or have a default).
        VALUE: Option expects a value.
        CUMULATIVE: Every value is appended to a list. Implies VALUE.
        CUMULATIVESET: Like CUMULATIVE, but duplicates are dropped. Implies VALUE.
        TYPE: Values are checked against a named type.
        SHORT: Single-letter equivalent of the option.
        DEFAULT: Value recorded for the option before parsing.
        EXCLUDE: Options that cannot be given together with this one.
        ALIAS: Options set in place of this one.
    """

    HIDDEN = "hidden"
    MANDATORY = "mandatory"
    VALUE = "value"
    CUMULATIVE = "cumulative"
    CUMULATIVESET = "cumulativeset"
    TYPE = "type"
    SHORT = "short"
    DEFAULT = "default"
    EXCLUDE = "exclude"
    ALIAS = "alias"

    @classmethod
    def _missing_(cls, value: object) -> PropertyKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_flag(self) -> bool:
        return self in FLAG_KINDS

    @property
    def is_list(self) -> bool:
        return self in (PropertyKind.EXCLUDE, PropertyKind.ALIAS)

    def __str__(self) -> str:
        """Return the string representation of the property kind."""
        return self.value


FLAG_KINDS = frozenset(
    {
        PropertyKind.HIDDEN,
        PropertyKind.MANDATORY,
        PropertyKind.VALUE,
        PropertyKind.CUMULATIVE,
        PropertyKind.CUMULATIVESET,
    }
)


@dataclass(frozen=True)
class Property:
    """
    A single property attached to an option.

    Attributes:
        kind (PropertyKind): What the property controls.
        value (str | tuple[str, ...] | None): The payload. None for flag-only
            kinds, a tuple of option names for EXCLUDE and ALIAS, a string
            otherwise.
    """

    kind: PropertyKind
    value: str | tuple[str, ...] | None = None

    @classmethod
    def parse(cls, token: str) -> Property:
        """
        Parse a property token such as `"value"` or `"type:uint"`.

        Raises:
            UnknownPropertyError: If the token names no known property, or the
                payload shape does not match the kind.
            InvalidPropertyValueError: If a type, exclude or alias payload is
                empty or contains one of `* ? ! ,`.
        """
        if not isinstance(token, str):
            raise UnknownPropertyError(f"{token!r}: unknown property.")
        name, separator, payload = token.partition(":")
        try:
            kind = PropertyKind(name)
        except ValueError:
            raise UnknownPropertyError(f"{token}: unknown property.") from None

        if kind.is_flag:
            if separator:
                raise UnknownPropertyError(f"{token}: unknown property.")
            return cls(kind)
        if not separator:
            raise UnknownPropertyError(f"{token}: unknown property.")

        if kind == PropertyKind.SHORT:
            if len(payload) != 1:
                raise UnknownPropertyError(f"{token}: unknown property.")
            return cls(kind, payload)
        if kind == PropertyKind.DEFAULT:
            return cls(kind, payload)

        if not payload.strip() or FORBIDDEN_PAYLOAD_CHARS.intersection(payload):
            raise InvalidPropertyValueError(f"{payload}: invalid property value.")
        if kind.is_list:
            return cls(kind, tuple(payload.split()))
        return cls(kind, payload)

    @property
    def payload(self) -> str:
        """The payload as text: empty for flags, space-joined names for lists."""
        if self.value is None:
            return ""
        if isinstance(self.value, tuple):
            return " ".join(self.value)
        return self.value

    @property
    def names(self) -> tuple[str, ...]:
        """The option names of an EXCLUDE or ALIAS property."""
        if isinstance(self.value, tuple):
            return self.value
        return ()

    def __str__(self) -> str:
        if self.kind.is_flag:
            return self.kind.value
        return f"{self.kind.value}:{self.payload}"
