# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass used by `OptionRegistry` to represent one
declared command-line option.

Each `Option` instance describes one long option: its name, its usage
description and the properties attached to it. Short letters are not stored on
the option itself; the registry owns the short-letter map so that a single
place enforces their uniqueness.

Options should be created using `OptionParser.define()`.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from argsparse.properties import Property, PropertyKind
from argsparse.utils import option_to_identifier


@dataclass
class Option:
    """
    Represents a command-line option.

    Attributes:
        name (str): The long option name, used as key in parsed results.
        description (str): Text shown in the long usage view.
        properties (dict[PropertyKind, Property]): Properties by kind, in the
            order they were first set.
    """

    name: str
    description: str = ""
    properties: dict[PropertyKind, Property] = field(default_factory=dict)

    @property
    def identifier(self) -> str:
        """The option name with dashes replaced by underscores."""
        return option_to_identifier(self.name)

    def add(self, prop: Property) -> None:
        self.properties[prop.kind] = prop

    def has(self, kind: PropertyKind) -> bool:
        return kind in self.properties

    def get(self, kind: PropertyKind) -> Property | None:
        return self.properties.get(kind)

    @property
    def hidden(self) -> bool:
        return PropertyKind.HIDDEN in self.properties

    @property
    def mandatory(self) -> bool:
        return PropertyKind.MANDATORY in self.properties

    @property
    def expects_value(self) -> bool:
        return PropertyKind.VALUE in self.properties

    @property
    def repeatable(self) -> bool:
        """True for cumulative and cumulativeset options."""
        return (
            PropertyKind.CUMULATIVE in self.properties
            or PropertyKind.CUMULATIVESET in self.properties
        )

    @property
    def aliases(self) -> tuple[str, ...]:
        prop = self.properties.get(PropertyKind.ALIAS)
        return prop.names if prop else ()

    @property
    def excludes(self) -> tuple[str, ...]:
        prop = self.properties.get(PropertyKind.EXCLUDE)
        return prop.names if prop else ()

    @property
    def type_name(self) -> str | None:
        prop = self.properties.get(PropertyKind.TYPE)
        return prop.payload if prop else None

    @property
    def default(self) -> str | None:
        prop = self.properties.get(PropertyKind.DEFAULT)
        return prop.payload if prop else None

    def get_value_text(self, values: list[str] | None = None) -> str:
        """Get the value placeholder for the short usage view."""
        if not self.expects_value:
            return ""
        if values is not None:
            return f"<{'|'.join(values)}>"
        return self.name.upper()

    def __str__(self) -> str:
        properties = ", ".join(str(prop) for prop in self.properties.values())
        return f"Option(name={self.name!r}, properties=[{properties}])"
