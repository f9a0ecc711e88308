# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `HookManager` and `HookType` used to customize how individual
options are validated and recorded.

Hooks are registered explicitly per option name. An option with no hook of a
given type simply gets the default behavior.

Key Components:
- HookType: Enum of the per-option hook points.
- HookManager: Table of registered hooks, one per (hook type, option).

Hook signatures:
- CHECK_VALUE: `hook(value: str) -> bool`. Checked after the value set or type
  check; a falsy result rejects the value.
- SET: `hook(parser, option: str, value: str | None) -> bool | None`. Replaces
  the default setter; returning False aborts the parse.

Usage:
    hooks = HookManager()
    hooks.register(HookType.CHECK_VALUE, "level", lambda value: value != "0")
"""
from __future__ import annotations

from enum import Enum
from typing import Callable

from argsparse.logger import logger

Hook = Callable[..., object]


class HookType(Enum):
    """
    Enum for the per-option hook points.

    Members:
        CHECK_VALUE: Extra acceptance test for the option value.
        SET: Replacement for the default option-setting behavior.

    Aliases:
        "check" → "check_value"
        "setter" → "set"

    Example:
        HookType("check") → HookType.CHECK_VALUE
    """

    CHECK_VALUE = "check_value"
    SET = "set"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "check": "check_value",
            "setter": "set",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> HookType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the hook type."""
        return self.value


class HookManager:
    """
    Holds the per-option hooks of an `OptionParser`.

    Methods:
        register(hook_type, option, hook): Register the hook of an option.
        get(hook_type, option): Return the registered hook, or None.
        clear(hook_type): Remove hooks for one or all hook types.
    """

    def __init__(self) -> None:
        self._hooks: dict[HookType, dict[str, Hook]] = {
            hook_type: {} for hook_type in HookType
        }

    def register(self, hook_type: HookType | str, option: str, hook: Hook) -> None:
        """
        Register a hook for an option, replacing any previous one.

        Raises:
            ValueError: If the hook type is invalid.
            TypeError: If the hook is not callable.
        """
        hook_type = HookType(hook_type)
        if not callable(hook):
            raise TypeError(f"{hook!r} is not callable")
        self._hooks[hook_type][option] = hook
        logger.debug("Registered %s hook for '%s'.", hook_type, option)

    def get(self, hook_type: HookType | str, option: str) -> Hook | None:
        return self._hooks[HookType(hook_type)].get(option)

    def clear(self, hook_type: HookType | None = None) -> None:
        """
        Clear registered hooks for one or all hook types.

        Args:
            hook_type (HookType | None): If None, clears all hooks.
        """
        if hook_type:
            self._hooks[hook_type] = {}
        else:
            for ht in self._hooks:
                self._hooks[ht] = {}

    def __str__(self) -> str:
        """Return a formatted string of registered hooks grouped by hook type."""

        def format_hook_list(hooks: dict[str, Hook]) -> str:
            return (
                ", ".join(
                    f"{option}={getattr(hook, '__name__', repr(hook))}"
                    for option, hook in hooks.items()
                )
                if hooks
                else "-"
            )

        lines = ["<HookManager>"]
        for hook_type in HookType:
            lines.append(f"  {hook_type.value}: {format_hook_list(self._hooks[hook_type])}")
        return "\n".join(lines)
