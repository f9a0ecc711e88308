# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage text generation for argsparse.

Usage is a projection of the option registry. Hidden options are left out.

- `get_usage_short()`: the synopsis line, program name followed by every
  option, wrapped at 78 columns:

      prog [ --verbose ] --output OUTPUT [ --mode <fast|slow> ]

- `get_usage_long()`: one entry per option with its short letter, long name,
  description and notes about repetition, accepted values and aliases:

       -v | --verbose   Be verbose.
            --output    Where to write.
                        Can be repeated.

- `get_usage()`: both views plus the optional trailing description.
"""
from __future__ import annotations

from argsparse.option import Option
from argsparse.registry import OptionRegistry

MAX_LINE_LENGTH = 78
LONG_NAME_WIDTH = 11
INLINE_DESCRIPTION_MAX = 9
CONTINUATION_INDENT = " " * 8
NOTE_INDENT = " " * 18


def get_option_text(option: Option, values: list[str] | None = None) -> str:
    """Render one option for the short usage view."""
    text = f"--{option.name}"
    value_text = option.get_value_text(values)
    if value_text:
        text = f"{text} {value_text}"
    if not option.mandatory:
        text = f"[ {text} ]"
    return text


def get_usage_short(
    registry: OptionRegistry, program: str, max_length: int = MAX_LINE_LENGTH
) -> str:
    """
    Render the synopsis of the program.

    Lines longer than `max_length` are broken with a trailing backslash and
    continue on an indented line.
    """
    lines: list[str] = []
    current_line = program
    for option in registry.visible():
        option_text = get_option_text(option, registry.get_values(option.name))
        bigger_line = f"{current_line} {option_text}"
        if len(bigger_line) > max_length:
            lines.append(f"{current_line} \\")
            current_line = f"{CONTINUATION_INDENT}{option_text}"
        else:
            current_line = bigger_line
    lines.append(current_line)
    return "\n".join(lines)


def get_usage_long(registry: OptionRegistry) -> str:
    """Render the description of every visible option."""
    long_to_short = registry.long_to_short()
    lines: list[str] = []
    for option in registry.visible():
        short = long_to_short.get(option.name)
        flags = f" -{short} | " if short else "      "
        name = f"--{option.name}"
        if len(option.name) <= INLINE_DESCRIPTION_MAX:
            lines.append(f"{flags}{name:<{LONG_NAME_WIDTH}} {option.description}")
        else:
            lines.append(f"{flags}{name}")
            lines.append(f"{NOTE_INDENT}{option.description}")

        if option.repeatable:
            lines.append(f"{NOTE_INDENT}Can be repeated.")
        values = registry.get_values(option.name)
        if option.expects_value and values is not None:
            quoted = " ".join(f"'{value}'" for value in values)
            lines.append(f"{NOTE_INDENT}Acceptable values: {quoted}")
        if option.aliases:
            targets = " ".join(f"--{alias}" for alias in option.aliases)
            lines.append(f"{NOTE_INDENT}Same as: {targets}")
    return "\n".join(lines)


def get_usage(registry: OptionRegistry, program: str, description: str = "") -> str:
    """Render the full usage text: synopsis, option descriptions and epilog."""
    text = f"{get_usage_short(registry, program)}\n\n{get_usage_long(registry)}"
    if description:
        text = f"{text}\n\n{description}"
    return text
