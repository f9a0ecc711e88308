# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds a plain report of parsed options, handy behind a `--debug` or
`--verbose` option.

Each visible option gets one line telling whether it was set and, if so, its
recorded value. Cumulated values are shell-quoted:

    verbose  : yes (2)
    include  : yes (2 time(s): src 'my docs')
    output   : no
"""
from __future__ import annotations

import shlex

from argsparse.parser_types import ParseState
from argsparse.registry import OptionRegistry

MAX_NAME_WIDTH = 50


def get_report(registry: OptionRegistry, state: ParseState) -> str:
    """Render the report of every visible option."""
    options = registry.visible()
    if not options:
        return ""
    width = min(MAX_NAME_WIDTH, max(len(option.name) for option in options))
    lines = []
    for option in options:
        line = f"{option.name:<{width}}\t: "
        if option.name in state.options:
            line += f"yes ({state.options[option.name]}"
            if option.repeatable:
                values = state.cumulated.get(option.name, [])
                line += " time(s):" + "".join(f" {shlex.quote(value)}" for value in values)
            line += ")"
        else:
            line += "no"
        lines.append(line)
    return "\n".join(lines)
