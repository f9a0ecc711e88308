# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Bridges the option registry and the getopt tokenizer.

`build_getopt_spec()` turns the registry into getopt short and long option
specs, and `tokenize()` runs `getopt.gnu_getopt` over the command line and
rebuilds a normalized token stream:

    [option, (value,) option, (value,) ..., "--", positional, ...]

Options are written `--name` or `-x` and are followed by their value when
they expect one. Every option comes before the `--` marker and every
positional parameter after it, whatever their order on the command line.
Unique prefixes of long options are expanded to the full name.
"""
from __future__ import annotations

import getopt
from typing import Sequence

from argsparse.exceptions import OptionSyntaxError
from argsparse.logger import logger
from argsparse.registry import OptionRegistry

END_OF_OPTIONS = "--"


def build_getopt_spec(registry: OptionRegistry) -> tuple[str, list[str]]:
    """
    Build the getopt option specs for all declared options.

    Returns:
        tuple[str, list[str]]: The short option string (e.g. `"hv:"`) and the
            long option list (e.g. `["help", "verbose="]`).
    """
    longs = [
        f"{option.name}=" if option.expects_value else option.name
        for option in registry
    ]
    shorts = ""
    for short, long in registry.short_options.items():
        option = registry.get(long)
        shorts += f"{short}:" if option and option.expects_value else short
    return shorts, longs


def tokenize(
    args: Sequence[str], shorts: str, longs: list[str], program: str = ""
) -> list[str]:
    """
    Run getopt over `args` and return the normalized token stream.

    Raises:
        OptionSyntaxError: If getopt rejects the command line (unknown option,
            missing value, ambiguous abbreviation...).
    """
    try:
        pairs, positionals = getopt.gnu_getopt(list(args), shorts, longs)
    except getopt.GetoptError as error:
        raise OptionSyntaxError(str(error)) from error

    expects_value = {f"--{long[:-1]}" for long in longs if long.endswith("=")}
    expects_value.update(
        f"-{letter}"
        for index, letter in enumerate(shorts)
        if letter != ":" and shorts[index + 1 : index + 2] == ":"
    )

    tokens: list[str] = []
    for name, value in pairs:
        tokens.append(name)
        if name in expects_value:
            tokens.append(value)
    tokens.append(END_OF_OPTIONS)
    tokens.extend(positionals)
    logger.debug("[%s] Tokenized %r -> %r", program, list(args), tokens)
    return tokens
