"""
Argsparse Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from argsparse.config import loader
from argsparse.exceptions import ConfigurationError, ParseFailure
from argsparse.option_parser import OptionParser
from argsparse.signals import HelpSignal
from argsparse.utils import setup_logging

EXIT_OK = 0
EXIT_PARSE_FAILURE = 1
EXIT_CONFIGURATION_ERROR = 2


def get_parser() -> OptionParser:
    """Build the parser of the `argsparse` command itself."""
    parser = OptionParser(
        program="argsparse",
        usage_description=(
            "Loads option definitions from DEFINITIONS (YAML or TOML), parses the\n"
            "remaining parameters with them and prints a report of the result.\n"
            "Put '--' before DEFINITIONS so its parameters are not read as\n"
            "argsparse options."
        ),
    )
    parser.define("=verbose", "Log debug messages on the console.")
    parser.define("log-mode:", "Logging output mode.")
    parser.set_values("log-mode", ["cli", "json"])
    parser.define("=usage", "Print the usage of the definitions instead.")
    parser.minimum_parameters(1)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = get_parser()
    try:
        result = parser.parse(argv)
    except HelpSignal:
        return EXIT_OK
    except ParseFailure:
        return EXIT_PARSE_FAILURE

    setup_logging(
        mode=result.get("log-mode"),
        console_log_level=logging.DEBUG if result.is_set("verbose") else logging.WARNING,
    )

    definitions, *args = result.positionals
    try:
        loaded = loader(definitions)
    except (ConfigurationError, OSError) as error:
        parser.print_error(error)
        return EXIT_CONFIGURATION_ERROR

    if result.is_set("usage"):
        loaded.render_usage()
        return EXIT_OK

    try:
        loaded.parse(args)
    except HelpSignal:
        return EXIT_OK
    except ParseFailure:
        return EXIT_PARSE_FAILURE
    except ConfigurationError as error:
        loaded.print_error(error)
        return EXIT_CONFIGURATION_ERROR

    loaded.render_report()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
