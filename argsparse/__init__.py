"""
Argsparse Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ArgsparseError, ConfigurationError, ParseError, ParseFailure
from .option_parser import OptionParser
from .parser_types import ParseResult
from .signals import HelpSignal

logger = logging.getLogger("argsparse")


__all__ = [
    "OptionParser",
    "ParseResult",
    "ArgsparseError",
    "ConfigurationError",
    "ParseError",
    "ParseFailure",
    "HelpSignal",
]
