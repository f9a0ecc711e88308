# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by argsparse.

These signals interrupt parsing without being treated as errors.
All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Raised by the built-in `--help` option once usage has been shown.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in argsparse.

    These are not errors. They stop a parse on purpose, e.g. after help
    output, and are left for the program to handle.
    """


class HelpSignal(FlowSignal):
    """Raised to display help information."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
