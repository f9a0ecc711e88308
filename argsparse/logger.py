# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for argsparse."""
import logging

logger: logging.Logger = logging.getLogger("argsparse")
