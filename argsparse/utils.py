# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler


def get_program_name() -> str:
    """Returns the program name as invoked, without its directory."""
    return os.path.basename(sys.argv[0]) or "argsparse"


def option_to_identifier(option: str) -> str:
    """Transform an option name into a string usable as a Python identifier part."""
    return option.replace("-", "_")


def is_affirmative(value: bool | int | str) -> bool:
    """
    Convert a yes/no style setting to a boolean.

    Booleans are returned as is. Strings are affirmative when they are
    'yes', 'true' or '1' (case-insensitive); anything else is negative.
    """
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"yes", "true", "1"}


class CaseInsensitiveDict(dict):
    """A case-insensitive dictionary that treats all keys as lowercase."""

    def _normalize_key(self, key):
        return key.lower() if isinstance(key, str) else key

    def __setitem__(self, key, value):
        super().__setitem__(self._normalize_key(key), value)

    def __getitem__(self, key):
        return super().__getitem__(self._normalize_key(key))

    def __contains__(self, key):
        return super().__contains__(self._normalize_key(key))

    def get(self, key, default=None):
        return super().get(self._normalize_key(key), default)

    def pop(self, key, default=None):
        return super().pop(self._normalize_key(key), default)


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure logging for programs built on argsparse, with support for both
    CLI-friendly and structured JSON output.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `ARGSPARSE_LOG_MODE` environment
            variable or fallback based on container detection.
        log_filename (str | None):
            Path to a log file. No file handler is installed when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("ARGSPARSE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("argsparse")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
