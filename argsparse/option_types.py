# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value type checking for options carrying a `type:<name>` property.

`TypeRegistry.check(type_name, value)` answers whether a raw command-line
string is a valid value of the named type. Type names are case-insensitive.

Built-in types:
- Filesystem: file, directory, pipe, terminal, socket, link
- Text and numbers: char, uint/unsignedint, int/integer, hexa
- Network: ipv4, ipv6, ip, hostname, host, portnumber, port
- Identity: username, group

Any other type name is looked up in the extension table filled with
`TypeRegistry.register()`. A type with no validator at all raises
`NoValidatorError`: that is a bug in the program, not bad user input.

Example:
    types = TypeRegistry()
    types.register("even", lambda value: value.isdigit() and int(value) % 2 == 0)
    types.check("uint", "42")   → True
    types.check("EVEN", "3")    → False
"""
from __future__ import annotations

import os
import re
import socket
import stat
from ipaddress import AddressValueError, IPv6Address
from typing import Callable

from argsparse.exceptions import ConfigurationError, NoValidatorError
from argsparse.logger import logger
from argsparse.utils import CaseInsensitiveDict

TypeCheck = Callable[[str], bool]

_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4_PATTERN = re.compile(rf"{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}")
UINT_PATTERN = re.compile(r"[0-9]+")
INT_PATTERN = re.compile(r"-?[0-9]+")
HEXA_PATTERN = re.compile(r"(0x)?[0-9a-fA-F]+")


def _stat_mode(value: str) -> int | None:
    try:
        return os.stat(value).st_mode
    except (OSError, ValueError):
        return None


def is_file(value: str) -> bool:
    return os.path.isfile(value)


def is_directory(value: str) -> bool:
    return os.path.isdir(value)


def is_pipe(value: str) -> bool:
    mode = _stat_mode(value)
    return mode is not None and stat.S_ISFIFO(mode)


def is_terminal(value: str) -> bool:
    """The value is an open file descriptor number referring to a terminal."""
    if not UINT_PATTERN.fullmatch(value):
        return False
    try:
        return os.isatty(int(value))
    except (OSError, OverflowError, ValueError):
        return False


def is_socket(value: str) -> bool:
    mode = _stat_mode(value)
    return mode is not None and stat.S_ISSOCK(mode)


def is_link(value: str) -> bool:
    return os.path.islink(value)


def is_char(value: str) -> bool:
    return len(value) == 1


def is_uint(value: str) -> bool:
    return UINT_PATTERN.fullmatch(value) is not None


def is_int(value: str) -> bool:
    return INT_PATTERN.fullmatch(value) is not None


def is_hexa(value: str) -> bool:
    return HEXA_PATTERN.fullmatch(value) is not None


def is_ipv4(value: str) -> bool:
    return IPV4_PATTERN.fullmatch(value) is not None


def is_ipv6(value: str) -> bool:
    if "%" in value:
        return False
    try:
        IPv6Address(value)
    except (AddressValueError, ValueError):
        return False
    return True


def is_ip(value: str) -> bool:
    return is_ipv4(value) or is_ipv6(value)


def is_hostname(value: str) -> bool:
    """The value resolves to an IPv4 or IPv6 address."""
    if not value:
        return False
    for family in (socket.AF_INET, socket.AF_INET6):
        try:
            if socket.getaddrinfo(value, None, family=family):
                return True
        except (OSError, UnicodeError):
            continue
    return False


def is_host(value: str) -> bool:
    return is_hostname(value) or is_ipv4(value) or is_ipv6(value)


def is_portnumber(value: str) -> bool:
    return is_uint(value) and 0 < int(value) < 65536


def is_port(value: str) -> bool:
    """A port number or a service name known to the system."""
    if is_portnumber(value):
        return True
    try:
        socket.getservbyname(value)
    except (OSError, UnicodeError):
        return False
    return True


def is_username(value: str) -> bool:
    try:
        import pwd
    except ImportError:
        return False
    try:
        pwd.getpwnam(value)
    except (KeyError, ValueError):
        return False
    return True


def is_group(value: str) -> bool:
    try:
        import grp
    except ImportError:
        return False
    try:
        grp.getgrnam(value)
    except (KeyError, ValueError):
        return False
    return True


BUILTIN_TYPES: dict[str, TypeCheck] = {
    "file": is_file,
    "directory": is_directory,
    "pipe": is_pipe,
    "terminal": is_terminal,
    "socket": is_socket,
    "link": is_link,
    "char": is_char,
    "unsignedint": is_uint,
    "uint": is_uint,
    "integer": is_int,
    "int": is_int,
    "hexa": is_hexa,
    "ipv4": is_ipv4,
    "ipv6": is_ipv6,
    "ip": is_ip,
    "hostname": is_hostname,
    "host": is_host,
    "portnumber": is_portnumber,
    "port": is_port,
    "username": is_username,
    "group": is_group,
}


class TypeRegistry:
    """
    Checks values against built-in and user-registered types.

    Methods:
        register(name, check): Add a validator for a non built-in type.
        unregister(name): Remove a user-registered validator.
        check(type_name, value): Validate a value.
    """

    def __init__(self) -> None:
        self._extensions: CaseInsensitiveDict = CaseInsensitiveDict()

    def register(self, name: str, check: TypeCheck) -> None:
        """
        Register a validator for a type name.

        Raises:
            ConfigurationError: If the name is a built-in type or `check` is not callable.
        """
        if name.lower() in BUILTIN_TYPES:
            raise ConfigurationError(f"{name}: built-in types cannot be overridden.")
        if not callable(check):
            raise ConfigurationError(f"{name}: type validator must be callable.")
        self._extensions[name] = check
        logger.debug("Registered validator for type '%s'.", name.lower())

    def unregister(self, name: str) -> None:
        self._extensions.pop(name)

    def is_known(self, type_name: str) -> bool:
        key = type_name.lower()
        return key in BUILTIN_TYPES or key in self._extensions

    def check(self, type_name: str, value: str) -> bool:
        """
        Check whether `value` is a valid `type_name`.

        Raises:
            NoValidatorError: If the type is neither built-in nor registered.
        """
        key = type_name.lower()
        builtin = BUILTIN_TYPES.get(key)
        if builtin is not None:
            return builtin(value)
        extension = self._extensions.get(key)
        if extension is None:
            logger.error("%s: type has no validation function. This is a bug.", key)
            raise NoValidatorError(
                f"{key}: type has no validation function. This is a bug."
            )
        return bool(extension(value))

    def __contains__(self, type_name: str) -> bool:
        return self.is_known(type_name)
