# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option definitions from YAML or TOML files into an `OptionParser`.

A definitions file declares options only; it never supplies option values.

Example (YAML):
    program: backup
    minimum_parameters: 1
    types:
      bucket: my_project.checks.is_bucket
    options:
      - optspec: "=verbose"
        description: Be verbose.
      - optspec: "mode:"
        description: Transfer mode.
        values: [fast, slow]
      - optspec: "target:"
        description: Where to upload.
        properties: [mandatory, "type:bucket"]
        check: my_project.checks.is_writable
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from argsparse.exceptions import ConfigurationError
from argsparse.logger import logger
from argsparse.option_parser import OptionParser
from argsparse.parser_config import DEFAULT_MAXIMUM_PARAMETERS, ParserConfig


def import_callable(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigurationError(f"{dotted_path}: invalid import path.")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigurationError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        target = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigurationError(
            f"Module '{module_path}' has no attribute '{attr}'."
        ) from error
    if not callable(target):
        raise ConfigurationError(f"{dotted_path}: not a callable.")
    return target


class RawOption(BaseModel):
    """Raw option model for argsparse definition files."""

    model_config = ConfigDict(extra="forbid")

    optspec: str
    description: str = ""
    properties: list[str] = Field(default_factory=list)
    values: list[str] | None = None
    check: str | None = None
    hook: str | None = None

    @field_validator("properties", mode="before")
    @classmethod
    def split_properties(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("values", mode="before")
    @classmethod
    def stringify_values(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [str(item) for item in value]
        return value


class ParserDefinition(BaseModel):
    """Parser definition model for argsparse definition files."""

    model_config = ConfigDict(extra="forbid")

    program: str | None = None
    usage_description: str = ""
    minimum_parameters: int = 0
    maximum_parameters: int = DEFAULT_MAXIMUM_PARAMETERS
    allow_no_argument: bool | str = False
    add_help: bool = True
    types: dict[str, str] = Field(default_factory=dict)
    options: list[RawOption] = Field(default_factory=list)

    def to_config(self) -> ParserConfig:
        settings = self.model_dump(exclude={"types", "options"}, exclude_none=True)
        try:
            return ParserConfig(**settings)
        except PydanticValidationError as error:
            raise ConfigurationError(str(error)) from error

    def to_parser(self, **kwargs: Any) -> OptionParser:
        """
        Build an `OptionParser` from this definition.

        Extra keyword arguments (`console`, `error_console`) are passed to the
        parser. Types are registered before options so `type:` properties can
        refer to them.
        """
        parser = OptionParser(config=self.to_config(), **kwargs)
        for name, dotted_path in self.types.items():
            parser.register_type(name, import_callable(dotted_path))
        for raw_option in self.options:
            option = parser.define(
                raw_option.optspec, raw_option.description, *raw_option.properties
            )
            if raw_option.values is not None:
                parser.set_values(option.name, raw_option.values)
            if raw_option.check:
                parser.set_value_check(option.name, import_callable(raw_option.check))
            if raw_option.hook:
                parser.set_option_hook(option.name, import_callable(raw_option.hook))
        return parser


def read_definitions(path: Path) -> dict[str, Any]:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as definitions_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(definitions_file)
            elif suffix == ".toml":
                raw_config = toml.load(definitions_file)
            else:
                raise ConfigurationError(f"Unsupported definitions format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigurationError(f"{path}: cannot parse definitions: {error}") from error

    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            "Definitions file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "program: 'backup'\n"
            "options:\n"
            "  - optspec: '=verbose'\n"
            "    description: 'Be verbose.'"
        )
    return raw_config


def loader(file_path: Path | str, **kwargs: Any) -> OptionParser:
    """
    Load option definitions from a YAML or TOML file.

    Each option should be defined as a dictionary with at least:
    - optspec: the option spec, e.g. 'o=utput:'
    - description: text shown in the long usage view

    and optionally `properties`, `values` (enumerated set), `check` and `hook`
    (dotted import paths of a value check and a setting hook).

    Args:
        file_path (Path | str): Path to the definitions file (YAML or TOML).
        **kwargs: Passed to the `OptionParser` (e.g. `console`).

    Returns:
        OptionParser: A parser with the loaded options declared.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file cannot be parsed or declares invalid
            options.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such definitions file: {file_path}")

    raw_config = read_definitions(path)
    try:
        definition = ParserDefinition(**raw_config)
    except PydanticValidationError as error:
        raise ConfigurationError(f"{path}: invalid definitions:\n{error}") from error
    logger.debug("Loaded %d option definition(s) from '%s'.", len(definition.options), path)
    return definition.to_parser(**kwargs)
