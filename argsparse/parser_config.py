# Argsparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-level settings of an `OptionParser`, validated with pydantic.

Settings:
- program: Name printed in usage and error messages.
- minimum_parameters / maximum_parameters: Bounds on the number of positional
  parameters (0 and 100000 by default).
- allow_no_argument: Whether an empty command line is accepted. Accepts
  booleans or 'yes' / 'true' / '1' (case-insensitive); anything else is no.
- usage_description: Text appended verbatim after the usage.
- add_help: Whether the parser declares the `-h/--help` option.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from argsparse.utils import get_program_name, is_affirmative

DEFAULT_MAXIMUM_PARAMETERS = 100000


class ParserConfig(BaseModel):
    """Settings model for `OptionParser`."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    program: str = Field(default_factory=get_program_name)
    minimum_parameters: int = Field(default=0, ge=0)
    maximum_parameters: int = Field(default=DEFAULT_MAXIMUM_PARAMETERS, ge=0)
    allow_no_argument: bool = False
    usage_description: str = ""
    add_help: bool = True

    @field_validator("allow_no_argument", mode="before")
    @classmethod
    def coerce_affirmative(cls, value: Any) -> bool:
        if isinstance(value, (bool, int, str)):
            return is_affirmative(value)
        raise ValueError("allow_no_argument must be a boolean or a yes/no string.")

    @field_validator("minimum_parameters", "maximum_parameters", mode="before")
    @classmethod
    def validate_count(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("parameter count must be a number, not a boolean.")
        if isinstance(value, str) and not value.isdigit():
            raise ValueError(f"{value!r}: parameter count must be a positive number.")
        return value

    @model_validator(mode="after")
    def validate_program(self) -> ParserConfig:
        if not self.program:
            raise ValueError("program name cannot be empty.")
        return self
