import sys
import types
from pathlib import Path

import pytest

from argsparse.config import ParserDefinition, RawOption, import_callable, loader
from argsparse.exceptions import ConfigurationError, ValidationError

YAML_DEFINITIONS = """
program: backup
usage_description: Backs up files.
minimum_parameters: 1
allow_no_argument: "no"
types:
  even: fake_checks.is_even
options:
  - optspec: "=verbose"
    description: Be verbose.
  - optspec: "mode:"
    description: Transfer mode.
    values: [fast, slow]
  - optspec: "count:"
    description: How many copies.
    properties: ["type:even", "default:2"]
  - optspec: "level:"
    description: Log level.
    properties: cumulative
    check: fake_checks.is_short
    hook: fake_checks.set_upper
"""

TOML_DEFINITIONS = """
program = "backup"
maximum_parameters = 2

[[options]]
optspec = "o=utput:"
description = "Where to write."
properties = ["mandatory"]

[[options]]
optspec = "quiet"
description = "Say nothing."
properties = ["exclude:output"]
"""


@pytest.fixture(autouse=True)
def fake_checks(monkeypatch):
    module = types.ModuleType("fake_checks")
    module.is_even = lambda value: value.isdigit() and int(value) % 2 == 0
    module.is_short = lambda value: len(value) <= 5

    def set_upper(parser, option, value):
        parser.set_cumulative_option(option, value.upper())

    module.set_upper = set_upper
    module.not_callable = 42
    monkeypatch.setitem(sys.modules, "fake_checks", module)
    monkeypatch.delenv("POSIXLY_CORRECT", raising=False)
    return module


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_loader_yaml(tmp_path):
    parser = loader(write(tmp_path, "backup.yaml", YAML_DEFINITIONS))

    assert parser.program == "backup"
    assert parser.usage_description == "Backs up files."
    assert parser.config.minimum_parameters == 1
    assert parser.config.allow_no_argument is False
    assert parser.registry.get_values("mode") == ["fast", "slow"]
    assert parser.get("count") == "2"

    result = parser.parse(["-v", "--level", "info", "--level", "warn", "src"])

    assert result.get("verbose") == 1
    assert result.values("level") == ["INFO", "WARN"]
    assert result.positionals == ["src"]


def test_loader_yaml_applies_checks(tmp_path):
    parser = loader(write(tmp_path, "backup.yml", YAML_DEFINITIONS))

    with pytest.raises(ValidationError):
        parser.parse_no_usage(["--count", "3", "src"])
    with pytest.raises(ValidationError):
        parser.parse_no_usage(["--level", "critical", "src"])
    with pytest.raises(ValidationError):
        parser.parse_no_usage(["--mode", "medium", "src"])


def test_loader_toml(tmp_path):
    parser = loader(write(tmp_path, "backup.toml", TOML_DEFINITIONS))

    assert parser.has_property("output", "short") == (True, "u")
    assert parser.parse(["-u", "out", "a", "b"]).get("output") == "out"


def test_loader_empty_file(tmp_path):
    parser = loader(write(tmp_path, "empty.yaml", ""))
    assert [option.name for option in parser.registry] == ["help"]


def test_loader_passes_consoles(tmp_path):
    from rich.console import Console

    console = Console()
    parser = loader(write(tmp_path, "backup.toml", TOML_DEFINITIONS), console=console)
    assert parser.console is console


def test_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_loader_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


@pytest.mark.parametrize(
    "name, content",
    [
        ("backup.json", "{}"),
        ("backup.yaml", "- just\n- a list\n"),
        ("backup.yaml", "options: [\n"),
        ("backup.toml", "options = [\n"),
        ("backup.yaml", "colour: blue\n"),
        ("backup.yaml", "options:\n  - description: no optspec\n"),
        ("backup.yaml", "minimum_parameters: -1\n"),
        ("backup.yaml", "options:\n  - optspec: 'bad name'\n"),
        ("backup.yaml", "types:\n  even: fake_checks.missing\n"),
        ("backup.yaml", "types:\n  even: fake_checks.not_callable\n"),
        ("backup.yaml", "types:\n  even: no_such_module_here.check\n"),
    ],
)
def test_loader_invalid_definitions(tmp_path, name, content):
    with pytest.raises(ConfigurationError):
        loader(write(tmp_path, name, content))


def test_import_callable():
    assert import_callable("os.path.join").__name__ == "join"
    with pytest.raises(ConfigurationError):
        import_callable("join")


def test_raw_option_properties_as_string():
    assert RawOption(optspec="level:", properties="mandatory").properties == ["mandatory"]
    assert RawOption(optspec="level:", values=[1, 2]).values == ["1", "2"]


def test_parser_definition_to_parser():
    definition = ParserDefinition(
        program="prog",
        allow_no_argument="yes",
        add_help=False,
        options=[RawOption(optspec="=verbose", description="Be verbose.")],
    )
    parser = definition.to_parser()

    assert "help" not in parser.registry
    assert parser.parse([]).options == {}
    assert parser.parse(["-v"]).get("verbose") == 1
