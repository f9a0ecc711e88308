import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from argsparse.utils import (
    CaseInsensitiveDict,
    get_program_name,
    is_affirmative,
    option_to_identifier,
    setup_logging,
)


@pytest.fixture
def root_logger(monkeypatch):
    root = logging.RootLogger(logging.WARNING)
    monkeypatch.setattr(logging, "root", root)
    yield root
    for handler in root.handlers:
        handler.close()


@pytest.mark.parametrize(
    "value, expected",
    [("yes", True), ("Yes", True), ("true", True), ("1", True), (True, True),
     ("no", False), ("y", False), ("", False), (False, False), (0, False)],
)
def test_is_affirmative(value, expected):
    assert is_affirmative(value) is expected


def test_option_to_identifier():
    assert option_to_identifier("dry-run") == "dry_run"
    assert option_to_identifier("dry_run") == "dry_run"


def test_get_program_name(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/local/bin/backup", "-v"])
    assert get_program_name() == "backup"
    monkeypatch.setattr("sys.argv", [""])
    assert get_program_name() == "argsparse"


def test_case_insensitive_dict():
    table = CaseInsensitiveDict()
    table["Even"] = 1
    assert table["EVEN"] == 1
    assert "even" in table
    assert table.get("eVeN") == 1
    assert table.pop("EVEN") == 1
    assert "even" not in table


def test_setup_logging_cli(root_logger):
    setup_logging(mode="cli", console_log_level=logging.INFO)
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], RichHandler)
    assert root_logger.handlers[0].level == logging.INFO


def test_setup_logging_json_with_file(root_logger, tmp_path):
    log_file = tmp_path / "argsparse.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)

    console_handler, file_handler = root_logger.handlers
    assert isinstance(console_handler.formatter, JsonFormatter)
    assert isinstance(file_handler, logging.FileHandler)
    assert isinstance(file_handler.formatter, JsonFormatter)

    root_logger.debug("hello")
    file_handler.flush()
    assert '"message": "hello"' in log_file.read_text()


def test_setup_logging_mode_from_environment(root_logger, monkeypatch):
    monkeypatch.setenv("ARGSPARSE_LOG_MODE", "json")
    setup_logging()
    assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)


def test_setup_logging_invalid_mode(root_logger):
    with pytest.raises(ValueError):
        setup_logging(mode="xml")
