import pytest

from argsparse import OptionParser
from argsparse.exceptions import ValidationError
from argsparse.parser_types import ParseResult, ParseState


@pytest.fixture(autouse=True)
def gnu_getopt_permutes(monkeypatch):
    monkeypatch.delenv("POSIXLY_CORRECT", raising=False)


def test_state_accumulates_across_parses():
    parser = OptionParser(program="prog")
    parser.define("=verbose", "Be verbose.")

    parser.parse(["-v"])
    result = parser.parse(["-v", "file"])

    assert result.get("verbose") == 2
    assert result.positionals == ["file"]


def test_failed_parse_leaves_state_untouched():
    parser = OptionParser(program="prog")
    parser.define("=verbose", "Be verbose.")
    parser.define("foo:", "Foo.", "type:uint", "cumulative")
    parser.parse(["-v", "--foo", "1", "first"])

    with pytest.raises(ValidationError):
        parser.parse_no_usage(["-v", "--foo", "2", "--foo", "bad", "second"])

    assert parser.options == {"verbose": 1, "foo": 1}
    assert parser.cumulated_values("foo") == ["1"]
    assert parser.positionals == ["first"]


def test_result_is_a_snapshot():
    parser = OptionParser(program="prog")
    parser.define("=verbose", "Be verbose.")

    first = parser.parse(["-v"])
    parser.parse(["-v"])

    assert first.get("verbose") == 1
    assert parser.get("verbose") == 2


def test_reset_keeps_definitions_and_reseeds_defaults():
    parser = OptionParser(program="prog")
    parser.define("o=utput:", "Where to write.", "default:/tmp")
    parser.define("include", "Paths.", "cumulative")
    parser.parse(["-u", "/srv", "--include", "a", "file"])

    parser.reset()

    assert parser.options == {"output": "/tmp"}
    assert parser.cumulated_values("include") == []
    assert parser.positionals == []
    assert "output" in parser.registry
    assert parser.has_property("output", "default") == (True, "/tmp")


def test_reset_clears_short_options():
    parser = OptionParser(program="prog")
    parser.define("=verbose", "Be verbose.")

    parser.reset()

    assert parser.registry.short_options == {}
    assert parser.has_property("verbose", "short") == (False, "")
    parser.set_property("short:v", "verbose")
    assert parser.parse(["-v"]).get("verbose") == 1


def test_default_is_overridden_by_command_line():
    parser = OptionParser(program="prog")
    parser.define("mode:", "Mode.", "default:fast")

    assert parser.parse(["--mode", "slow"]).get("mode") == "slow"
    parser.reset()
    assert parser.parse(["file"]).get("mode") == "fast"


def test_counter_after_default():
    state = ParseState(options={"verbose": "loud"})
    state.increment("verbose")
    state.increment("verbose")
    assert state.options["verbose"] == 2


def test_to_namespace():
    parser = OptionParser(program="prog")
    parser.define("dry-run", "Do nothing.")
    parser.define("include", "Paths.", "cumulative")
    parser.define("mode:", "Mode.")

    namespace = parser.parse(["--dry-run", "--include", "a", "--mode", "slow"]).to_namespace()

    assert namespace.dry_run == 1
    assert namespace.include == ["a"]
    assert namespace.mode == "slow"
    assert not hasattr(namespace, "help")


def test_to_namespace_identifier_collision():
    result = ParseResult(
        options={"dry-run": 1, "dry_run": "x"}, positionals=[], cumulated={}
    )
    assert result.to_namespace().dry_run == "x"
