import pytest

from argsparse import OptionParser
from argsparse.exceptions import OptionSyntaxError
from argsparse.tokenizer import END_OF_OPTIONS, build_getopt_spec, tokenize


@pytest.fixture(autouse=True)
def gnu_getopt_permutes(monkeypatch):
    monkeypatch.delenv("POSIXLY_CORRECT", raising=False)


def test_build_getopt_spec():
    parser = OptionParser(program="prog", add_help=False)
    parser.define("=verbose", "Be verbose.")
    parser.define("o=utput:", "Where to write.")
    parser.define("include", "Paths.", "cumulative")

    shorts, longs = build_getopt_spec(parser.registry)

    assert shorts == "vu:"
    assert longs == ["verbose", "output=", "include="]


def test_tokenize_reorders():
    tokens = tokenize(
        ["a", "-v", "--out", "x", "b", "-o", "y"], "vo:", ["verbose", "output="]
    )
    assert tokens == ["-v", "--output", "x", "-o", "y", END_OF_OPTIONS, "a", "b"]


def test_tokenize_attached_values():
    tokens = tokenize(["-ox", "--output=y"], "o:", ["output="])
    assert tokens == ["-o", "x", "--output", "y", "--"]


def test_tokenize_without_arguments():
    assert tokenize([], "", []) == ["--"]


@pytest.mark.parametrize(
    "args",
    [
        ["--nope"],
        ["-x"],
        ["--output"],
        ["-o"],
        ["--ver"],
        ["--verbose=yes"],
    ],
)
def test_tokenize_rejects(args):
    with pytest.raises(OptionSyntaxError):
        tokenize(args, "o:", ["output=", "verbose", "version"])
