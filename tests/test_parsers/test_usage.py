from argsparse import OptionParser
from argsparse.usage import get_option_text, get_usage_short


def build_parser() -> OptionParser:
    parser = OptionParser(program="prog", add_help=False)
    parser.define("=verbose", "Be verbose.")
    parser.define("o=utput:", "Where to write.", "mandatory")
    parser.define("mode:", "Transfer mode.")
    parser.set_values("mode", ["fast", "slow"])
    parser.define("include", "Paths.", "cumulative")
    parser.define("secret", "Hidden.", "hidden")
    parser.define("everything", "Same as verbose.", "alias:verbose")
    return parser


def test_option_text():
    parser = build_parser()
    registry = parser.registry
    assert get_option_text(registry["verbose"]) == "[ --verbose ]"
    assert get_option_text(registry["output"]) == "--output OUTPUT"
    assert get_option_text(registry["mode"], ["fast", "slow"]) == "[ --mode <fast|slow> ]"


def test_usage_short_wraps():
    parser = build_parser()
    assert parser.get_usage_short().splitlines() == [
        "prog [ --verbose ] --output OUTPUT [ --mode <fast|slow> ] \\",
        "        [ --include INCLUDE ] [ --everything ]",
    ]


def test_usage_short_custom_width():
    parser = build_parser()
    lines = get_usage_short(parser.registry, "prog", max_length=30).splitlines()
    assert lines[0] == "prog [ --verbose ] \\"
    assert all(line.endswith(" \\") for line in lines[:-1])
    assert lines[-1] == "        [ --everything ]"


def test_usage_long():
    parser = build_parser()
    assert parser.get_usage_long().splitlines() == [
        " -v | --verbose   Be verbose.",
        " -u | --output    Where to write.",
        "      --mode      Transfer mode.",
        "                  Acceptable values: 'fast' 'slow'",
        "      --include   Paths.",
        "                  Can be repeated.",
        "      --everything",
        "                  Same as verbose.",
        "                  Same as: --verbose",
    ]


def test_hidden_options_are_not_shown():
    usage = build_parser().get_usage()
    assert "secret" not in usage
    assert "Hidden." not in usage


def test_usage_description():
    parser = build_parser()
    assert not parser.get_usage().endswith("\n")

    parser.usage_description = "Backs up files."
    assert parser.get_usage().endswith("Same as: --verbose\n\nBacks up files.")


def test_render_usage(capsys):
    build_parser().render_usage()
    captured = capsys.readouterr()
    assert captured.out.startswith("prog [ --verbose ] --output OUTPUT")
    assert "      --everything\n" in captured.out
