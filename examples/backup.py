import sys

from argsparse import HelpSignal, OptionParser, ParseFailure

parser = OptionParser(
    usage_description="Copies SOURCE... to the output directory.",
)
parser.define("=verbose", "Be verbose.")
parser.define("=output:", "Where to write.", "mandatory", "type:directory")
parser.define("e=xclude", "Paths to leave out.", "cumulativeset")
parser.define("mode:", "Transfer mode.", "default:fast")
parser.set_values("mode", ["fast", "slow"])
parser.define("quiet", "Say nothing.", "exclude:verbose")
parser.define("debug", "Verbose report of the parsed options.", "alias:verbose", "hidden")
parser.minimum_parameters(1)

try:
    result = parser.parse()
except HelpSignal:
    sys.exit(0)
except ParseFailure:
    sys.exit(1)

if result.is_set("verbose"):
    parser.render_report()

for source in result.positionals:
    print(f"{source} -> {result.get('output')} ({result.get('mode')})")
