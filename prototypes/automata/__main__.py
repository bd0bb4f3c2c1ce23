# coding: utf-8
import sys
import logging
import unittest

from automata.fa import AutomataException
from automata.validator import validate
from automata.pipeline import convert, simulate
from automata.render import transition_table, mapping_legend, trace_table

from docopt import docopt


logger = logging.getLogger("automata")


def print_conversion(conversion, tablefmt):
    sections = [
        (u"NFA", transition_table(conversion.nfa, tablefmt)),
        (u"DFA", transition_table(conversion.dfa, tablefmt)),
        (u"DFA states", mapping_legend(conversion.state_mapping)),
        (u"Minimized DFA", transition_table(conversion.minimized, tablefmt)),
        (u"Minimized states", mapping_legend(conversion.minimization_mapping))
    ]
    for title, body in sections:
        print(title)
        print(u"=" * len(title))
        print(body)
        print()


def main(argv=sys.argv):
    """
    Usage:
      automata convert [options] <regex>
      automata validate <regex>
      automata run [options] <regex> <string>...
      automata test [<args>...]
      automata -h | --help

    Options:
      -h --help            Show this.
      --format=<format>    Table format used by tabulate [default: simple].
      --log-level=<level>  Logging level [default: WARNING].
    """
    arguments = docopt(main.__doc__, argv[1:], help=True)
    if arguments["test"]:
        import automata.tests
        unittest.main(
            module=automata.tests,
            argv=argv[0:1] + arguments["<args>"],
            buffer=True
        )

    level = (arguments["--log-level"] or "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        print(u"unknown log level: %s" % arguments["--log-level"])
        return 2
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    tablefmt = arguments["--format"] or "simple"

    if arguments["validate"]:
        result = validate(arguments["<regex>"])
        if result.is_valid:
            print(u"valid")
            return 0
        print(u"invalid: %s" % result.error)
        return 1

    try:
        conversion = convert(arguments["<regex>"])
    except AutomataException as error:
        logger.error("%s", error)
        return 1

    if arguments["convert"]:
        print_conversion(conversion, tablefmt)
        return 0

    all_accepted = True
    for string in arguments["<string>"]:
        result = simulate(conversion, string)
        all_accepted = all_accepted and result.accepted
        print(u"%r" % string)
        print(trace_table(result, conversion.minimized, tablefmt))
        print()
    return 0 if all_accepted else 1


if __name__ == "__main__":
    sys.exit(main())
