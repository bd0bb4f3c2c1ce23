# coding: utf-8
"""
    automata.pipeline
    ~~~~~~~~~~~~~~~~~

    Runs a regex through every stage, from validation to minimization.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
import logging
from collections import namedtuple

from automata.syntax import DEFAULT_SYNTAX
from automata.validator import check
from automata.thompson import build
from automata.subset import determinize
from automata.minimize import minimize
from automata.matcher import run


logger = logging.getLogger(__name__)


Conversion = namedtuple("Conversion", [
    "regex",
    "nfa",
    "dfa", "state_mapping",
    "minimized", "minimization_mapping"
])


def convert(regex, syntax=DEFAULT_SYNTAX):
    """
    Returns a :class:`Conversion` holding the automata built for `regex`.

    Raises :exc:`~automata.validator.RegexSyntaxError` for an invalid regex.
    """
    check(regex, syntax)
    nfa = build(regex, syntax)
    logger.info("NFA: %d states, alphabet %r", len(nfa.states), nfa.alphabet)
    dfa, state_mapping = determinize(nfa)
    logger.info(
        "DFA: %d states, %d final", len(dfa.states), len(dfa.finals)
    )
    minimized, minimization_mapping = minimize(dfa)
    logger.info(
        "Minimized DFA: %d states, %d final",
        len(minimized.states), len(minimized.finals)
    )
    return Conversion(
        regex, nfa, dfa, state_mapping, minimized, minimization_mapping
    )


def simulate(conversion, string):
    return run(conversion.minimized, string)
