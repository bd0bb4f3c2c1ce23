# coding: utf-8
"""
    automata.matcher
    ~~~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from collections import namedtuple

from automata.fa import NFA, AutomataException
from automata.subset import epsilon_closure, move


#: Symbol of the first step of every trace, before any input is consumed.
START = u"start"


Step = namedtuple("Step", ["state", "symbol", "position"])
SimulationResult = namedtuple(
    "SimulationResult", ["accepted", "error", "steps", "final_state"]
)


class SimulationError(AutomataException):
    def __init__(self, reason):
        AutomataException.__init__(self, reason)
        self.reason = reason

    def __str__(self):
        return self.reason


class AlphabetError(SimulationError):
    def __init__(self, character, position):
        SimulationError.__init__(
            self,
            u"Invalid character '%s' at position %d" % (character, position)
        )
        self.character = character
        #: 1-based position of `character` in the input.
        self.position = position


class TransitionError(SimulationError):
    def __init__(self, state, symbol):
        SimulationError.__init__(
            self,
            u"No transition from state %s on symbol '%s'" % (state, symbol)
        )
        self.state = state
        self.symbol = symbol


def run(dfa, string):
    """
    Steps `dfa` over `string` and returns a :class:`SimulationResult` with
    the trace of visited states.
    """
    if isinstance(dfa, NFA):
        raise TypeError("cannot step an NFA, determinize it first")
    for i, character in enumerate(string):
        if character not in dfa.alphabet:
            return SimulationResult(False, AlphabetError(character, i + 1), (), None)

    state = dfa.start
    steps = [Step(state, START, 0)]
    for position, symbol in enumerate(string, 1):
        target = dfa.transition(state, symbol)
        if target is None:
            return SimulationResult(
                False,
                TransitionError(dfa.label(state), symbol),
                tuple(steps),
                None
            )
        state = target
        steps.append(Step(state, symbol, position))
    return SimulationResult(dfa.is_final(state), None, tuple(steps), state)


def accepts(automaton, string):
    """
    Returns `True` if `automaton`, deterministic or not, accepts `string`.
    """
    if not isinstance(automaton, NFA):
        return run(automaton, string).accepted
    states = epsilon_closure(automaton, [automaton.start])
    for character in string:
        if character not in automaton.alphabet:
            return False
        states = epsilon_closure(automaton, move(automaton, states, character))
        if not states:
            return False
    return bool(automaton.finals.intersection(states))
