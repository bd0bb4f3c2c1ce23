# coding: utf-8
"""
    automata.subset
    ~~~~~~~~~~~~~~~

    Subset construction of a DFA from an epsilon-NFA.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
import logging
from collections import deque, namedtuple

from automata.fa import DFA, EquivalenceMapping


logger = logging.getLogger(__name__)


Determinization = namedtuple("Determinization", ["dfa", "state_mapping"])


class DeadState(object):
    """
    Target recorded for an empty subset while the worklist runs, replaced
    by a real state once all transitions are known.
    """
    def __repr__(self):
        return "DEAD"


DEAD = DeadState()


def epsilon_closure(nfa, states):
    closure = set(states)
    stack = list(closure)
    while stack:
        state = stack.pop()
        for target in nfa.epsilon_targets(state):
            if target not in closure:
                closure.add(target)
                stack.append(target)
    return tuple(sorted(closure))


def move(nfa, states, symbol):
    result = set()
    for state in states:
        result.update(nfa.targets(state, symbol))
    return result


def determinize(nfa):
    start = epsilon_closure(nfa, [nfa.start])
    ids = {start: 0}
    subsets = [start]
    transitions = {}
    unmarked = deque([start])
    while unmarked:
        subset = unmarked.popleft()
        row = transitions[ids[subset]] = {}
        for symbol in nfa.alphabet:
            closure = epsilon_closure(nfa, move(nfa, subset, symbol))
            if not closure:
                row[symbol] = DEAD
                continue
            if closure not in ids:
                ids[closure] = len(subsets)
                subsets.append(closure)
                unmarked.append(closure)
            row[symbol] = ids[closure]

    finals = [
        ids[subset] for subset in subsets if nfa.finals.intersection(subset)
    ]
    dead = None
    if any(target is DEAD for row in transitions.values() for target in row.values()):
        dead = len(subsets)
        subsets.append(())
        for row in transitions.values():
            for symbol, target in row.items():
                if target is DEAD:
                    row[symbol] = dead
        transitions[dead] = {symbol: dead for symbol in nfa.alphabet}

    dfa = DFA(
        range(len(subsets)), 0, finals, nfa.alphabet, transitions, dead
    )
    logger.debug(
        "determinized %d NFA states into %d DFA states%s",
        len(nfa.states), len(dfa.states),
        "" if dead is None else " (dead state %s)" % dfa.label(dead)
    )
    return Determinization(
        dfa,
        EquivalenceMapping(
            dict(enumerate(subsets)), dfa.prefix, nfa.prefix
        )
    )
