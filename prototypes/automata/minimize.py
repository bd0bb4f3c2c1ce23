# coding: utf-8
"""
    automata.minimize
    ~~~~~~~~~~~~~~~~~

    DFA minimization by table filling: pairs of states are marked as
    distinguishable until nothing changes, unmarked pairs are merged.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
import logging
from collections import namedtuple

from automata.fa import MinimizedDFA, EquivalenceMapping


logger = logging.getLogger(__name__)


Minimization = namedtuple("Minimization", ["minimized", "mapping"])


def distinguishable(dfa, p, q, index, marked):
    for symbol in dfa.alphabet:
        p_target = dfa.transition(p, symbol)
        q_target = dfa.transition(q, symbol)
        if (p_target is None) != (q_target is None):
            return True
        if (
            p_target is not None and
            p_target != q_target and
            marked[index[p_target]][index[q_target]]
        ):
            return True
    return False


def fill_table(dfa):
    """
    Returns a symmetric matrix, indexed by the position of states in
    ``dfa.states``, that is true for every pair of distinguishable states.
    """
    states = dfa.states
    index = {state: i for i, state in enumerate(states)}
    marked = [[False] * len(states) for _ in states]
    for i, p in enumerate(states):
        for j in range(i + 1, len(states)):
            if dfa.is_final(p) != dfa.is_final(states[j]):
                marked[i][j] = marked[j][i] = True

    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1
        for i, p in enumerate(states):
            for j in range(i + 1, len(states)):
                if marked[i][j]:
                    continue
                if distinguishable(dfa, p, states[j], index, marked):
                    marked[i][j] = marked[j][i] = True
                    changed = True
    logger.debug("distinguishability table stable after %d passes", passes)
    return marked


def equivalence_classes(dfa, marked):
    classes = []
    class_of = {}
    for i, state in enumerate(dfa.states):
        if state in class_of:
            continue
        members = [state]
        for j in range(i + 1, len(dfa.states)):
            other = dfa.states[j]
            if other not in class_of and not marked[i][j]:
                members.append(other)
        for member in members:
            class_of[member] = len(classes)
        classes.append(members)
    return classes, class_of


def minimize(dfa):
    classes, class_of = equivalence_classes(dfa, fill_table(dfa))
    transitions = {}
    for new_state, members in enumerate(classes):
        representative = members[0]
        row = transitions[new_state] = {}
        for symbol in dfa.alphabet:
            target = dfa.transition(representative, symbol)
            if target is not None:
                row[symbol] = class_of[target]

    minimized = MinimizedDFA(
        range(len(classes)),
        class_of[dfa.start],
        set(class_of[final] for final in dfa.finals),
        dfa.alphabet,
        transitions,
        None if dfa.dead is None else class_of[dfa.dead]
    )
    logger.debug(
        "minimized %d states into %d", len(dfa.states), len(minimized.states)
    )
    return Minimization(
        minimized,
        EquivalenceMapping(
            dict(enumerate(classes)), minimized.prefix, dfa.prefix
        )
    )
