# coding: utf-8
"""
    automata.render
    ~~~~~~~~~~~~~~~

    Plain text views of automata, mappings and traces.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from tabulate import tabulate

from automata.fa import NFA, EPSILON
from automata.matcher import START


NO_TARGET = u"-"


def state_cell(automaton, state):
    markers = u""
    if state == automaton.start:
        markers += u"→"
    if automaton.is_final(state):
        markers += u"*"
    label = markers + automaton.label(state)
    if state == automaton.dead:
        label += u" (dead)"
    return label


def target_cell(automaton, target):
    if target is None:
        return NO_TARGET
    if isinstance(automaton, NFA):
        if not target:
            return NO_TARGET
        return u", ".join(automaton.label(state) for state in target)
    return automaton.label(target)


def transition_table(automaton, tablefmt="simple"):
    """
    Renders one row per state and one column per symbol, NFAs with epsilon
    transitions get an additional ``ε`` column.
    """
    columns = list(automaton.alphabet)
    if isinstance(automaton, NFA) and automaton.has_epsilon:
        columns.append(EPSILON)
    rows = []
    for state in automaton.states:
        row = automaton.transitions[state]
        rows.append(
            [state_cell(automaton, state)] +
            [target_cell(automaton, row.get(symbol)) for symbol in columns]
        )
    headers = [u"State"] + [u"%s" % symbol for symbol in columns]
    return tabulate(rows, headers=headers, tablefmt=tablefmt)


def mapping_legend(mapping):
    return u"\n".join(mapping.legend())


def trace_table(result, automaton, tablefmt="simple"):
    rows = [
        [
            i,
            step.symbol if step.symbol != START else u"(start)",
            automaton.label(step.state),
            step.position
        ]
        for i, step in enumerate(result.steps)
    ]
    if result.error is not None:
        verdict = u"error: %s" % result.error
    elif result.accepted:
        verdict = u"accepted"
    else:
        verdict = u"rejected"
    if not rows:
        return verdict
    table = tabulate(
        rows, headers=[u"Step", u"Symbol", u"State", u"Position"],
        tablefmt=tablefmt
    )
    return u"%s\n%s" % (table, verdict)
