# coding: utf-8
"""
    automata.fa
    ~~~~~~~~~~~

    Immutable finite automaton values shared by all stages.

    States are integers assigned sequentially by the stage that creates them,
    each kind of automaton displays them with its own prefix (``q0``, ``D0``,
    ``M0``).

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from types import MappingProxyType
from collections import namedtuple
from collections.abc import Mapping


class AutomataException(Exception):
    pass


class Epsilon(object):
    """
    Key under which epsilon transitions of an :class:`NFA` are stored. There
    is a single instance, :data:`EPSILON`, which never compares equal to a
    symbol.
    """
    def __str__(self):
        return u"ε"

    def __repr__(self):
        return "EPSILON"


EPSILON = Epsilon()


class Edge(namedtuple("Edge", ["source", "target", "symbols"])):
    __slots__ = ()

    @property
    def is_loop(self):
        return self.source == self.target


class Automaton(object):
    kind = None
    prefix = None

    def __init__(self, states, start, finals, alphabet, transitions, dead=None):
        self.states = tuple(states)
        self.start = start
        self.finals = frozenset(finals)
        unknown = set(transitions) - set(self.states)
        if unknown:
            raise ValueError(
                "transitions from unknown states %r" % sorted(unknown)
            )
        self.alphabet = tuple(sorted(alphabet))
        self.transitions = MappingProxyType({
            state: MappingProxyType({
                symbol: self._freeze_target(target)
                for symbol, target in transitions.get(state, {}).items()
            })
            for state in self.states
        })
        self.dead = dead
        self._check()

    def _freeze_target(self, target):
        return target

    def _targets_of(self, target):
        return [target]

    def _check(self):
        known = frozenset(self.states)
        if len(known) != len(self.states):
            raise ValueError("duplicate states in %r" % (self.states, ))
        if self.start not in known:
            raise ValueError("start state %r is not a state" % self.start)
        if not self.finals <= known:
            raise ValueError(
                "final states %r are not states" % sorted(self.finals - known)
            )
        if self.dead is not None and self.dead not in known:
            raise ValueError("dead state %r is not a state" % self.dead)
        for state, row in self.transitions.items():
            for symbol, target in row.items():
                if symbol is not EPSILON and symbol not in self.alphabet:
                    raise ValueError(
                        "transition from %s on %r outside of the alphabet" % (
                            self.label(state), symbol
                        )
                    )
                for target_state in self._targets_of(target):
                    if target_state not in known:
                        raise ValueError(
                            "transition from %s on %r to unknown state %r" % (
                                self.label(state), symbol, target_state
                            )
                        )

    def label(self, state):
        return u"%s%d" % (self.prefix, state)

    def is_final(self, state):
        return state in self.finals

    def edges(self):
        """
        Returns the transitions as a list of :class:`Edge` objects, one for
        each pair of connected states, with every symbol leading from the
        source to the target collected in a single label.
        """
        edges = {}
        for state in self.states:
            row = self.transitions[state]
            symbols = list(self.alphabet)
            if EPSILON in row:
                symbols.append(EPSILON)
            for symbol in symbols:
                if symbol not in row:
                    continue
                for target in self._targets_of(row[symbol]):
                    edges.setdefault((state, target), []).append(symbol)
        return [
            Edge(source, target, tuple(symbols))
            for (source, target), symbols in edges.items()
        ]

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return (
                self.states == other.states and
                self.start == other.start and
                self.finals == other.finals and
                self.alphabet == other.alphabet and
                self.as_dict() == other.as_dict() and
                self.dead == other.dead
            )
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def as_dict(self):
        return {state: dict(row) for state, row in self.transitions.items()}

    def __repr__(self):
        return "%s(%r, %r, %r, %r, %r, %r)" % (
            self.__class__.__name__,
            self.states,
            self.start,
            sorted(self.finals),
            self.alphabet,
            self.as_dict(),
            self.dead
        )


class NFA(Automaton):
    kind = "NFA"
    prefix = u"q"

    def _freeze_target(self, target):
        return tuple(target)

    def _targets_of(self, target):
        return target

    def targets(self, state, symbol):
        return self.transitions[state].get(symbol, ())

    def epsilon_targets(self, state):
        return self.targets(state, EPSILON)

    @property
    def has_epsilon(self):
        return any(EPSILON in row for row in self.transitions.values())


class DFA(Automaton):
    kind = "DFA"
    prefix = u"D"

    def transition(self, state, symbol):
        return self.transitions[state].get(symbol, None)

    @property
    def is_total(self):
        return all(
            symbol in self.transitions[state]
            for state in self.states
            for symbol in self.alphabet
        )


class MinimizedDFA(DFA):
    kind = "Minimized DFA"
    prefix = u"M"


class EquivalenceMapping(Mapping):
    """
    Maps each state of a derived automaton to the sorted states of the
    automaton it was derived from.
    """
    def __init__(self, groups, prefix, source_prefix):
        self._groups = {
            state: tuple(sorted(sources)) for state, sources in groups.items()
        }
        self.prefix = prefix
        self.source_prefix = source_prefix

    def __getitem__(self, state):
        return self._groups[state]

    def __iter__(self):
        return iter(sorted(self._groups))

    def __len__(self):
        return len(self._groups)

    def legend(self):
        lines = []
        for state in self:
            sources = self[state]
            if sources:
                group = u"{%s}" % u", ".join(
                    u"%s%d" % (self.source_prefix, source) for source in sources
                )
            else:
                group = u"∅"
            lines.append(u"%s%d = %s" % (self.prefix, state, group))
        return lines

    def __repr__(self):
        return "%s(%r, %r, %r)" % (
            self.__class__.__name__,
            self._groups,
            self.prefix,
            self.source_prefix
        )
