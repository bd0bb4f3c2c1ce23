# coding: utf-8
"""
    automata.thompson
    ~~~~~~~~~~~~~~~~~

    Thompson's construction of an epsilon-NFA from a regex.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
import logging
from itertools import count

from automata.fa import NFA, EPSILON, AutomataException
from automata.syntax import DEFAULT_SYNTAX
from automata.tokenizer import (
    postfix, SYMBOL, UNION, CONCATENATION, ZERO_OR_MORE, ONE_OR_MORE,
    OPTIONAL
)


logger = logging.getLogger(__name__)


class ConstructionError(AutomataException):
    """
    Raised for a token stream that does not describe a regex. The validator
    rejects such input, so this indicates a bug in the caller.
    """
    def __init__(self, reason):
        AutomataException.__init__(self, reason)
        self.reason = reason


class Fragment(object):
    def __init__(self, start, finals, states, edges):
        self.start = start
        self.finals = finals
        self.states = states
        #: ``(source, symbol, target)`` triples, `symbol` may be `EPSILON`.
        self.edges = edges

    def __repr__(self):
        return "%s(%r, %r, %r, %r)" % (
            self.__class__.__name__,
            self.start,
            self.finals,
            self.states,
            self.edges
        )


class Builder(object):
    """
    Builds fragments from a postfix token stream. State ids come from a
    counter owned by the builder, so separate builds never share ids.
    """
    def __init__(self):
        self.ids = count()

    def new_state(self):
        return next(self.ids)

    def literal(self, symbol):
        start = self.new_state()
        end = self.new_state()
        return Fragment(start, [end], [start, end], [(start, symbol, end)])

    def concatenation(self, left, right):
        edges = list(left.edges)
        edges.extend((final, EPSILON, right.start) for final in left.finals)
        edges.extend(right.edges)
        return Fragment(
            left.start, right.finals, left.states + right.states, edges
        )

    def union(self, left, right):
        start = self.new_state()
        end = self.new_state()
        edges = [(start, EPSILON, left.start), (start, EPSILON, right.start)]
        edges.extend(left.edges)
        edges.extend(right.edges)
        edges.extend((final, EPSILON, end) for final in left.finals)
        edges.extend((final, EPSILON, end) for final in right.finals)
        return Fragment(
            start, [end], [start] + left.states + right.states + [end], edges
        )

    def zero_or_more(self, repeated):
        start = self.new_state()
        end = self.new_state()
        edges = [(start, EPSILON, repeated.start), (start, EPSILON, end)]
        edges.extend(repeated.edges)
        for final in repeated.finals:
            edges.append((final, EPSILON, repeated.start))
            edges.append((final, EPSILON, end))
        return Fragment(start, [end], [start] + repeated.states + [end], edges)

    def one_or_more(self, repeated):
        start = self.new_state()
        end = self.new_state()
        edges = [(start, EPSILON, repeated.start)]
        edges.extend(repeated.edges)
        for final in repeated.finals:
            edges.append((final, EPSILON, repeated.start))
            edges.append((final, EPSILON, end))
        return Fragment(start, [end], [start] + repeated.states + [end], edges)

    def optional(self, fragment):
        start = self.new_state()
        end = self.new_state()
        edges = [(start, EPSILON, fragment.start), (start, EPSILON, end)]
        edges.extend(fragment.edges)
        edges.extend((final, EPSILON, end) for final in fragment.finals)
        return Fragment(start, [end], [start] + fragment.states + [end], edges)

    def build(self, tokens):
        binary = {UNION: self.union, CONCATENATION: self.concatenation}
        unary = {
            ZERO_OR_MORE: self.zero_or_more,
            ONE_OR_MORE: self.one_or_more,
            OPTIONAL: self.optional
        }
        stack = []
        for token in tokens:
            if token.kind == SYMBOL:
                stack.append(self.literal(token.lexeme))
            elif token.kind in binary:
                if len(stack) < 2:
                    raise ConstructionError(
                        u"%s needs two operands, got %d" % (
                            token.kind, len(stack)
                        )
                    )
                right = stack.pop()
                left = stack.pop()
                stack.append(binary[token.kind](left, right))
            elif token.kind in unary:
                if not stack:
                    raise ConstructionError(
                        u"%s needs an operand" % token.kind
                    )
                stack.append(unary[token.kind](stack.pop()))
            else:
                raise ConstructionError(u"unbalanced %s" % token.lexeme)
        if len(stack) != 1:
            raise ConstructionError(
                u"expected a single fragment, got %d" % len(stack)
            )
        return stack[0]


def renumber(fragment):
    """
    Returns a copy of `fragment` whose start state is 0, the other states
    keep their relative order.
    """
    ids = {fragment.start: 0}
    for state in fragment.states:
        if state not in ids:
            ids[state] = len(ids)
    return Fragment(
        ids[fragment.start],
        [ids[final] for final in fragment.finals],
        sorted(ids.values()),
        [(ids[source], symbol, ids[target])
         for source, symbol, target in fragment.edges]
    )


def build(regex, syntax=DEFAULT_SYNTAX):
    fragment = renumber(Builder().build(postfix(regex, syntax)))
    transitions = {state: {} for state in fragment.states}
    alphabet = set()
    for source, symbol, target in fragment.edges:
        if symbol is not EPSILON:
            alphabet.add(symbol)
        transitions[source].setdefault(symbol, []).append(target)
    nfa = NFA(
        fragment.states, fragment.start, fragment.finals, alphabet, transitions
    )
    logger.debug(
        "built NFA for %r: %d states, alphabet %s",
        regex, len(nfa.states), u"".join(nfa.alphabet)
    )
    return nfa
