# coding: utf-8
"""
    automata
    ~~~~~~~~

    Converts regular expressions into finite automata: an epsilon-NFA using
    Thompson's construction, a DFA using the subset construction and a
    minimal DFA using table filling. The minimal DFA can then be stepped over
    input strings, producing a trace of the visited states.

    The concrete syntax is deliberately small: letters and digits are
    symbols, ``|`` is union, ``*``, ``+`` and ``?`` are repetitions and
    parentheses group. Spaces are ignored.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
