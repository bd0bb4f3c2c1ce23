# coding: utf-8
"""
    automata.tests
    ~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
import io
from unittest import TestCase
from contextlib import contextmanager, redirect_stdout

from automata.fa import NFA, DFA, MinimizedDFA, EquivalenceMapping, EPSILON
from automata.syntax import Syntax, DEFAULT_SYNTAX
from automata.validator import (
    validate, check, extract_alphabet, RegexSyntaxError
)
from automata.tokenizer import (
    Token, tokenize, insert_concatenation, to_postfix, postfix, SYMBOL,
    GROUP_BEGIN, GROUP_END, ZERO_OR_MORE, CONCATENATION
)
from automata.thompson import build, ConstructionError
from automata.subset import determinize, epsilon_closure, move
from automata.minimize import minimize
from automata.matcher import (
    run, accepts, Step, START, AlphabetError, TransitionError
)
from automata.pipeline import convert, simulate
from automata.render import transition_table, mapping_legend, trace_table
from automata.__main__ import main


def notation(tokens):
    return u"".join(token.lexeme for token in tokens)


class TestSyntax(TestCase):
    def test_default(self):
        self.assertEqual(Syntax(), DEFAULT_SYNTAX)
        self.assertEqual(
            DEFAULT_SYNTAX.repetition_characters, frozenset(u"*+?")
        )

    def test_operator_overlapping_symbols(self):
        with self.assertRaises(ValueError):
            Syntax(union=u"o")

    def test_operators_must_be_distinct(self):
        with self.assertRaises(ValueError):
            Syntax(union=u"+")
        with self.assertRaises(ValueError):
            Syntax(optional=u" ")

    def test_custom_union(self):
        syntax = Syntax(union=u"/")
        self.assertTrue(validate(u"a/b", syntax).is_valid)
        self.assertFalse(validate(u"a|b", syntax).is_valid)
        nfa = build(u"a/b", syntax)
        self.assertTrue(accepts(nfa, u"b"))


class TestValidator(TestCase):
    def assertInvalid(self, regex, reason, position):
        result = validate(regex)
        self.assertFalse(result.is_valid)
        self.assertIsInstance(result.error, RegexSyntaxError)
        self.assertEqual(result.error.reason, reason)
        self.assertEqual(result.error.position, position)

    def test_valid(self):
        self.assertEqual(validate(u"a(b|c)*d"), (True, None))
        self.assertTrue(validate(u"(ab)+ c?").is_valid)

    def test_empty(self):
        self.assertInvalid(u"", u"Please enter a regular expression", None)
        self.assertInvalid(u"   ", u"Please enter a regular expression", None)

    def test_missing_group_end(self):
        self.assertInvalid(
            u"(ab", u"Missing closing parenthesis ')' (opened at position 1)", 1
        )
        self.assertInvalid(
            u"((a)", u"Missing closing parenthesis ')' (opened at position 1)", 1
        )
        self.assertInvalid(
            u"(a)(b", u"Missing closing parenthesis ')' (opened at position 4)", 4
        )

    def test_extra_group_end(self):
        self.assertInvalid(
            u"ab)", u"Extra closing parenthesis ')' at position 3", 3
        )

    def test_repetition_at_beginning(self):
        self.assertInvalid(
            u"*ab", u"Operator '*' cannot appear at the beginning", 1
        )
        self.assertInvalid(
            u"+a", u"Operator '+' cannot appear at the beginning", 1
        )

    def test_consecutive_repetitions(self):
        self.assertInvalid(
            u"a**b", u"Invalid consecutive operators '**' at position 2", 2
        )
        self.assertInvalid(
            u"a?+", u"Invalid consecutive operators '?+' at position 2", 2
        )

    def test_repetition_after_group_begin(self):
        self.assertInvalid(
            u"(*ab)",
            u"Operator '*' cannot follow opening parenthesis at position 2",
            2
        )

    def test_union_at_edges(self):
        self.assertInvalid(
            u"|ab", u"Union operator '|' cannot be at beginning", 1
        )
        self.assertInvalid(u"ab|", u"Union operator '|' cannot be at end", 3)

    def test_consecutive_unions(self):
        self.assertInvalid(
            u"a||b", u"Consecutive union operators '||' at position 2", 2
        )

    def test_invalid_character(self):
        self.assertInvalid(u"a#b", u"Invalid character '#' at position 2", 2)
        self.assertInvalid(u"aε", u"Invalid character 'ε' at position 2", 2)

    def test_checks_in_order(self):
        # groups are checked before repetitions, repetitions before unions
        self.assertInvalid(
            u"*a)", u"Extra closing parenthesis ')' at position 3", 3
        )
        self.assertInvalid(
            u"|a**", u"Invalid consecutive operators '**' at position 3", 3
        )

    def test_annotation(self):
        error = validate(u"a#b").error
        self.assertEqual(error.annotation, (
            u"a#b\n"
            u" ^"
        ))
        self.assertIsNone(validate(u"").error.annotation)

    def test_check(self):
        check(u"ab")
        with self.assertRaises(RegexSyntaxError) as context:
            check(u"ab)")
        self.assertEqual(context.exception.position, 3)

    def test_extract_alphabet(self):
        self.assertEqual(extract_alphabet(u"a(b|c)*"), [u"a", u"b", u"c"])
        self.assertEqual(extract_alphabet(u"ba 1|b"), [u"1", u"a", u"b"])


class TestTokenizer(TestCase):
    def test_tokenize(self):
        self.assertEqual(tokenize(u"a (b)*"), [
            Token(SYMBOL, u"a"),
            Token(GROUP_BEGIN, u"("),
            Token(SYMBOL, u"b"),
            Token(GROUP_END, u")"),
            Token(ZERO_OR_MORE, u"*")
        ])

    def test_insert_concatenation(self):
        tokens = insert_concatenation(tokenize(u"ab(c)(d)*e?(f)"))
        self.assertEqual(notation(tokens), u"a·b·(c)·(d)*·e?·(f)")
        self.assertEqual(tokens[1].kind, CONCATENATION)

    def test_no_concatenation_around_union(self):
        self.assertEqual(
            notation(insert_concatenation(tokenize(u"a|(b)"))), u"a|(b)"
        )

    def test_concatenation_is_not_a_symbol(self):
        # the display lexeme of concatenation is tokenized as a symbol
        self.assertEqual(tokenize(u"·")[0].kind, SYMBOL)

    def test_postfix(self):
        self.assertEqual(notation(postfix(u"ab|c")), u"ab·c|")
        self.assertEqual(notation(postfix(u"a|bc")), u"abc·|")
        self.assertEqual(notation(postfix(u"a(b|c)*d")), u"abc|*·d·")
        self.assertEqual(notation(postfix(u"ab*")), u"ab*·")
        self.assertEqual(notation(postfix(u"a|b|c")), u"ab|c|")

    def test_postfix_keeps_unbalanced_groups(self):
        self.assertEqual(
            notation(to_postfix(tokenize(u"a)"))), u"a)"
        )


class TestThompson(TestCase):
    def test_literal(self):
        nfa = build(u"a")
        self.assertEqual(nfa.states, (0, 1))
        self.assertEqual(nfa.start, 0)
        self.assertEqual(nfa.finals, frozenset([1]))
        self.assertEqual(nfa.alphabet, (u"a", ))
        self.assertEqual(nfa.targets(0, u"a"), (1, ))
        self.assertEqual(nfa.kind, "NFA")

    def test_concatenation(self):
        nfa = build(u"ab")
        self.assertEqual(nfa.states, (0, 1, 2, 3))
        self.assertEqual(nfa.finals, frozenset([3]))
        self.assertEqual(nfa.as_dict(), {
            0: {u"a": (1, )},
            1: {EPSILON: (2, )},
            2: {u"b": (3, )},
            3: {}
        })

    def test_union(self):
        nfa = build(u"a|b")
        self.assertEqual(nfa.start, 0)
        self.assertEqual(nfa.finals, frozenset([5]))
        self.assertEqual(nfa.as_dict(), {
            0: {EPSILON: (1, 3)},
            1: {u"a": (2, )},
            2: {EPSILON: (5, )},
            3: {u"b": (4, )},
            4: {EPSILON: (5, )},
            5: {}
        })

    def test_zero_or_more(self):
        nfa = build(u"ab*")
        self.assertEqual(nfa.finals, frozenset([5]))
        self.assertEqual(nfa.as_dict(), {
            0: {u"a": (1, )},
            1: {EPSILON: (2, )},
            2: {EPSILON: (3, 5)},
            3: {u"b": (4, )},
            4: {EPSILON: (3, 5)},
            5: {}
        })

    def test_start_state_is_lowest(self):
        for regex in [u"a|b", u"(ab)*", u"a?", u"(a|b)+c"]:
            nfa = build(regex)
            self.assertEqual(nfa.start, 0)
            self.assertEqual(nfa.states, tuple(range(len(nfa.states))))

    def test_alphabet(self):
        self.assertEqual(build(u"b(a|c)*a").alphabet, (u"a", u"b", u"c"))

    def test_spaces_are_ignored(self):
        self.assertEqual(build(u"a b | c"), build(u"ab|c"))

    def test_deterministic(self):
        self.assertEqual(build(u"a(b|c)*d"), build(u"a(b|c)*d"))

    def test_one_or_more(self):
        nfa = build(u"a+")
        self.assertFalse(accepts(nfa, u""))
        self.assertTrue(accepts(nfa, u"a"))
        self.assertTrue(accepts(nfa, u"aaa"))

    def test_optional(self):
        nfa = build(u"a?")
        self.assertTrue(accepts(nfa, u""))
        self.assertTrue(accepts(nfa, u"a"))
        self.assertFalse(accepts(nfa, u"aa"))

    def test_missing_operands(self):
        for regex in [u"()", u"(a|)", u"a|", u"*"]:
            with self.assertRaises(ConstructionError):
                build(regex)

    def test_unbalanced(self):
        with self.assertRaises(ConstructionError) as context:
            build(u"a)")
        self.assertEqual(context.exception.reason, u"unbalanced )")

    def test_immutable(self):
        nfa = build(u"ab")
        with self.assertRaises(TypeError):
            nfa.transitions[0] = {}
        with self.assertRaises(TypeError):
            nfa.transitions[0][u"b"] = (3, )


class TestSubsetConstruction(TestCase):
    def test_epsilon_closure(self):
        nfa = build(u"a|b")
        self.assertEqual(epsilon_closure(nfa, [0]), (0, 1, 3))
        self.assertEqual(epsilon_closure(nfa, [2, 4]), (2, 4, 5))
        self.assertEqual(epsilon_closure(nfa, []), ())

    def test_move(self):
        nfa = build(u"a|b")
        self.assertEqual(move(nfa, (0, 1, 3), u"a"), set([2]))
        self.assertEqual(move(nfa, (0, 1, 3), u"b"), set([4]))
        self.assertEqual(move(nfa, (2, 5), u"a"), set())

    def test_union(self):
        dfa, state_mapping = determinize(build(u"a|b"))
        self.assertIsInstance(dfa, DFA)
        self.assertEqual(dfa.states, (0, 1, 2, 3))
        self.assertEqual(dfa.start, 0)
        self.assertEqual(dfa.finals, frozenset([1, 2]))
        self.assertEqual(dfa.dead, 3)
        self.assertEqual(dfa.as_dict(), {
            0: {u"a": 1, u"b": 2},
            1: {u"a": 3, u"b": 3},
            2: {u"a": 3, u"b": 3},
            3: {u"a": 3, u"b": 3}
        })
        self.assertEqual(dict(state_mapping), {
            0: (0, 1, 3),
            1: (2, 5),
            2: (4, 5),
            3: ()
        })

    def test_without_dead_state(self):
        dfa, state_mapping = determinize(build(u"a*"))
        self.assertIsNone(dfa.dead)
        self.assertEqual(dfa.states, (0, 1))
        self.assertEqual(dfa.finals, frozenset([0, 1]))
        self.assertTrue(all(state_mapping[state] for state in dfa.states))

    def test_total(self):
        for regex in [u"a|b", u"ab*", u"a(b|c)*d", u"(a|b)*abb", u"a?b+"]:
            self.assertTrue(determinize(build(regex)).dfa.is_total)

    def test_deterministic(self):
        nfa = build(u"(a|b)*abb")
        self.assertEqual(determinize(nfa), determinize(nfa))

    def test_does_not_modify_nfa(self):
        nfa = build(u"ab*")
        before = nfa.as_dict()
        determinize(nfa)
        self.assertEqual(nfa.as_dict(), before)


class TestMinimization(TestCase):
    def test_union(self):
        minimized, mapping = minimize(determinize(build(u"a|b")).dfa)
        self.assertIsInstance(minimized, MinimizedDFA)
        self.assertEqual(minimized.states, (0, 1, 2))
        self.assertEqual(minimized.start, 0)
        self.assertEqual(minimized.finals, frozenset([1]))
        self.assertEqual(minimized.dead, 2)
        self.assertEqual(minimized.as_dict(), {
            0: {u"a": 1, u"b": 1},
            1: {u"a": 2, u"b": 2},
            2: {u"a": 2, u"b": 2}
        })
        self.assertEqual(dict(mapping), {0: (0, ), 1: (1, 2), 2: (3, )})

    def test_merges_all_final_states(self):
        minimized, mapping = minimize(determinize(build(u"a*")).dfa)
        self.assertEqual(minimized.states, (0, ))
        self.assertEqual(minimized.finals, frozenset([0]))
        self.assertEqual(minimized.transition(0, u"a"), 0)
        self.assertEqual(mapping[0], (0, 1))

    def test_classic(self):
        dfa = determinize(build(u"(a|b)*abb")).dfa
        minimized = minimize(dfa).minimized
        self.assertEqual(len(minimized.states), 4)
        self.assertLessEqual(len(minimized.states), len(dfa.states))
        self.assertIsNone(minimized.dead)

    def test_fixed_point(self):
        for regex in [u"a|b", u"ab*", u"a(b|c)*d", u"(a|b)*abb", u"(ab)+c?"]:
            once = minimize(determinize(build(regex)).dfa).minimized
            twice = minimize(once).minimized
            self.assertEqual(len(twice.states), len(once.states))

    def test_partial_dfa(self):
        dfa = DFA(
            [0, 1, 2], 0, [1, 2], [u"a", u"b"],
            {0: {u"a": 1, u"b": 2}, 1: {u"a": 1}, 2: {u"b": 2}}
        )
        minimized = minimize(dfa).minimized
        # 1 and 2 differ in which transitions are defined
        self.assertEqual(len(minimized.states), 3)


class TestSimulator(TestCase):
    def setUp(self):
        self.minimized = convert(u"ab*").minimized

    def test_accepted(self):
        result = run(self.minimized, u"abb")
        self.assertTrue(result.accepted)
        self.assertIsNone(result.error)
        self.assertEqual(result.steps, (
            Step(0, START, 0),
            Step(1, u"a", 1),
            Step(1, u"b", 2),
            Step(1, u"b", 3)
        ))
        self.assertEqual(result.final_state, 1)

    def test_rejected(self):
        result = run(self.minimized, u"b")
        self.assertFalse(result.accepted)
        self.assertIsNone(result.error)
        self.assertEqual(result.final_state, self.minimized.dead)

    def test_empty_input(self):
        result = run(self.minimized, u"")
        self.assertFalse(result.accepted)
        self.assertEqual(result.steps, (Step(0, START, 0), ))

    def test_invalid_character(self):
        result = run(self.minimized, u"abc")
        self.assertFalse(result.accepted)
        self.assertIsInstance(result.error, AlphabetError)
        self.assertEqual(result.error.character, u"c")
        self.assertEqual(result.error.position, 3)
        self.assertEqual(
            str(result.error), u"Invalid character 'c' at position 3"
        )
        self.assertEqual(result.steps, ())

    def test_missing_transition(self):
        dfa = DFA([0, 1], 0, [1], [u"a", u"b"], {0: {u"a": 1}, 1: {}})
        result = run(dfa, u"ab")
        self.assertFalse(result.accepted)
        self.assertIsInstance(result.error, TransitionError)
        self.assertEqual(
            str(result.error), u"No transition from state D1 on symbol 'b'"
        )
        self.assertEqual(result.steps, (Step(0, START, 0), Step(1, u"a", 1)))

    def test_nfa(self):
        with self.assertRaises(TypeError):
            run(build(u"a"), u"a")


class ConversionTestWrapper(object):
    def __init__(self, regex):
        self.regex = regex
        self.conversion = convert(regex)

    @property
    def automata(self):
        return [
            self.conversion.nfa,
            self.conversion.dfa,
            self.conversion.minimized
        ]

    def assertAccepts(self, string):
        for automaton in self.automata:
            assert accepts(automaton, string), (automaton.kind, string)

    def assertAcceptsAll(self, strings):
        for string in strings:
            self.assertAccepts(string)

    def assertRejects(self, string):
        for automaton in self.automata:
            assert not accepts(automaton, string), (automaton.kind, string)

    def assertRejectsAll(self, strings):
        for string in strings:
            self.assertRejects(string)


class TestLanguage(TestCase):
    @contextmanager
    def regex(self, regex):
        yield ConversionTestWrapper(regex)

    def test_concatenation(self):
        with self.regex(u"ab") as regex:
            regex.assertAccepts(u"ab")
            regex.assertRejectsAll([u"", u"a", u"b", u"abab", u"ba"])

    def test_union(self):
        with self.regex(u"a|b") as regex:
            regex.assertAcceptsAll([u"a", u"b"])
            regex.assertRejectsAll([u"", u"ab", u"aa", u"bb"])

    def test_zero_or_more(self):
        with self.regex(u"ab*") as regex:
            regex.assertAcceptsAll([u"a", u"ab", u"abbb"])
            regex.assertRejectsAll([u"", u"b", u"aba", u"ac"])

    def test_group(self):
        with self.regex(u"a(b|c)*d") as regex:
            regex.assertAcceptsAll([u"ad", u"abd", u"acbd", u"abcbcd"])
            regex.assertRejectsAll([u"", u"a", u"d", u"abc", u"abda"])

    def test_one_or_more(self):
        with self.regex(u"(ab)+") as regex:
            regex.assertAcceptsAll([u"ab", u"abab", u"ababab"])
            regex.assertRejectsAll([u"", u"a", u"aba", u"abb"])

    def test_optional(self):
        with self.regex(u"a?b") as regex:
            regex.assertAcceptsAll([u"b", u"ab"])
            regex.assertRejectsAll([u"", u"a", u"aab", u"abb"])

    def test_classic(self):
        with self.regex(u"(a|b)*abb") as regex:
            regex.assertAcceptsAll([u"abb", u"aabb", u"babb", u"ababb"])
            regex.assertRejectsAll([u"", u"ab", u"abba", u"bbb"])

    def test_digits(self):
        with self.regex(u"1(0|1)*") as regex:
            regex.assertAcceptsAll([u"1", u"10", u"1101"])
            regex.assertRejectsAll([u"", u"0", u"01"])


class TestPipeline(TestCase):
    def test_convert(self):
        conversion = convert(u"a|b")
        self.assertEqual(conversion.regex, u"a|b")
        self.assertIsInstance(conversion.nfa, NFA)
        self.assertEqual(len(conversion.dfa.states), 4)
        self.assertEqual(len(conversion.minimized.states), 3)
        self.assertEqual(conversion.minimization_mapping[1], (1, 2))

    def test_convert_invalid(self):
        with self.assertRaises(RegexSyntaxError):
            convert(u"a#b")

    def test_independent_conversions(self):
        self.assertEqual(convert(u"ab*").nfa, convert(u"ab*").nfa)
        self.assertNotEqual(convert(u"ab*").nfa, convert(u"a*b").nfa)

    def test_simulate(self):
        conversion = convert(u"ab*")
        self.assertTrue(simulate(conversion, u"a").accepted)
        self.assertTrue(simulate(conversion, u"abbb").accepted)
        result = simulate(conversion, u"b")
        self.assertFalse(result.accepted)
        self.assertIsNone(result.error)
        result = simulate(conversion, u"ac")
        self.assertFalse(result.accepted)
        self.assertIsInstance(result.error, AlphabetError)
        self.assertEqual(result.error.character, u"c")


class TestRender(TestCase):
    def test_mapping_legend(self):
        conversion = convert(u"a|b")
        self.assertEqual(mapping_legend(conversion.state_mapping), (
            u"D0 = {q0, q1, q3}\n"
            u"D1 = {q2, q5}\n"
            u"D2 = {q4, q5}\n"
            u"D3 = ∅"
        ))
        self.assertEqual(conversion.minimization_mapping.legend(), [
            u"M0 = {D0}",
            u"M1 = {D1, D2}",
            u"M2 = {D3}"
        ])

    def test_equivalence_mapping(self):
        mapping = EquivalenceMapping({1: [3, 2], 0: [1]}, u"M", u"D")
        self.assertEqual(list(mapping), [0, 1])
        self.assertEqual(mapping[1], (2, 3))
        self.assertEqual(len(mapping), 2)

    def test_nfa_table(self):
        table = transition_table(build(u"a|b"))
        header = table.splitlines()[0].split()
        self.assertEqual(header, [u"State", u"a", u"b", u"ε"])
        self.assertIn(u"→q0", table)
        self.assertIn(u"*q5", table)
        self.assertIn(u"q1, q3", table)

    def test_dfa_table(self):
        table = transition_table(convert(u"a|b").minimized)
        header = table.splitlines()[0].split()
        self.assertEqual(header, [u"State", u"a", u"b"])
        self.assertIn(u"M2 (dead)", table)
        self.assertNotIn(u"ε", table)

    def test_trace_table(self):
        conversion = convert(u"ab*")
        table = trace_table(simulate(conversion, u"ab"), conversion.minimized)
        self.assertIn(u"(start)", table)
        self.assertTrue(table.endswith(u"accepted"))
        self.assertEqual(
            trace_table(simulate(conversion, u"ax"), conversion.minimized),
            u"error: Invalid character 'x' at position 2"
        )

    def test_edges(self):
        minimized = convert(u"a|b").minimized
        edges = minimized.edges()
        self.assertEqual(
            [(edge.source, edge.target, edge.symbols) for edge in edges],
            [(0, 1, (u"a", u"b")), (1, 2, (u"a", u"b")), (2, 2, (u"a", u"b"))]
        )
        self.assertEqual([edge.is_loop for edge in edges], [False, False, True])
        self.assertIn((0, 1, (EPSILON, )), build(u"a|b").edges())


class TestAutomaton(TestCase):
    def test_unknown_start(self):
        with self.assertRaises(ValueError):
            DFA([0], 1, [], [u"a"], {})

    def test_unknown_target(self):
        with self.assertRaises(ValueError):
            DFA([0], 0, [], [u"a"], {0: {u"a": 1}})

    def test_unknown_source(self):
        with self.assertRaises(ValueError):
            DFA([0], 0, [], [u"a"], {0: {}, 7: {u"a": 0}})

    def test_symbol_outside_alphabet(self):
        with self.assertRaises(ValueError):
            DFA([0], 0, [], [u"a"], {0: {u"b": 0}})

    def test_labels(self):
        self.assertEqual(build(u"a").label(1), u"q1")
        self.assertEqual(DFA([0], 0, [], [], {}).label(0), u"D0")
        self.assertEqual(MinimizedDFA([0], 0, [], [], {}).label(0), u"M0")


class TestMain(TestCase):
    def call(self, *arguments):
        output = io.StringIO()
        with redirect_stdout(output):
            status = main([u"automata"] + list(arguments))
        return status, output.getvalue()

    def test_validate(self):
        self.assertEqual(self.call(u"validate", u"a(b|c)*d"), (0, u"valid\n"))
        status, output = self.call(u"validate", u"a#b")
        self.assertEqual(status, 1)
        self.assertIn(u"Invalid character '#' at position 2", output)

    def test_convert(self):
        status, output = self.call(u"convert", u"a|b")
        self.assertEqual(status, 0)
        self.assertIn(u"Minimized DFA", output)
        self.assertIn(u"M1 = {D1, D2}", output)

    def test_convert_invalid(self):
        status, output = self.call(
            u"convert", u"--log-level=CRITICAL", u"ab)"
        )
        self.assertEqual(status, 1)
        self.assertEqual(output, u"")

    def test_run(self):
        self.assertEqual(self.call(u"run", u"ab*", u"a", u"abbb")[0], 0)
        status, output = self.call(u"run", u"ab*", u"a", u"b")
        self.assertEqual(status, 1)
        self.assertIn(u"rejected", output)

    def test_unknown_log_level(self):
        status, output = self.call(u"convert", u"--log-level=LOUD", u"ab")
        self.assertEqual(status, 2)
        self.assertEqual(output, u"unknown log level: LOUD\n")

    def test_test_command_exits(self):
        with self.assertRaises(SystemExit) as context:
            main([u"automata", u"test", u"TestSyntax.test_default"])
        self.assertEqual(context.exception.code, False)
