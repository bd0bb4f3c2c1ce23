# coding: utf-8
"""
    automata.validator
    ~~~~~~~~~~~~~~~~~~

    Syntax checks performed before a regex is handed to the builder. Errors
    are returned rather than raised, so they can be shown next to the input,
    :func:`check` raises them instead.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from collections import namedtuple

from automata.fa import AutomataException
from automata.syntax import DEFAULT_SYNTAX


ValidationResult = namedtuple("ValidationResult", ["is_valid", "error"])


class RegexSyntaxError(AutomataException):
    def __init__(self, reason, position=None, regex=None):
        AutomataException.__init__(self, reason, position)
        self.reason = reason
        #: 1-based position of the offending character, if there is one.
        self.position = position
        self.regex = regex

    @property
    def annotation(self):
        if self.position is None or self.regex is None:
            return None
        annotation = [u" "] * self.position
        annotation[self.position - 1] = u"^"
        return u"%s\n%s" % (self.regex, u"".join(annotation))

    def __str__(self):
        if self.position is None:
            return self.reason
        return u"%s\n%s" % (self.reason, self.annotation)


def validate(regex, syntax=DEFAULT_SYNTAX):
    error = _find_error(regex, syntax)
    return ValidationResult(error is None, error)


def check(regex, syntax=DEFAULT_SYNTAX):
    error = _find_error(regex, syntax)
    if error is not None:
        raise error


def _find_error(regex, syntax):
    for check_step in [
        _check_empty,
        _check_groups,
        _check_repetitions,
        _check_unions,
        _check_characters
    ]:
        error = check_step(regex, syntax)
        if error is not None:
            return error
    return None


def _check_empty(regex, syntax):
    if not regex or not regex.strip():
        return RegexSyntaxError(u"Please enter a regular expression")


def _check_groups(regex, syntax):
    group_begin, group_end = syntax.group_characters
    opened = []
    for i, character in enumerate(regex):
        if character == group_begin:
            opened.append(i)
        elif character == group_end:
            if not opened:
                return RegexSyntaxError(
                    u"Extra closing parenthesis '%s' at position %d" % (
                        group_end, i + 1
                    ),
                    i + 1,
                    regex
                )
            opened.pop()
    if opened:
        position = opened[-1] + 1
        return RegexSyntaxError(
            u"Missing closing parenthesis '%s' (opened at position %d)" % (
                group_end, position
            ),
            position,
            regex
        )


def _check_repetitions(regex, syntax):
    repetitions = syntax.repetition_characters
    for i, character in enumerate(regex):
        following = regex[i + 1:i + 2]
        if i == 0 and character in repetitions:
            return RegexSyntaxError(
                u"Operator '%s' cannot appear at the beginning" % character,
                1,
                regex
            )
        if character in repetitions and following in repetitions:
            return RegexSyntaxError(
                u"Invalid consecutive operators '%s%s' at position %d" % (
                    character, following, i + 1
                ),
                i + 1,
                regex
            )
        if character == syntax.group_begin and following in repetitions:
            return RegexSyntaxError(
                u"Operator '%s' cannot follow opening parenthesis "
                u"at position %d" % (following, i + 2),
                i + 2,
                regex
            )


def _check_unions(regex, syntax):
    union = syntax.union
    if regex.startswith(union):
        return RegexSyntaxError(
            u"Union operator '%s' cannot be at beginning" % union, 1, regex
        )
    if regex.endswith(union):
        return RegexSyntaxError(
            u"Union operator '%s' cannot be at end" % union, len(regex), regex
        )
    position = regex.find(union * 2)
    if position != -1:
        return RegexSyntaxError(
            u"Consecutive union operators '%s' at position %d" % (
                union * 2, position + 1
            ),
            position + 1,
            regex
        )


def _check_characters(regex, syntax):
    for i, character in enumerate(regex):
        if not syntax.is_allowed(character):
            return RegexSyntaxError(
                u"Invalid character '%s' at position %d" % (character, i + 1),
                i + 1,
                regex
            )


def extract_alphabet(regex, syntax=DEFAULT_SYNTAX):
    return sorted(set(
        character for character in regex if syntax.is_symbol(character)
    ))
