# coding: utf-8
"""
    automata.tokenizer
    ~~~~~~~~~~~~~~~~~~

    Turns a regex into a postfix token stream for the Thompson builder.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from automata.syntax import DEFAULT_SYNTAX


SYMBOL = "symbol"
UNION = "union"
CONCATENATION = "concatenation"
ZERO_OR_MORE = "zero_or_more"
ONE_OR_MORE = "one_or_more"
OPTIONAL = "optional"
GROUP_BEGIN = "group_begin"
GROUP_END = "group_end"

POSTFIX_OPERATORS = frozenset([ZERO_OR_MORE, ONE_OR_MORE, OPTIONAL])

PRECEDENCE = {
    UNION: 1,
    CONCATENATION: 2,
    ZERO_OR_MORE: 3,
    ONE_OR_MORE: 3,
    OPTIONAL: 3
}


class Token(object):
    def __init__(self, kind, lexeme):
        self.kind = kind
        self.lexeme = lexeme

    @property
    def is_operand_end(self):
        return (
            self.kind == SYMBOL or
            self.kind == GROUP_END or
            self.kind in POSTFIX_OPERATORS
        )

    @property
    def is_operand_begin(self):
        return self.kind == SYMBOL or self.kind == GROUP_BEGIN

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.kind == other.kind and self.lexeme == other.lexeme
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__name__, self.kind, self.lexeme)


# Concatenation is implicit in the concrete syntax, the lexeme is only used
# for display and can never be produced from user input.
CONCATENATION_TOKEN = Token(CONCATENATION, u"·")


def _operator_kinds(syntax):
    return {
        syntax.union: UNION,
        syntax.zero_or_more: ZERO_OR_MORE,
        syntax.one_or_more: ONE_OR_MORE,
        syntax.optional: OPTIONAL,
        syntax.group_begin: GROUP_BEGIN,
        syntax.group_end: GROUP_END
    }


def tokenize(regex, syntax=DEFAULT_SYNTAX):
    operators = _operator_kinds(syntax)
    tokens = []
    for character in regex:
        if character == syntax.ignored:
            continue
        tokens.append(Token(operators.get(character, SYMBOL), character))
    return tokens


def insert_concatenation(tokens):
    result = []
    for i, token in enumerate(tokens):
        result.append(token)
        if i + 1 < len(tokens):
            if token.is_operand_end and tokens[i + 1].is_operand_begin:
                result.append(CONCATENATION_TOKEN)
    return result


def to_postfix(tokens):
    """
    Reorders infix `tokens` into postfix notation, dropping groups. All
    operators are left associative.

    Unbalanced groups are not detected here, the builder notices the
    resulting malformed stream.
    """
    output = []
    stack = []
    for token in tokens:
        if token.kind == SYMBOL:
            output.append(token)
        elif token.kind == GROUP_BEGIN:
            stack.append(token)
        elif token.kind == GROUP_END:
            while stack and stack[-1].kind != GROUP_BEGIN:
                output.append(stack.pop())
            if stack:
                stack.pop()
            else:
                output.append(token)
        else:
            while (
                stack and
                stack[-1].kind != GROUP_BEGIN and
                PRECEDENCE[stack[-1].kind] >= PRECEDENCE[token.kind]
            ):
                output.append(stack.pop())
            stack.append(token)
    while stack:
        output.append(stack.pop())
    return output


def postfix(regex, syntax=DEFAULT_SYNTAX):
    return to_postfix(insert_concatenation(tokenize(regex, syntax)))
