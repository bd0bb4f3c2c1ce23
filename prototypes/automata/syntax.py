# coding: utf-8
"""
    automata.syntax
    ~~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
import string


SYMBOL_CHARACTERS = frozenset(string.ascii_letters + string.digits)


class Syntax(object):
    """
    The characters making up the concrete regex syntax. Symbols are always
    the ASCII letters and digits, so none of the operator characters may be
    one of those.
    """
    def __init__(self,
                 union=u"|",
                 group_begin=u"(", group_end=u")",
                 zero_or_more=u"*", one_or_more=u"+", optional=u"?",
                 ignored=u" "
                 ):
        self.union = union
        self.group_begin = group_begin
        self.group_end = group_end
        self.zero_or_more = zero_or_more
        self.one_or_more = one_or_more
        self.optional = optional
        self.ignored = ignored
        characters = [
            self.union, self.group_begin, self.group_end,
            self.zero_or_more, self.one_or_more, self.optional, self.ignored
        ]
        if len(set(characters)) != len(characters):
            raise ValueError(
                "operator characters must be distinct: %r" % (characters, )
            )
        overlap = (self.special_characters | set(self.ignored)) & SYMBOL_CHARACTERS
        if overlap:
            raise ValueError(
                "operator characters overlap with symbols: %s" % (
                    u", ".join(sorted(overlap))
                )
            )

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, self.__class__):
            return (
                self.union == other.union and
                self.group_begin == other.group_begin and
                self.group_end == other.group_end and
                self.zero_or_more == other.zero_or_more and
                self.one_or_more == other.one_or_more and
                self.optional == other.optional and
                self.ignored == other.ignored
            )
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    @property
    def special_characters(self):
        return frozenset([
            self.union,
            self.group_begin, self.group_end,
            self.zero_or_more, self.one_or_more, self.optional
        ])

    @property
    def repetition_characters(self):
        return frozenset([self.zero_or_more, self.one_or_more, self.optional])

    @property
    def group_characters(self):
        return [self.group_begin, self.group_end]

    def is_symbol(self, character):
        return character in SYMBOL_CHARACTERS

    def is_allowed(self, character):
        return (
            self.is_symbol(character) or
            character in self.special_characters or
            character == self.ignored
        )

    def __repr__(self):
        return "%s(%r, %r, %r, %r, %r, %r, %r)" % (
            self.__class__.__name__,
            self.union,
            self.group_begin,
            self.group_end,
            self.zero_or_more,
            self.one_or_more,
            self.optional,
            self.ignored
        )


DEFAULT_SYNTAX = Syntax()
