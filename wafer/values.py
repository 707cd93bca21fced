# coding= utf-8
"""
Values live on the operand and scratch stacks. There are only two kinds of
them: numbers (single-precision floats) and text.

Every Value carries both projections at once: a number knows how it prints,
and a piece of text knows its numeric value, which is simply its length.
Arithmetic and comparison words only ever look at the numeric projection, so
comparing a number with some text really compares it with the text's length.
"""
from collections import namedtuple
import enum
import math
import struct


class ValueKind(enum.Enum):
    NUMBER = 'number'
    TEXT = 'text'


def to_single(number):
    """ Rounds a Python float to the nearest single-precision value. """
    try:
        return struct.unpack('f', struct.pack('f', number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def format_number(number):
    """
    Shortest text that reads back as the same single-precision value, e.g.
    `7`, `2.5` or `0.1` rather than `7.0` or `0.10000000149011612`.
    """
    if math.isnan(number):
        return 'nan'
    if math.isinf(number):
        return 'inf' if number > 0 else '-inf'
    for precision in range(1, 10):
        text = '%.*g' % (precision, number)
        if to_single(float(text)) == number:
            return text
    return repr(number)


def parse_number(token):
    """ Returns the single-precision value of a literal, or None. """
    try:
        return to_single(float(token))
    except ValueError:
        return None


class Value(namedtuple('Value', 'kind num text')):
    """ An immutable stack entry. Build one with Value.number or Value.string. """
    __slots__ = ()

    @classmethod
    def number(cls, number):
        number = to_single(float(number))
        return cls(ValueKind.NUMBER, number, format_number(number))

    @classmethod
    def string(cls, text):
        # TODO: confirm whether text should really compare by length.
        return cls(ValueKind.TEXT, to_single(len(text)), text)

    @property
    def is_number(self):
        return self.kind is ValueKind.NUMBER

    def __str__(self):
        return self.text

    def __repr__(self):
        if self.is_number:
            return 'Value.number(%s)' % self.text
        return 'Value.string(%r)' % self.text
