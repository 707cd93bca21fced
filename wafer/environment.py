# coding= utf-8
import math

from wafer.errors import BadCast, StackUnderflow
from wafer.values import Value

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class Environment(object):
    """
    Everything a computation can change: the operand stack, the scratch
    stack and the word dictionary. Stacks are plain lists with their top at
    the end.

    The machine never undoes individual changes; it keeps a :meth:`copy`
    from before a line and swaps the whole environment back if the line
    fails.
    """
    def __init__(self, stack=None, scratch=None, words=None):
        self.stack = list(stack or ())
        self.scratch = list(scratch or ())
        self.words = dict(words or {})

    def copy(self):
        # Values and Words are immutable, so shallow copies are independent.
        return Environment(self.stack, self.scratch, self.words)

    def __eq__(self, other):
        if not isinstance(other, Environment):
            return NotImplemented
        return (self.stack == other.stack and
                self.scratch == other.scratch and
                self.words == other.words)

    def __repr__(self):
        return 'Environment(stack=%r, scratch=%r, words=%d)' % (
            self.stack, self.scratch, len(self.words))

    def push_value(self, value):
        self.stack.append(value)

    def push_number(self, number):
        self.push_value(Value.number(number))

    def push_text(self, text):
        self.push_value(Value.string(text))

    def push_boolean(self, flag):
        self.push_number(1 if flag else 0)

    def push(self, result):
        """ Pushes whatever a builtin returned, picking the right push_*. """
        if isinstance(result, Value):
            self.push_value(result)
        elif isinstance(result, bool):
            self.push_boolean(result)
        elif isinstance(result, str):
            self.push_text(result)
        else:
            self.push_number(result)

    def pop_value(self):
        if not self.stack:
            raise StackUnderflow('stack underflow')
        return self.stack.pop()

    def pop_number(self):
        return self.pop_value().num

    def pop_text(self):
        return self.pop_value().text

    def pop_boolean(self):
        return self.pop_number() != 0

    def pop_integer(self):
        number = self.pop_number()
        if not math.isfinite(number):
            raise BadCast('cannot truncate %r' % number)
        integer = int(number)
        if not INT_MIN <= integer <= INT_MAX:
            raise BadCast('%d does not fit in 32 bits' % integer)
        return integer

    def peek(self):
        if not self.stack:
            raise StackUnderflow('stack underflow')
        return self.stack[-1]

    def drain(self):
        """ Pops every value, top first. """
        while self.stack:
            yield self.stack.pop()

    def stash(self):
        """ Moves the top of the operand stack onto the scratch stack. """
        self.scratch.append(self.pop_value())

    def unstash(self):
        if not self.scratch:
            raise StackUnderflow('scratch stack underflow')
        self.stack.append(self.scratch.pop())

    def define(self, word):
        self.words[word.name] = word

    def lookup(self, name):
        return self.words.get(name)
