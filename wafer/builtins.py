# coding= utf-8
"""
The native word library. :class:`Builtins` is mixed into
:class:`wafer.Machine`, which registers every builtin into its dictionary
when it starts up.

Builtins signal trouble by raising (usually a :exc:`wafer.StackUnderflow`
out of the environment); :meth:`wafer.Word.fire` turns that into a
StackFault, so nothing in here catches stack errors.
"""
import inspect
import math
import sys

from wafer import config
from wafer.values import format_number, to_single
from wafer.words import Word, WordKind

CLEAR_SCREEN = '\033[2J\033[H'


# Python's math raises where single-precision hardware arithmetic gives an
# infinity or NaN; these give the hardware answer instead.

def _divide(a, b):
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _truncated_divide(a, b):
    quotient = _divide(a, b)
    if not math.isfinite(quotient):
        return quotient
    return math.trunc(quotient)


def _remainder(a, b):
    if b == 0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


def _power(a, b):
    try:
        return math.pow(a, b)
    except OverflowError:
        odd = b.is_integer() and b % 2 == 1
        return -math.inf if a < 0 and odd else math.inf
    except ValueError:
        # 0 to a negative power, or a negative base to a fractional power
        if a == 0:
            odd = b.is_integer() and b % 2 == 1
            return math.copysign(math.inf, a) if odd else math.inf
        return math.nan


def _logarithm(func):
    def log(a):
        if a == 0:
            return -math.inf
        if a < 0 or math.isnan(a):
            return math.nan
        return func(a)
    return log


def _periodic(func):
    def periodic(a):
        if math.isinf(a):
            return math.nan
        return func(a)
    return periodic


def _rounding(func):
    def rounding(a):
        if not math.isfinite(a):
            return a
        return func(a)
    return rounding


def _word(name):
    """
    Creates a decorator that adds a .word member to its given func, which may
    then be inspected for by :meth:`Builtins.install_builtins`. Note that if
    you already have an instance of :class:`wafer.Machine`, it's too late to
    decorate and you should call its :meth:`Builtins.add_stackmethod`
    instead.
    """
    def decorator(func):
        func.word = name
        return func
    return decorator


class Builtins(object):
    """ Native words. Expects self.env, self.out and self.conf_path. """

    def install_builtins(self):
        # Decorated member words
        for name, method in inspect.getmembers(self, inspect.ismethod):
            if hasattr(method, 'word'):
                self.env.define(Word.builtin(method.word, method))

        # Arithmetic: `a b -` is a - b
        self.add_stackmethod('+', lambda b, a: a + b)
        self.add_stackmethod('-', lambda b, a: a - b)
        self.add_stackmethod('*', lambda b, a: a * b)
        self.add_stackmethod('/', lambda b, a: _divide(a, b))
        self.add_stackmethod('//', lambda b, a: _truncated_divide(a, b))
        self.add_stackmethod('%', lambda b, a: _remainder(a, b))
        self.add_stackmethod('**', lambda b, a: _power(a, b))

        self.add_stackmethod('ln', _logarithm(math.log))
        self.add_stackmethod('log10', _logarithm(math.log10))
        self.add_stackmethod('log2', _logarithm(math.log2))
        self.add_stackmethod('sin', _periodic(math.sin))
        self.add_stackmethod('cos', _periodic(math.cos))
        self.add_stackmethod('tan', _periodic(math.tan))
        self.add_stackmethod('floor', _rounding(math.floor))
        self.add_stackmethod('ceil', _rounding(math.ceil))

        self.add_stackmethod('>', lambda b, a: a > b)
        self.add_stackmethod('>=', lambda b, a: a >= b)
        self.add_stackmethod('==', lambda b, a: a == b)
        self.add_stackmethod('!=', lambda b, a: a != b)
        self.add_stackmethod('<', lambda b, a: a < b)
        self.add_stackmethod('<=', lambda b, a: a <= b)

        self.add_stackmethod('not', lambda a: not a, pop='boolean')
        self.add_stackmethod('or', lambda b, a: a or b, pop='boolean')
        self.add_stackmethod('and', lambda b, a: a and b, pop='boolean')
        self.add_stackmethod('xor', lambda b, a: a != b, pop='boolean')

        self.add_stackmethod('~', lambda a: ~a, pop='integer')
        self.add_stackmethod('|', lambda b, a: a | b, pop='integer')
        self.add_stackmethod('&', lambda b, a: a & b, pop='integer')
        self.add_stackmethod('^', lambda b, a: a ^ b, pop='integer')

        self.add_stackmethod('drop', lambda a: None, pop='value')
        self.add_stackmethod('swap', lambda b, a: (b, a), pop='value')
        self.add_stackmethod('rot', lambda c, b, a: (b, c, a), pop='value')

    def add_stackmethod(self, word, func, pop='number'):
        """
        Turns a given function `func` into a stack-consumer.

        The function will get its arguments from the operand stack
        automatically, in the order they pop off (so from the stack [1, 2]
        the call to a two-argument function will be func(2, 1)). `pop` names
        the projection each argument is popped as: 'number', 'boolean',
        'integer' or 'value'. The return value (a tuple for several values,
        None for nothing) goes back on the stack.

        There is no provision for a stack-consumer to print anything, nor for
        it to touch any other parts of the machine it's a part of.
        """
        num_args = func.__code__.co_argcount

        def stack_helper():
            popper = getattr(self.env, 'pop_' + pop)
            args = [popper() for x in range(num_args)]
            ret = func(*args)
            if ret is None:
                return
            if not isinstance(ret, tuple):
                ret = (ret,)
            for value in ret:
                self.env.push(value)
        self.env.define(Word.builtin(word, stack_helper))

    @_word('dup')
    def _dup(self):
        self.env.push_value(self.env.peek())

    @_word('empty')
    def _empty(self):
        self.env.stack.clear()

    @_word('count')
    def _count(self):
        self.env.push_number(len(self.env.stack))

    @_word('sum')
    def _sum(self):
        total = 0.0
        for value in self.env.drain():
            total = to_single(total + value.num)
        self.env.push_number(total)

    @_word('prod')
    def _prod(self):
        product = 1.0
        for value in self.env.drain():
            product = to_single(product * value.num)
        self.env.push_number(product)

    @_word('push')
    def _push_scratch(self):
        self.env.stash()

    @_word('pop')
    def _pop_scratch(self):
        self.env.unstash()

    @_word('.')
    def _print_top(self):
        self._print(format_number(self.env.pop_number()))

    @_word('cr')
    def _cr(self):
        self._print()

    @_word('cls')
    def _cls(self):
        self._print(CLEAR_SCREEN, end='')

    @_word('help')
    def _help(self):
        words = self.env.words.values()
        builtins = [w.name for w in words if w.kind is WordKind.BUILTIN]
        self._print('BUILTINS: %s' % ', '.join(builtins))
        self._print('DEFINED:')
        for w in words:
            if w.kind is WordKind.DEFINED:
                self._print('\t%s: %s' % (w.name, w.definition))

    @_word('exit')
    def _exit(self):
        sys.exit(0)

    @_word('reload')
    def _reload(self):
        self.load_default_script()

    @_word('default')
    def _default(self):
        config.write_default(self.conf_path)
        self.load_default_script()

    @_word('conf')
    def _conf(self):
        config.ensure_default(self.conf_path)
        config.open_in_editor(self.conf_path)
