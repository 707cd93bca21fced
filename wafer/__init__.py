# coding= utf-8
"""
Implements a wafer machine: a small stack calculator with user-defined words,
a scratch stack, looping blocks and script loading, which responds to lines
of input until explicitly told otherwise.

Usage should be as simple as:
    >>> import wafer
    >>> m = wafer.Machine()
    >>> m.execute_line('3 4 +')
    7
    <Fault.NONE: 0>

Every line is a transaction: if anything on it goes wrong (an unknown word,
a stack underflow, an unclosed `{`), the machine reports the fault and puts
its stacks and dictionary back exactly as they were before the line.

Words are defined by starting a line with `name:`, e.g. `square: dup *`,
and looked up by name only when they run, so they may refer to each other
(or to themselves) freely.

A `{ ... }` block is a loop: while the value on top of the stack is nonzero,
the block's body runs, and it is up to the body to leave the next condition
on top:
    >>> m.execute_line('empty 5 { 1 - }')
    <Fault.NONE: 0>
"""
from wafer.environment import Environment
from wafer.errors import BadCast, Fault, StackUnderflow, WaferError
from wafer.machine import Machine
from wafer.parser import Parser
from wafer.values import Value, ValueKind, format_number, parse_number, to_single
from wafer.words import Word, WordKind

__all__ = (
    'Machine', 'Environment', 'Parser', 'Value', 'ValueKind', 'Word',
    'WordKind', 'Fault', 'WaferError', 'StackUnderflow', 'BadCast',
    'format_number', 'parse_number', 'to_single',
)
