# coding= utf-8
import logging
import sys
from pathlib import Path

from wafer import config
from wafer.builtins import Builtins
from wafer.environment import Environment
from wafer.errors import Fault
from wafer.parser import Parser
from wafer.values import parse_number
from wafer.words import Word

BLOCK_OPEN = '{'
BLOCK_CLOSE = '}'
DEFINE_SUFFIX = ':'
LOAD = 'load'


class Machine(Builtins):
    """
    A wafer machine. It has two stacks and a dictionary, and evaluates one
    line of input at a time.

    :meth:`execute_line` is the entry point for anything a person typed: the
    line either runs to completion or leaves no trace at all. :meth:`process`
    is the dispatcher underneath it, which defined words and blocks re-enter
    as subroutines.
    """
    def __init__(self, out=None, conf_path=None, logger='wafer'):
        self.env = Environment()
        self.out = out if out is not None else sys.stdout
        self.conf_path = Path(conf_path) if conf_path else config.default_path()
        self.logger = logging.getLogger(logger)
        self.install_builtins()

    def _print(self, *args, **kwargs):
        kwargs.setdefault('file', self.out)
        print(*args, **kwargs)

    def print_stack(self):
        """ Shows the operand stack with its top rightmost; nothing if empty. """
        if self.env.stack:
            self._print(' '.join(value.text for value in self.env.stack))

    def define(self, name, definition):
        self.logger.debug('defining %s: %s', name, definition)
        self.env.define(Word.defined(name, definition))

    def execute_line(self, text, subroutine=False):
        """
        Runs one unit of input as a transaction. On success the changes stay;
        on any fault the stacks and dictionary go back to what they were
        before, the fault is reported and the restored stack shown.
        """
        snapshot = self.env.copy()
        try:
            fault = self.process(text, subroutine)
        except RecursionError:
            fault = Fault.UNKNOWN
        if fault is Fault.NONE:
            return fault

        self.logger.debug('rolling back %r: %s', text, fault)
        self.env = snapshot
        self._print('Error: %s' % fault)
        self.print_stack()
        return fault

    def process(self, text, subroutine=False):
        """
        Dispatches every token on the line, stopping at the first fault.
        Nothing is rolled back here; that is :meth:`execute_line`'s job.
        """
        parser = Parser(text)
        tokens = parser.tokens()

        i = 0
        while i < len(tokens):
            token = tokens[i]

            if i == 0 and token.endswith(DEFINE_SUFFIX):
                self.define(token[:-1], ' '.join(tokens[1:]))
                break

            if i == 0 and token == LOAD:
                fault = self.load_script(parser.rest_of_line())
                if fault:
                    return fault
                break

            word = self.env.lookup(token)
            if word is not None:
                fault = word.fire(self)
                if fault:
                    return fault
                i += 1
                continue

            if token == BLOCK_OPEN:
                end = self.find_block_end(tokens, i)
                if end is None:
                    return Fault.END_OF_INPUT
                fault = self.run_block(' '.join(tokens[i + 1:end]))
                if fault:
                    return fault
                i = end + 1
                continue

            number = parse_number(token)
            if number is not None:
                self.env.push_number(number)
                i += 1
                continue

            self.logger.debug('unknown word: %s', token)
            return Fault.UNKNOWN_WORD

        if not subroutine:
            self.print_stack()
        return Fault.NONE

    @staticmethod
    def find_block_end(tokens, start):
        """ Index of the `}` matching the `{` at `start`, or None. """
        depth = 0
        for end in range(start, len(tokens)):
            if tokens[end] == BLOCK_OPEN:
                depth += 1
            elif tokens[end] == BLOCK_CLOSE:
                depth -= 1
                if depth == 0:
                    return end
        return None

    def run_block(self, body):
        """
        A `{ body }` loop: pop the condition; while it is nonzero, put it
        back and run the body. The body has to leave the next condition on
        top. A zero condition is consumed, an empty stack is a StackFault.
        """
        while True:
            if not self.env.stack:
                return Fault.STACK_FAULT
            condition = self.env.pop_value()
            if condition.num == 0:
                return Fault.NONE
            self.env.push_value(condition)
            fault = self.process(body, subroutine=True)
            if fault:
                return fault

    def load_script(self, path):
        """
        Feeds a whole file through a nested transaction as one block of
        input. Faults inside the file are reported and rolled back there;
        only a file that is missing or can't be read is a fault of the
        `load` itself. Bytes that aren't UTF-8 are replaced.
        """
        path = Path(path)
        if not path.is_file():
            self.logger.debug('no such file: %s', path)
            return Fault.NO_SUCH_FILE
        self.logger.debug('loading %s', path)
        try:
            text = path.read_text(encoding='utf-8', errors='replace')
        except OSError as e:
            self.logger.debug('cannot read %s: %s', path, e)
            return Fault.NO_SUCH_FILE
        self.execute_line(text, subroutine=True)
        return Fault.NONE

    def load_words_from_file(self, path):
        """ Runs the file line by line, each line its own transaction. """
        with open(path, encoding='utf-8', errors='replace') as f:
            for line in f:
                self.execute_line(line, subroutine=True)

    def load_default_script(self):
        config.ensure_default(self.conf_path)
        self.logger.debug('loading default script %s', self.conf_path)
        self.load_words_from_file(self.conf_path)
