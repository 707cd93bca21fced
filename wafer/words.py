# coding= utf-8
from collections import namedtuple
import enum
import logging

from wafer.errors import Fault, WaferError

logger = logging.getLogger(__name__)

# What a builtin may raise before Word.fire turns it into a StackFault.
BUILTIN_FAILURES = (WaferError, IndexError, ArithmeticError, ValueError, OSError)


class WordKind(enum.Enum):
    BUILTIN = 'builtin'
    DEFINED = 'defined'


class Word(namedtuple('Word', 'name kind action definition')):
    """
    A named, invocable entry in the dictionary. Builtin words carry an action
    (a callable taking no arguments, normally a method bound to the
    :class:`wafer.Machine`); defined words carry the text they were defined
    as, which is handed back to the machine every time the word fires.

    Names inside a definition are looked up when the word fires, not when it
    is defined, so a definition may mention words that don't exist yet.
    """
    __slots__ = ()

    @classmethod
    def builtin(cls, name, action):
        return cls(name, WordKind.BUILTIN, action, None)

    @classmethod
    def defined(cls, name, definition):
        return cls(name, WordKind.DEFINED, None, definition)

    @property
    def is_builtin(self):
        return self.kind is WordKind.BUILTIN

    def fire(self, machine):
        """ Invokes the word, returning the :class:`Fault` it ended with. """
        if self.kind is WordKind.DEFINED:
            return machine.process(self.definition, subroutine=True)
        try:
            self.action()
        except BUILTIN_FAILURES as e:
            logger.debug('%s failed: %r', self.name, e)
            return Fault.STACK_FAULT
        return Fault.NONE
