# coding= utf-8
import enum


class Fault(enum.IntEnum):
    """
    Outcome of processing some input. Everything except NONE aborts the
    current line and makes the machine roll back to its state before it.
    """
    UNKNOWN = -1
    NONE = 0
    UNKNOWN_WORD = 1
    STACK_FAULT = 2
    END_OF_INPUT = 3
    NO_SUCH_FILE = 4

    def __str__(self):
        return ''.join(part.capitalize() for part in self.name.split('_'))


class WaferError(Exception): pass
class StackUnderflow(WaferError): pass
class BadCast(WaferError): pass
