# coding= utf-8
import re

COMMENT = '#'


class Parser(object):
    """
    Splits one line of input into the tokens the :class:`wafer.Machine`
    dispatches on.

    The line is trimmed, everything from the first `#` onward is dropped as
    a comment, and the rest is case-folded and split on whitespace. Newlines
    are just whitespace here: a multi-line string is a single line with a
    lot of spaces in it.

    The parser is stateful in the same way a file is: :meth:`next_word`
    consumes a word (and any whitespace before it) and returns it, or returns
    None once nothing is left. :meth:`tokens` consumes everything that is
    left in one go.

    The untouched text after the leading word is available from
    :meth:`rest_of_line`, for directives like `load` that want their
    argument with its case intact.
    """
    def __init__(self, text):
        self.raw = text.strip().split(COMMENT, 1)[0].strip()
        self.text = self.raw.casefold()
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters based on a regex matched
        at the current position. Returns None if nothing matched or the text
        is used up.
        """
        if self.is_finished:
            return None
        found = re.compile(pattern).match(self.text, self.pos)
        if found is None:
            return None
        self.pos = found.end()
        return found.group()

    def parse_whitespace(self):
        return self._consume(r'\s*')

    def parse_word(self):
        return self._consume(r'\S+')

    def next_word(self):
        self.parse_whitespace()
        return self.parse_word()

    def generate(self):
        word = self.next_word()
        while word is not None:
            yield word
            word = self.next_word()

    def tokens(self):
        return list(self.generate())

    def rest_of_line(self):
        parts = self.raw.split(None, 1)
        return parts[1] if len(parts) > 1 else ''
