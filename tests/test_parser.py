import wafer


class TestTheParser():
    def test_empty_string(self):
        """ Parser has nothing to give for an empty string. """
        p = wafer.Parser('')

        assert p.is_finished
        assert p.parse_whitespace() is None
        assert p.parse_word() is None
        assert p.next_word() is None
        assert p.tokens() == []
        assert p.rest_of_line() == ''

    def test_all_whitespace(self):
        """ A line of whitespace is trimmed away entirely. """
        p = wafer.Parser("   \t\t  \t \t")

        assert p.is_finished
        assert p.next_word() is None

    def test_single_word(self):
        """ A single word is returned immediately. """
        p = wafer.Parser("dup")

        assert p.next_word() == "dup"

        # no further words exist
        assert p.next_word() is None

    def test_leading_whitespace(self):
        """ Leading whitespace is ignored. """
        p = wafer.Parser("  \t swap")

        assert p.next_word() == 'swap'
        assert p.next_word() is None

    def test_more_words(self):
        """ Multiple words are returned one at a time. """
        p = wafer.Parser("1 2 + .")

        assert p.next_word() == '1'
        assert p.next_word() == '2'
        assert p.next_word() == '+'
        assert p.next_word() == '.'
        assert p.next_word() is None

    def test_more_whitespace(self):
        """ All whitespace is eaten together and has no effect on words. """
        p = wafer.Parser("   \tTHESE\t\tWORDS      APPEAR      \t  ")

        assert p.tokens() == ['these', 'words', 'appear']

    def test_newlines_are_whitespace(self):
        """ A newline separates words like any other whitespace. """
        p = wafer.Parser("square: dup *\n5 square")

        assert p.tokens() == ['square:', 'dup', '*', '5', 'square']

    def test_case_folding(self):
        """ Words come out case-folded, so DUP and dup are the same word. """
        p = wafer.Parser("DUP Swap ROT")

        assert p.tokens() == ['dup', 'swap', 'rot']

    def test_comment(self):
        """ Everything from the first # onward is dropped. """
        p = wafer.Parser("1 2 + # add them # and more")

        assert p.tokens() == ['1', '2', '+']

    def test_comment_only(self):
        p = wafer.Parser("# nothing to see here")

        assert p.tokens() == []

    def test_comment_across_lines(self):
        """ A comment runs to the end of the input, newlines included. """
        p = wafer.Parser("1 # one\n2")

        assert p.tokens() == ['1']

    def test_generate_consumes(self):
        p = wafer.Parser("a b c")

        assert p.next_word() == 'a'
        assert list(p.generate()) == ['b', 'c']
        assert p.is_finished

    def test_rest_of_line_keeps_case(self):
        """ The text after the leading word is left exactly as typed. """
        p = wafer.Parser("  LOAD  Scripts/My Words.txt  ")

        assert p.next_word() == 'load'
        assert p.rest_of_line() == 'Scripts/My Words.txt'

    def test_rest_of_line_stops_at_comment(self):
        p = wafer.Parser("load words.txt # my words")

        assert p.rest_of_line() == 'words.txt'
