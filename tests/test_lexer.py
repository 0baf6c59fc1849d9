import unittest

from desh import lexer


class TestLexer(unittest.TestCase):
    def test_tokenize_splits_on_any_whitespace(self):
        self.assertEqual(["ls", "-l", "/tmp"], lexer.tokenize("  ls \t-l   /tmp "))

    def test_tokenize_keeps_quotes_literal(self):
        self.assertEqual(["echo", "'a", "b'"], lexer.tokenize("echo 'a b'"))

    def test_first_token(self):
        self.assertEqual("export", lexer.first_token("export X=1"))
        self.assertEqual("", lexer.first_token("   "))

    def test_split_segments_strips(self):
        self.assertEqual(["echo a", "grep a", "assume 1"], lexer.split_segments("echo a |grep a|  assume 1"))

    def test_paren_balance(self):
        self.assertEqual(1, lexer.paren_balance("export X=$("))
        self.assertEqual(0, lexer.paren_balance("export X=$(date)"))
        self.assertEqual(1, lexer.paren_balance("export X=$(echo $(date)"))

    # -------------------------
    # find_substitution
    # -------------------------
    def test_find_substitution_none(self):
        self.assertIsNone(lexer.find_substitution("echo $HOME (x)"))

    def test_find_substitution_simple(self):
        text = "a $(date) b"
        begin, end = lexer.find_substitution(text)
        self.assertEqual("$(date)", text[begin:end])

    def test_find_substitution_returns_outermost_span(self):
        text = "echo $(echo $(date)) done"
        begin, end = lexer.find_substitution(text)
        self.assertEqual("$(echo $(date))", text[begin:end])

    def test_find_substitution_counts_plain_parens(self):
        text = "x $(echo (a) b) y"
        begin, end = lexer.find_substitution(text)
        self.assertEqual("$(echo (a) b)", text[begin:end])

    def test_find_substitution_spans_newlines(self):
        text = "export X=$(\necho a\necho b\n)"
        begin, end = lexer.find_substitution(text)
        self.assertEqual(text[text.index("$("):], text[begin:end])

    def test_find_substitution_unterminated(self):
        self.assertIsNone(lexer.find_substitution("echo $(date"))

    def test_find_substitution_skips_unterminated_opener(self):
        text = "echo $(foo $(bar)"
        begin, end = lexer.find_substitution(text)
        self.assertEqual("$(bar)", text[begin:end])

    def test_find_substitution_from_start_offset(self):
        text = "$(a) $(b)"
        begin, end = lexer.find_substitution(text, 4)
        self.assertEqual("$(b)", text[begin:end])


if __name__ == "__main__":
    unittest.main()
