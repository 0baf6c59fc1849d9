import unittest

from desh.verbosity import Verbosity


class TestVerbosity(unittest.TestCase):
    def test_levels_are_ordered(self):
        self.assertLess(Verbosity.TRACE, Verbosity.DEBUG)
        self.assertLess(Verbosity.DEBUG, Verbosity.INFO)
        self.assertLess(Verbosity.INFO, Verbosity.WARN)
        self.assertLess(Verbosity.WARN, Verbosity.ERROR)
        self.assertLess(Verbosity.ERROR, Verbosity.NONE)

    def test_parse_is_case_insensitive(self):
        self.assertIs(Verbosity.DEBUG, Verbosity.parse("debug"))
        self.assertIs(Verbosity.WARN, Verbosity.parse("WARN"))
        self.assertIs(Verbosity.NONE, Verbosity.parse(" None "))

    def test_parse_accepts_members_and_ints(self):
        self.assertIs(Verbosity.INFO, Verbosity.parse(Verbosity.INFO))
        self.assertIs(Verbosity.ERROR, Verbosity.parse(4))

    def test_parse_rejects_unknown(self):
        with self.assertRaises(ValueError) as ctx:
            Verbosity.parse("loud")
        self.assertIn("trace|debug|info|warn|error|none", str(ctx.exception))

    def test_info_allows_info_and_above(self):
        self.assertTrue(Verbosity.INFO.allows(Verbosity.INFO))
        self.assertTrue(Verbosity.INFO.allows(Verbosity.ERROR))
        self.assertFalse(Verbosity.INFO.allows(Verbosity.DEBUG))

    def test_none_allows_nothing(self):
        for level in Verbosity:
            self.assertFalse(Verbosity.NONE.allows(level))


if __name__ == "__main__":
    unittest.main()
