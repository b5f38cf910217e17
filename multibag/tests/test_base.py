import unittest

from multibag import base


class MultiplicityCheckTests(unittest.TestCase):
    def test_accepts_non_negative(self):
        self.assertEqual(base.check_multiplicity(0), 0)
        self.assertEqual(base.check_multiplicity(12), 12)
        self.assertEqual(base.check_multiplicity(True), 1)

    def test_rejects_negative(self):
        self.assertRaises(base.InvalidMultiplicityError, lambda: base.check_multiplicity(-1))
        self.assertTrue(issubclass(base.InvalidMultiplicityError, ValueError))

    def test_rejects_non_integer(self):
        self.assertRaises(TypeError, lambda: base.check_multiplicity(2.0))
        self.assertRaises(TypeError, lambda: base.check_multiplicity(None))

    def test_render(self):
        self.assertEqual(base.render([]), "[]")
        self.assertEqual(base.render([1, "b", 1]), "[1, b, 1]")
        self.assertEqual(base.render("ab", separator=" , "), "[a , b]")


if __name__ == '__main__':
    unittest.main()
