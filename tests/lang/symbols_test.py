import unittest

from intlang.lang.error import DuplicateDeclaration, UndefinedVariable, UseBeforeInit
from intlang.lang.symbols import Entry, SymbolTable


class SymbolTableTestCase(unittest.TestCase):

    def test_declare_lookup(self):
        symbols = SymbolTable()
        symbols.declare("x", 5)
        symbols.declare("y", -3)

        self.assertEqual(5, symbols.lookup("x"))
        self.assertEqual(-3, symbols.lookup("y"))
        self.assertIn("x", symbols)
        self.assertEqual(2, len(symbols))

    def test_undefined(self):
        symbols = SymbolTable()
        with self.assertRaises(UndefinedVariable) as context:
            symbols.lookup("y", 4)
        self.assertEqual("Undefined variable 'y'", str(context.exception))
        self.assertEqual(4, context.exception.line)

    def test_duplicate(self):
        symbols = SymbolTable()
        symbols.declare("a", 1)

        with self.assertRaises(DuplicateDeclaration) as context:
            symbols.declare("a", 2, 2)
        self.assertEqual("Variable 'a' already declared", str(context.exception))
        self.assertEqual(1, symbols.lookup("a"))

    def test_use_before_init(self):
        symbols = SymbolTable()
        symbols.entries["z"] = Entry("z", 0, defined=False)

        with self.assertRaises(UseBeforeInit) as context:
            symbols.lookup("z")
        self.assertEqual("Variable 'z' used before initialization", str(context.exception))

    def test_case_sensitive(self):
        symbols = SymbolTable()
        symbols.declare("x", 1)
        symbols.declare("X", 2)
        self.assertEqual([1, 2], [symbols.lookup("x"), symbols.lookup("X")])


if __name__ == '__main__':
    unittest.main()
