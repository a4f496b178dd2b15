import unittest

from intlang.lang.error import LexicalError
from intlang.lang.lexical import Lexer, Token, TokenType


def kinds(source):
    return [token.kind for token in Lexer(source)]


class LexerTestCase(unittest.TestCase):

    def test_keywords_and_identifiers(self):
        cases = {
            "int": TokenType.INT,
            "print": TokenType.PRINT,
            "Int": TokenType.IDENTIFIER,
            "printer": TokenType.IDENTIFIER,
            "integer": TokenType.IDENTIFIER,
            "x_1": TokenType.IDENTIFIER,
            "a9b": TokenType.IDENTIFIER,
        }
        for case, expected in cases.items():
            token = Lexer(case).next_token()
            self.assertEqual(expected, token.kind, case)
            self.assertEqual(case, token.text, case)

    def test_numbers(self):
        self.assertEqual(Token(TokenType.NUMBER, "0042", 1), Lexer("0042").next_token())
        self.assertEqual([TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.EOF], kinds("12abc"))

    def test_statement(self):
        expected = [TokenType.INT, TokenType.IDENTIFIER, TokenType.ASSIGN, TokenType.LPAREN, TokenType.NUMBER,
                    TokenType.PLUS, TokenType.NUMBER, TokenType.RPAREN, TokenType.STAR, TokenType.IDENTIFIER,
                    TokenType.SEMICOLON, TokenType.EOF]
        self.assertEqual(expected, kinds("int x=(1 + 2)*y;"))

    def test_symbols_restringify(self):
        source = "+-*/=;()"
        tokens = list(Lexer(source))[:-1]
        self.assertEqual(source, "".join(str(token) for token in tokens))

    def test_line_numbers(self):
        tokens = list(Lexer("int\n\nx\t=\r\n 5 ;\n"))
        self.assertEqual([1, 3, 3, 4, 4, 5], [token.line for token in tokens])

    def test_start_line(self):
        self.assertEqual(7, Lexer("print", line=7).next_token().line)

    def test_end_of_input(self):
        lexer = Lexer("  \n ")
        self.assertEqual(Token(TokenType.EOF, "", 2), lexer.next_token())
        self.assertEqual(TokenType.EOF, lexer.next_token().kind)

    def test_lazy(self):
        lexer = Lexer("print $")
        self.assertEqual(TokenType.PRINT, lexer.next_token().kind)
        self.assertRaises(LexicalError, lexer.next_token)

    def test_unexpected_character(self):
        should_raise = ["$", "_x", "x = 1.5", "a % b", "é", "print(x)!"]
        for case in should_raise:
            self.assertRaises(LexicalError, list, Lexer(case))

        with self.assertRaises(LexicalError) as context:
            list(Lexer("int x = 1;\nint y = #;"))
        self.assertEqual("Unexpected character '#'", str(context.exception))
        self.assertEqual(2, context.exception.line)


if __name__ == '__main__':
    unittest.main()
