"""Recursive-descent parser for intlang. There is no syntax tree: every production computes its integer value as soon as
it is recognized, so parsing a program is running it.

```
<program>     ::= <statement>* EOF
<statement>   ::= <declaration> | <print_stmt>
<declaration> ::= "int" <identifier> "=" <expression> ";"   ; write-once binding
<print_stmt>  ::= "print" "(" <expression> ")" ";"
<expression>  ::= <term> (("+" | "-") <term>)*              ; left-associative
<term>        ::= <factor> (("*" | "/") <factor>)*          ; left-associative, binds tighter than + and -
<factor>      ::= <number> | <identifier> | "(" <expression> ")"
```

One token of lookahead, no backtracking: each production either commits to a branch or raises.
"""

from intlang.lang.error import DivisionByZero, NumericOverflow, ParseError
from intlang.lang.lexical import TokenType


INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class Parser:
    """Parses and evaluates one chunk of source text against symbols. emit is called with the value of every print
    statement, in program order.
    """

    def __init__(self, lexer, symbols, emit):
        self.lexer = lexer
        self.symbols = symbols
        self.emit = emit

        self.statement_line = lexer.line  # line of the start of the statement being parsed
        self.current = self.lexer.next_token()

    def advance(self):
        """Replaces the current token with the next one from the lexer and returns the consumed token."""
        token = self.current
        self.current = self.lexer.next_token()
        return token

    def expect(self, kind, msg):
        """Consumes the current token if it is of kind, otherwise raises ParseError(msg) at the current token."""
        if self.current.kind is not kind:
            raise ParseError(msg, self.current.line)
        return self.advance()

    @property
    def at_end(self):
        return self.current.kind is TokenType.EOF

    def program(self, on_statement=None):
        """Runs every statement. on_statement, if given, is called with each statement's first line before it runs."""
        while not self.at_end:
            if on_statement is not None:
                on_statement(self.current.line)
            self.statement()

    def statement(self):
        self.statement_line = self.current.line

        if self.current.kind is TokenType.INT:
            self.declaration()
        elif self.current.kind is TokenType.PRINT:
            self.print_stmt()
        else:
            raise ParseError("Expected 'int' or 'print' statement", self.current.line)

    def declaration(self):
        self.advance()  # int
        name = self.expect(TokenType.IDENTIFIER, "Expected identifier after 'int'").text
        self.expect(TokenType.ASSIGN, "Expected '=' in declaration")

        value = self.expression()

        # reported at the 'int' keyword, not at whatever was found instead
        if self.current.kind is not TokenType.SEMICOLON:
            raise ParseError("Expected ';' at end of statement", self.statement_line)
        self.advance()

        self.symbols.declare(name, value, self.statement_line)

    def print_stmt(self):
        self.advance()  # print
        self.expect(TokenType.LPAREN, "Expected '(' after 'print'")
        value = self.expression()
        self.expect(TokenType.RPAREN, "Expected ')' after expression")
        self.expect(TokenType.SEMICOLON, "Expected ';' at end of statement")

        self.emit(value)

    def expression(self):
        result = self.term()

        while self.current.kind in (TokenType.PLUS, TokenType.MINUS):
            op = self.advance()
            right = self.term()

            if op.kind is TokenType.PLUS:
                result = self._check_range(result + right, op)
            else:
                result = self._check_range(result - right, op)

        return result

    def term(self):
        result = self.factor()

        while self.current.kind in (TokenType.STAR, TokenType.SLASH):
            op = self.advance()
            right = self.factor()

            if op.kind is TokenType.STAR:
                result = self._check_range(result * right, op)
            else:
                if right == 0:
                    raise DivisionByZero("Division by zero", self.statement_line)
                result = self._check_range(self.divide(result, right), op)

        return result

    def factor(self):
        token = self.current

        if token.kind is TokenType.NUMBER:
            digits = token.text.lstrip("0") or "0"
            if len(digits) > len(str(INT_MAX)) or int(digits) > INT_MAX:
                raise NumericOverflow(f"Integer literal '{token.text}' out of range", token.line)
            self.advance()
            return int(digits)

        if token.kind is TokenType.IDENTIFIER:
            self.advance()
            return self.symbols.lookup(token.text, token.line)

        if token.kind is TokenType.LPAREN:
            self.advance()
            value = self.expression()
            self.expect(TokenType.RPAREN, "Expected ')'")
            return value

        raise ParseError("Expected number, identifier, or '('", token.line)

    @staticmethod
    def divide(dividend, divisor):
        """Integer division truncating toward zero: -7 / 2 == -3."""
        quotient = abs(dividend) // abs(divisor)
        return quotient if (dividend < 0) == (divisor < 0) else -quotient

    def _check_range(self, value, op):
        if not INT_MIN <= value <= INT_MAX:
            raise NumericOverflow(f"Integer overflow in '{op.text}'", self.statement_line)
        return value

