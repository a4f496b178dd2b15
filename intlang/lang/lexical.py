"""Lexical analysis for the intlang language. Turns source text into a lazy sequence of tokens, one token per call to
Lexer.next_token. Tokens are not buffered: the parser pulls them on demand.

Lexical grammar:

```
<whitespace> ::= " " | "\\t" | "\\n" | "\\v" | "\\f" | "\\r"   ; skipped, "\\n" advances the line counter
<identifier> ::= <letter> (<letter> | <digit> | "_")*       ; "int" and "print" are keywords
<number>     ::= <digit>+                                   ; raw digit string, converted by the parser
<symbol>     ::= "+" | "-" | "*" | "/" | "=" | ";" | "(" | ")"
```

Letters and digits are ASCII only. Anything else is a LexicalError.
"""

import string
from dataclasses import dataclass
from enum import Enum

from intlang.lang.error import LexicalError


class TokenType(Enum):
    """Token kinds. Single-character kinds use their source character as value so tokens can be re-stringified."""
    INT = "int"
    PRINT = "print"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    ASSIGN = "="
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    EOF = "end of input"
    ERROR = "error"  # never produced: lexical errors are raised, not returned


@dataclass(frozen=True)
class Token:
    """A classified lexeme plus the 1-based line it starts on."""
    kind: TokenType
    text: str
    line: int

    def __str__(self):
        return self.text


class Lexer:
    """Scans source text left to right. Owns the cursor and line counter for a single run."""
    WHITESPACE = " \t\n\v\f\r"
    LETTERS = string.ascii_letters
    DIGITS = string.digits
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    KEYWORDS = {"int": TokenType.INT, "print": TokenType.PRINT}
    SYMBOLS = {kind.value: kind for kind in (TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH,
                                             TokenType.ASSIGN, TokenType.SEMICOLON, TokenType.LPAREN,
                                             TokenType.RPAREN)}

    def __init__(self, source, line=1):
        self.source = source
        self.pos = 0
        self.line = line

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos] in Lexer.WHITESPACE:
            if self.source[self.pos] == "\n":
                self.line += 1
            self.pos += 1

    def _scan(self, chars):
        """Consumes the maximal run of chars starting at the cursor and returns it."""
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in chars:
            self.pos += 1
        return self.source[start:self.pos]

    def next_token(self):
        """Skips whitespace and classifies exactly one lexeme. Raises LexicalError on an unrecognized character."""
        self._skip_whitespace()

        if self.pos >= len(self.source):
            return Token(TokenType.EOF, "", self.line)

        char = self.source[self.pos]

        if char in Lexer.LETTERS:
            text = self._scan(Lexer.IDENT_CHARS)
            return Token(Lexer.KEYWORDS.get(text, TokenType.IDENTIFIER), text, self.line)

        if char in Lexer.DIGITS:
            return Token(TokenType.NUMBER, self._scan(Lexer.DIGITS), self.line)

        if char in Lexer.SYMBOLS:
            self.pos += 1
            return Token(Lexer.SYMBOLS[char], char, self.line)

        raise LexicalError(f"Unexpected character '{char}'", self.line)

    def __iter__(self):
        """Yields tokens up to and including EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenType.EOF:
                return
