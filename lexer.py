"""
Lexer for the S-expression language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- It recognizes parentheses, double-quoted string literals (no escape
    sequences), symbols (a letter followed by letters or digits) and decimal
    integer literals, and skips whitespace.

Examples:
    Input:  "(add 1 2)"
    Tokens: [LPAREN, SYMBOL('add'), INTEGER(1), INTEGER(2), RPAREN]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and
    `self.current_char`; the cursor only ever moves forward.
- Positions reported in errors are 1-based character indices.
- Scanning stops at the first error; no partial token list is returned.
"""

from __future__ import annotations
import unicodedata
from typing import List
from tokens import Token, TokenType
from errors import (
    InvalidNumberError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_decimal_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_letter(ch: str) -> bool:
    # Letter numbers such as roman numerals (category Nl) count as letters.
    return ch.isalpha() or unicodedata.category(ch) == "Nl"


def is_letter_or_digit(ch: str) -> bool:
    return ch.isalnum() or unicodedata.category(ch) == "Nl"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

    @property
    def position(self) -> int:
        """1-based position of the current character."""
        return self.pos + 1

    def advance(self) -> None:
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def string(self) -> str:
        """Scan a string literal; the cursor is on the opening quote."""
        start = self.position
        self.advance()
        result = []

        while self.current_char is not None and self.current_char != '"':
            result.append(self.current_char)
            self.advance()

        if self.current_char is None:
            raise UnterminatedStringError("".join(result), start)

        self.advance()  # closing quote
        return "".join(result)

    def symbol(self) -> str:
        """Scan a symbol: a letter followed by letters or digits."""
        result = [self.current_char]
        self.advance()

        while self.current_char is not None and is_letter_or_digit(self.current_char):
            result.append(self.current_char)
            self.advance()

        return "".join(result)

    def integer(self) -> int:
        """Parse a run of decimal digits as a signed 64-bit integer."""
        start = self.position
        result = []

        while self.current_char is not None and is_decimal_digit(self.current_char):
            result.append(self.current_char)
            self.advance()

        text = "".join(result)
        try:
            value = int(text)
        except ValueError:
            raise InvalidNumberError(text, start) from None

        if not INT64_MIN <= value <= INT64_MAX:
            raise InvalidNumberError(text, start)

        return value

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens: List[Token] = []

        while self.current_char is not None:
            start = self.position

            match self.current_char:
                case "(":
                    self.advance()
                    tokens.append(Token(TokenType.LPAREN, position=start))
                    continue
                case ")":
                    self.advance()
                    tokens.append(Token(TokenType.RPAREN, position=start))
                    continue
                case '"':
                    value = self.string()
                    tokens.append(Token(TokenType.STRING, value, start))
                    continue

            # Symbols are checked before numbers: a leading letter always
            # starts a symbol, and digits may follow it.
            if is_letter(self.current_char):
                tokens.append(Token(TokenType.SYMBOL, self.symbol(), start))
                continue

            if is_decimal_digit(self.current_char):
                tokens.append(Token(TokenType.INTEGER, self.integer(), start))
                continue

            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            raise UnexpectedCharacterError(self.current_char, start)

        return tokens


def tokenize(source: str) -> List[Token]:
    """Tokenize `source`, raising a `LexError` on the first failure."""
    return Lexer(source).tokenize()
