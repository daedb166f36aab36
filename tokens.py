"""Token definitions for the lexer.

This module defines the `TokenType` enum for the five token kinds of the
S-expression language and a small frozen `Token` dataclass holding a token
type, an optional payload (the integer value, string contents or symbol
name) and the 1-based source position of the token's first character.
Tokens are produced by the lexer and consumed, one at a time, by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    # Grouping
    LPAREN = auto()
    RPAREN = auto()

    # Literals
    INTEGER = auto()
    STRING = auto()

    # Names
    SYMBOL = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str | int] = None
    # Source position is diagnostic only; tokens compare by type and value.
    position: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type})"
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        match self.type:
            case TokenType.LPAREN:
                return "("
            case TokenType.RPAREN:
                return ")"
            case TokenType.STRING:
                return f'"{self.value}"'
            case _:
                return str(self.value)
