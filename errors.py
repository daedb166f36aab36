"""Exception taxonomy for the lexer and evaluator.

Lexical failures derive from the built-in `SyntaxError` and evaluation
failures from `RuntimeError`, so callers can catch a whole stage at once or
a single failure kind. Parse failures are not exceptions: the parser embeds
them in the tree as `ErrorNode`s (see `ast_nodes.py`).
"""

from __future__ import annotations


class LexError(SyntaxError):
    """Base class for all lexical errors. Carries the 1-based `position`."""

    def __init__(self, message: str, position: int):
        super().__init__(f"Lexical error at {position}: {message}")
        self.position = position


class UnterminatedStringError(LexError):
    def __init__(self, partial: str, position: int):
        super().__init__(f'Expected a " after "{partial}"', position)
        self.partial = partial


class InvalidNumberError(LexError):
    def __init__(self, text: str, position: int):
        super().__init__(f"Expected a 64-bit integer, got {text}", position)
        self.text = text


class UnexpectedCharacterError(LexError):
    def __init__(self, char: str, position: int):
        super().__init__(f"Unknown character {char!r}", position)
        self.char = char


class EvalError(RuntimeError):
    """Base class for evaluation failures."""


class UnsupportedOperationError(EvalError):
    def __init__(self, name: str):
        super().__init__(f"Unsupported operation: {name}")
        self.name = name


class UnexpectedNodeError(EvalError):
    def __init__(self, description: str):
        super().__init__(f"Unexpected node: {description}")
        self.description = description
