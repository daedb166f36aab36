"""
Parser for the S-expression language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser with one
    token of lookahead. It walks the token list front to back through an
    index cursor and never backtracks.
- `parse()` calls `walk()` repeatedly, collecting each node into the program
    body, until `walk()` reports the end of the token stream. The trailing
    `EndOfInputNode` is kept in the body, so empty input parses to
    `ProgramNode(body=(EndOfInputNode(),))`.
- `walk()` turns one token (or one parenthesized call) into one node:
    integers and strings become literals, `(name arg ...)` becomes a
    `CallExpressionNode` whose params are themselves walked.

Errors:
- The parser never raises for malformed input. A failure becomes an
    `ErrorNode` embedded where it happened, so the caller still receives a
    structurally valid program and can inspect exactly where parsing went
    wrong (see `find_errors`).
- Every call to `walk()` that does not return `EndOfInputNode` consumes at
    least one token, which guarantees the top-level loop terminates.

Examples:
    - `(add 1 2)` -> Program([Call(add, [1, 2]), EndOfInput])
    - `(add 1 2`  -> Program([Error("Expected a ) at 5"), EndOfInput])
"""

from __future__ import annotations
from typing import List, Optional
from tokens import Token, TokenType
from ast_nodes import *


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    @property
    def position(self) -> int:
        """1-based position of the next token; grows with every consumed token."""
        return self.pos + 1

    def peek(self) -> Optional[Token]:
        """Return next token without consuming it, or None at end of input."""
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def advance(self) -> Token:
        """Consume and return the next token."""
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def parse(self) -> ProgramNode:
        body: List[ASTNode] = []
        while True:
            node = self.walk()
            body.append(node)
            if isinstance(node, EndOfInputNode):
                break
        return ProgramNode(body=tuple(body))

    def walk(self) -> ASTNode:
        """Parse a single node starting at the current token."""
        token = self.peek()
        if token is None:
            return EndOfInputNode()

        match token.type:
            case TokenType.INTEGER:
                self.advance()
                return NumberLiteralNode(value=token.value)

            case TokenType.STRING:
                self.advance()
                return StringLiteralNode(value=token.value)

            case TokenType.LPAREN:
                return self.parse_call()

            case _:
                # A stray `)` or a bare symbol outside of call position.
                position = self.position
                self.advance()
                return ErrorNode(message=f"Unexpected {token!r} at {position}")

    def parse_call(self) -> ASTNode:
        """Parse `(name param ...)`; the current token is the `(`."""
        self.advance()

        name_token = self.peek()
        if name_token is None or name_token.type != TokenType.SYMBOL:
            return ErrorNode(message=f"Expected a function name at {self.position}")
        self.advance()

        params: List[ASTNode] = []
        while True:
            token = self.peek()
            if token is None:
                return ErrorNode(message=f"Expected a ) at {self.position}")
            if token.type == TokenType.RPAREN:
                break
            params.append(self.walk())

        self.advance()  # Consume ')'
        return CallExpressionNode(name=name_token.value, params=tuple(params))


def parse(tokens: List[Token]) -> ProgramNode:
    """Parse a token list into a `ProgramNode`. Never raises on bad input."""
    return Parser(tokens).parse()


def find_errors(node: ASTNode) -> List[ErrorNode]:
    """Return every `ErrorNode` in the tree, depth-first, left to right."""
    match node:
        case ErrorNode():
            return [node]
        case ProgramNode(body=children) | CallExpressionNode(params=children):
            errors: List[ErrorNode] = []
            for child in children:
                errors.extend(find_errors(child))
            return errors
        case _:
            return []
