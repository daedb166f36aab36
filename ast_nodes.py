"""AST node definitions for the S-expression language.

This module defines the closed set of AST node dataclasses produced by the
parser and consumed by the evaluator and the debug renderers. Each node
carries a `NodeType` tag so the rest of the toolchain can pattern-match on
either the class or `node.type`.

Conventions:
- All AST node dataclasses inherit from `ASTNode` and are frozen and hold
    their children in tuples: a tree is built once by the parser and only
    read afterwards.
- Parse failures are represented by `ErrorNode` rather than exceptions, and
    the end of the token stream by a single trailing `EndOfInputNode`.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class NodeType(Enum):
    PROGRAM = auto()
    NUMBER_LITERAL = auto()
    STRING_LITERAL = auto()
    CALL_EXPRESSION = auto()
    END_OF_INPUT = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType


# Literal Nodes
@dataclass(frozen=True)
class NumberLiteralNode(ASTNode):
    type: NodeType = NodeType.NUMBER_LITERAL
    value: int = 0


@dataclass(frozen=True)
class StringLiteralNode(ASTNode):
    type: NodeType = NodeType.STRING_LITERAL
    value: str = ""


# Expression Nodes
@dataclass(frozen=True)
class CallExpressionNode(ASTNode):
    type: NodeType = NodeType.CALL_EXPRESSION
    name: str = ""
    params: Tuple[ASTNode, ...] = ()


# Markers
@dataclass(frozen=True)
class EndOfInputNode(ASTNode):
    type: NodeType = NodeType.END_OF_INPUT


@dataclass(frozen=True)
class ErrorNode(ASTNode):
    type: NodeType = NodeType.ERROR
    message: str = ""


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    body: Tuple[ASTNode, ...] = ()
