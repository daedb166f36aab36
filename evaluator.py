"""Tree-walking evaluator for the S-expression language.

`execute(node)` evaluates a tree depth-first, strictly left to right, and
returns a list of integers. A program yields the concatenation of its
children's results; a number literal yields `[value]`; the end-of-input
sentinel yields `[]`. Calls evaluate every param eagerly and then apply one
of the built-in operations (`add`, `subtract`).

When a param's result is used as an operand only its first value counts,
and an empty result counts as 0. `(add (add 1 2) 3)` is therefore 6, while
a param that produced several values contributes just the first.

Evaluation fails fast: the first `EvalError` raised anywhere in the tree
propagates unchanged and no partial result is returned.
"""

from typing import Callable, Dict, List
from ast_nodes import *
from errors import UnexpectedNodeError, UnsupportedOperationError


def _first(values: List[int]) -> int:
    return values[0] if values else 0


def _add(args: List[List[int]]) -> List[int]:
    total = 0
    for arg in args:
        total += _first(arg)
    return [total]


def _subtract(args: List[List[int]]) -> List[int]:
    if not args:
        return [0]
    difference = _first(args[0])
    for arg in args[1:]:
        difference -= _first(arg)
    return [difference]


OPERATIONS: Dict[str, Callable[[List[List[int]]], List[int]]] = {
    "add": _add,
    "subtract": _subtract,
}


def execute(node: ASTNode) -> List[int]:
    match node:
        case ProgramNode(body=body):
            results: List[int] = []
            for child in body:
                results.extend(execute(child))
            return results
        case NumberLiteralNode(value=v):
            return [v]
        case EndOfInputNode():
            return []
        case CallExpressionNode(name=name, params=params):
            args = [execute(p) for p in params]
            operation = OPERATIONS.get(name)
            if operation is None:
                raise UnsupportedOperationError(name)
            return operation(args)
        case StringLiteralNode(value=v):
            raise UnexpectedNodeError(f'string literal "{v}"')
        case ErrorNode(message=msg):
            raise UnexpectedNodeError(f"parse error: {msg}")
        case _:
            raise UnexpectedNodeError(repr(node))
