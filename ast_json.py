"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. Every node is encoded
with a `node_type` key plus its own fields.
"""

from typing import Any, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    match node:
        case NumberLiteralNode(value=v):
            return {"node_type": "NumberLiteral", "value": v}
        case StringLiteralNode(value=v):
            return {"node_type": "StringLiteral", "value": v}
        case CallExpressionNode(name=name, params=params):
            return {
                "node_type": "CallExpression",
                "name": name,
                "params": [ast_to_json(p) for p in params],
            }
        case EndOfInputNode():
            return {"node_type": "EndOfInput"}
        case ErrorNode(message=msg):
            return {"node_type": "Error", "message": msg}
        case ProgramNode(body=body):
            return {
                "node_type": "Program",
                "body": [ast_to_json(n) for n in body],
            }

    raise TypeError(f"Cannot serialize {node!r}")
