"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which turns a tree back into S-expression source. Both are intended for
debugging, logging and tests.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(program_node)  # "(add 1 (subtract 3 1))"
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case NumberLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}NumberLiteral({v})")

            case StringLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}StringLiteral({v!r})")

            case CallExpressionNode(name=name, params=params):
                lines.append(f"{indent_str}{prefix}CallExpression({name})")
                for i, param in enumerate(params):
                    lines.append(
                        PrettyPrinter.print_ast(param, indent + 4, f"param[{i}]: ")
                    )

            case EndOfInputNode():
                lines.append(f"{indent_str}{prefix}EndOfInput")

            case ErrorNode(message=msg):
                lines.append(f"{indent_str}{prefix}Error({msg})")

            case ProgramNode(body=body):
                lines.append(f"{indent_str}{prefix}Program")
                for child in body:
                    lines.append(PrettyPrinter.print_ast(child, indent + 2))

            case _:
                lines.append(f"{indent_str}{prefix}{node}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, source-like one-line representation of a node."""
        if node is None:
            return ""

        match node:
            case NumberLiteralNode(value=v):
                return str(v)
            case StringLiteralNode(value=v):
                return f'"{v}"'
            case CallExpressionNode(name=name, params=params):
                parts = [name] + [PrettyPrinter.print_surface(p) for p in params]
                return "(" + " ".join(parts) + ")"
            case EndOfInputNode():
                return ""
            case ErrorNode(message=msg):
                return f"<error: {msg}>"
            case ProgramNode(body=body):
                parts = [PrettyPrinter.print_surface(n) for n in body]
                return " ".join(p for p in parts if p)
            case _:
                return str(node)
