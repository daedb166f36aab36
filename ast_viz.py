"""Graphviz visualization helpers for ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: every AST node becomes one graph node labelled with its kind and
payload, with edges from parent to children in source order. Error nodes
are highlighted so a failed parse is easy to spot.
"""

from typing import Optional
from ast_nodes import *
from graphviz import Digraph

ERROR_COLOR = "#ffefef"


def _label(node: ASTNode) -> str:
    match node:
        case NumberLiteralNode(value=v):
            parts = ["Number", str(v)]
        case StringLiteralNode(value=v):
            parts = ["String", f'"{v}"']
        case CallExpressionNode(name=name):
            parts = ["Call", name]
        case EndOfInputNode():
            parts = ["EndOfInput"]
        case ErrorNode(message=msg):
            parts = ["Error", msg]
        case ProgramNode():
            parts = ["Program"]
        case _:
            parts = [str(node)]
    # Graphviz treats backslashes in plain labels as escapes.
    return "\\n".join(p.replace("\\", "\\\\") for p in parts)


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given tree.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontsize="10")

    counter = 0

    def visit(n: ASTNode, parent: Optional[str]) -> None:
        nonlocal counter
        node_id = f"n{counter}"
        counter += 1

        attrs = {}
        if isinstance(n, ErrorNode):
            attrs = {"style": "filled", "fillcolor": ERROR_COLOR}
        dot.node(node_id, label=_label(n), **attrs)
        if parent is not None:
            dot.edge(parent, node_id)

        match n:
            case ProgramNode(body=children) | CallExpressionNode(params=children):
                for child in children:
                    visit(child, node_id)

    visit(node, None)
    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> None:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
