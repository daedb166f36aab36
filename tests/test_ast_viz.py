"""Tests for ast_viz: ensure a Digraph is produced with one node per AST node."""

from tests.utils import parse_text
from ast_viz import render_ast_dot, ERROR_COLOR


def test_ast_viz_dot_source():
    dot = render_ast_dot(parse_text("(add 1 (subtract 3 2))"))
    src = dot.source
    # Program, add, 1, subtract, 3, 2, EndOfInput
    for i in range(7):
        assert f"n{i} " in src
    assert "n7 " not in src
    assert "n0 -> n1" in src
    assert "n3 -> n4" in src
    assert "add" in src and "subtract" in src


def test_ast_viz_highlights_errors():
    src = render_ast_dot(parse_text("(add 1")).source
    assert ERROR_COLOR in src
    assert ERROR_COLOR not in render_ast_dot(parse_text("(add 1)")).source
