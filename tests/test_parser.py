from tests.utils import parse_text
from ast_nodes import *
from parser import find_errors, parse
from tokens import Token, TokenType


def test_parser_parses_nested_calls():
    ast = parse_text("(add 24 3 (subtract 3 1 5))")
    assert ast == ProgramNode(
        body=(
            CallExpressionNode(
                name="add",
                params=(
                    NumberLiteralNode(value=24),
                    NumberLiteralNode(value=3),
                    CallExpressionNode(
                        name="subtract",
                        params=(
                            NumberLiteralNode(value=3),
                            NumberLiteralNode(value=1),
                            NumberLiteralNode(value=5),
                        ),
                    ),
                ),
            ),
            EndOfInputNode(),
        )
    )


def test_empty_input_is_program_with_end_sentinel():
    ast = parse([])
    assert ast.type == NodeType.PROGRAM
    assert ast.body == (EndOfInputNode(),)


def test_top_level_expressions_are_kept_in_order():
    ast = parse_text('1 "two" (add)')
    assert ast.body == (
        NumberLiteralNode(value=1),
        StringLiteralNode(value="two"),
        CallExpressionNode(name="add", params=()),
        EndOfInputNode(),
    )


def test_end_sentinel_appears_once_and_last():
    ast = parse_text("(add 1 2) (subtract 4 1) 7")
    ends = [n for n in ast.body if isinstance(n, EndOfInputNode)]
    assert len(ends) == 1
    assert isinstance(ast.body[-1], EndOfInputNode)


def test_missing_close_paren_embeds_error():
    ast = parse_text("(add 1 2")
    assert len(ast.body) == 2
    error = ast.body[0]
    assert isinstance(error, ErrorNode)
    assert error.message.startswith("Expected a ) at")
    assert isinstance(ast.body[1], EndOfInputNode)


def test_missing_function_name_embeds_error():
    ast = parse_text("(1 2)")
    assert isinstance(ast.body[0], ErrorNode)
    assert ast.body[0].message.startswith("Expected a function name at")
    # Parsing resumes after the failed call.
    assert isinstance(ast.body[-1], EndOfInputNode)


def test_empty_parens_are_an_error():
    ast = parse_text("()")
    assert ast.body[0].message.startswith("Expected a function name at")


def test_stray_close_paren_is_unexpected():
    ast = parse_text(")")
    assert ast.body == (
        ErrorNode(message="Unexpected Token(RPAREN) at 1"),
        EndOfInputNode(),
    )


def test_bare_symbol_is_unexpected():
    ast = parse_text("(add foo 1)")
    call = ast.body[0]
    assert isinstance(call, CallExpressionNode)
    assert isinstance(call.params[0], ErrorNode)
    assert "Unexpected" in call.params[0].message
    assert call.params[1] == NumberLiteralNode(value=1)


def test_error_positions_increase_monotonically():
    ast = parse_text(") ) )")
    positions = [int(n.message.rsplit(" ", 1)[1]) for n in ast.body[:-1]]
    assert positions == sorted(positions)
    assert len(set(positions)) == 3


def test_find_errors_collects_nested_errors_in_order():
    ast = parse_text("(add ) (subtract (1)) )")
    errors = find_errors(ast)
    assert len(errors) >= 2
    assert all(isinstance(e, ErrorNode) for e in errors)
    assert find_errors(parse_text("(add 1 (subtract 2 3))")) == []


def test_parse_accepts_tokens_directly():
    tokens = [
        Token(TokenType.LPAREN),
        Token(TokenType.SYMBOL, "subtract"),
        Token(TokenType.INTEGER, 5),
        Token(TokenType.RPAREN),
    ]
    ast = parse(tokens)
    assert ast.body[0] == CallExpressionNode(
        name="subtract", params=(NumberLiteralNode(value=5),)
    )
