"""Pipeline entry points: source text -> tokens -> AST -> integers.

`lex`, `parse_tokens` and `evaluate` expose the three stages individually;
`run` chains them and reports the outcome as a `RunResult` naming the stage
that failed instead of raising for language-level errors.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode, ProgramNode
from parser import Parser, find_errors
from evaluator import execute
from errors import EvalError, LexError
from pretty_printer import PrettyPrinter

logger = logging.getLogger(__name__)


class Stage(Enum):
    LEX = auto()
    PARSE = auto()
    EVAL = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class RunResult:
    values: List[int] = field(default_factory=list)
    stage: Optional[Stage] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.stage is None


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> ProgramNode:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse()


def evaluate(node: ASTNode) -> List[int]:
    """Evaluate an AST into its list of results."""
    return execute(node)


def run(text: str) -> RunResult:
    """Lex, parse and evaluate `text`.

    Malformed input is reported with stage LEX or PARSE; a well-formed
    program that uses an unknown operation or a value with no meaning
    (such as a string literal) is reported with stage EVAL.
    """
    try:
        tokens = lex(text)
    except LexError as e:
        logger.warning("lex failed: %s", e)
        return RunResult(stage=Stage.LEX, error=str(e))
    logger.debug("lexed %d tokens", len(tokens))

    ast = parse_tokens(tokens)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("AST:\n%s", PrettyPrinter.print_ast(ast))

    errors = find_errors(ast)
    if errors:
        logger.warning("parse failed: %s", errors[0].message)
        return RunResult(stage=Stage.PARSE, error=errors[0].message)

    try:
        values = evaluate(ast)
    except EvalError as e:
        logger.warning("evaluation failed: %s", e)
        return RunResult(stage=Stage.EVAL, error=str(e))

    logger.debug("result: %s", values)
    return RunResult(values=values)
