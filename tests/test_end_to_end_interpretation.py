from main import Stage, evaluate, lex, parse_tokens, run


PROGRAM = """
(add 24 3
     (subtract 3 1 5))
(subtract 100 (add 1 2 3))
"""


def test_end_to_end_stages():
    ast = parse_tokens(lex(PROGRAM))
    assert evaluate(ast) == [24, 94]


def test_run_success():
    result = run(PROGRAM)
    assert result.ok
    assert result.values == [24, 94]
    assert result.stage is None
    assert result.error is None


def test_run_reports_lex_stage():
    result = run('(add 24 "String)')
    assert not result.ok
    assert result.stage == Stage.LEX
    assert "String)" in result.error


def test_run_reports_parse_stage():
    result = run("(add 1 2")
    assert result.stage == Stage.PARSE
    assert result.error.startswith("Expected a ) at")


def test_run_reports_eval_stage_for_unsupported_input():
    result = run("(multiply 1 2)")
    assert result.stage == Stage.EVAL
    assert "multiply" in result.error


def test_run_empty_input():
    result = run("")
    assert result.ok
    assert result.values == []


def test_run_is_idempotent():
    for src in [PROGRAM, "(add 1 2", "(multiply 1 2)", '"open']:
        assert run(src) == run(src)
    assert parse_tokens(lex(PROGRAM)) == parse_tokens(lex(PROGRAM))


def test_run_logs_failures(caplog):
    with caplog.at_level("WARNING", logger="main"):
        run("(multiply 1 2)")
    assert "evaluation failed" in caplog.text
