"""
Plain-text rendering and command-line entrypoint.
"""

from truthtable.cli import main
from truthtable.render import format_value, render_table
from truthtable.tt_runtime import TableOptions, build_truth_table


def test_format_value():
    assert format_value(True) == "T"
    assert format_value(False) == "F"
    assert format_value(True, use_tf=False) == "1"
    assert format_value(False, use_tf=False) == "0"


def test_render_default_table():
    out = render_table(build_truth_table("p & q"))
    assert out.splitlines() == [
        "p  q  Result",
        "F  F  F",
        "F  T  F",
        "T  F  F",
        "T  T  T",
    ]


def test_render_binary_with_index():
    opts = TableOptions(use_tf=False, show_row_index=True)
    out = render_table(build_truth_table("!a", opts))
    assert out.splitlines() == [
        "#  a  Result",
        "1  0  1",
        "2  1  0",
    ]


def test_render_steps_columns():
    opts = TableOptions(show_steps=True)
    lines = render_table(build_truth_table("!(a & b)", opts)).splitlines()
    assert lines[0].split("  ")[:2] == ["a", "b"]
    assert "(a & b)" in lines[0]
    assert "!(a & b)" in lines[0]
    assert lines[0].rstrip().endswith("Result")
    assert len(lines) == 5


def test_cli_prints_table(capsys):
    assert main(["p -> q", "--summary"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "p  q  Result"
    assert "Variables: p, q · Rows: 4 · Expression: p -> q" in out


def test_cli_reports_lex_error(capsys):
    assert main(["a $ b"]) == 1
    err = capsys.readouterr().err
    assert "Unexpected character '$' at position 3" in err


def test_cli_reports_parse_error(capsys):
    assert main(["(a & b"]) == 1
    assert "Mismatched parentheses" in capsys.readouterr().err


def test_cli_variable_ceiling(capsys):
    assert main(["a & b & c", "--max-variables", "2"]) == 1
    assert "Too many variables (3)" in capsys.readouterr().err


def test_cli_options(capsys):
    assert main(["x xor y", "--binary", "--index", "--steps", "--order", "T_FIRST"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("#  x  y  (x ^ y)")
    assert lines[1].split() == ["1", "1", "1", "0", "0"]
