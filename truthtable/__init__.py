"""
truthtable - Boolean expression parsing and truth-table generation.

Public API:
- build_truth_table: Canonical entrypoint (text → TruthTable)
- tokenize / collect_variables: Lexer
- to_postfix / build_ast / collect_subexpressions: Parser and steps
- eval_postfix / eval_node: Evaluation strategies
- enumerate_rows: Row enumeration over all assignments
"""

from .errors import (
    TruthTableError,
    LexError,
    ParseError,
    EvalError,
    UnboundVariable,
    MalformedExpression,
    TooManyVariablesError,
)
from .operator_lexicon import OPERATORS, apply_operator
from .tokenize import Token, tokenize, collect_variables
from .canonical import format_node
from .tt_parser import to_postfix, build_ast, collect_subexpressions
from .tt_evaluator import eval_postfix, eval_node
from .tt_runtime import (
    F_FIRST,
    T_FIRST,
    TableOptions,
    TruthRow,
    TruthTable,
    iter_assignments,
    enumerate_rows,
    build_truth_table,
)

# Derive version from package metadata
try:
    from importlib.metadata import version
    __version__ = version("truthtable")
except Exception:
    __version__ = "1.0.0"

__all__ = [
    "TruthTableError",
    "LexError",
    "ParseError",
    "EvalError",
    "UnboundVariable",
    "MalformedExpression",
    "TooManyVariablesError",
    "OPERATORS",
    "apply_operator",
    "Token",
    "tokenize",
    "collect_variables",
    "format_node",
    "to_postfix",
    "build_ast",
    "collect_subexpressions",
    "eval_postfix",
    "eval_node",
    "F_FIRST",
    "T_FIRST",
    "TableOptions",
    "TruthRow",
    "TruthTable",
    "iter_assignments",
    "enumerate_rows",
    "build_truth_table",
]
