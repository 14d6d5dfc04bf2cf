"""
tt_runtime.py

Truth Table Runtime
-------------------

Canonical entrypoint for turning expression text into a truth table.

It connects:
    - tokenize        (text → tokens)
    - to_postfix      (shunting-yard → RPN)
    - build_ast       (RPN → tree, operand validation)
    - eval_postfix    (result column)
    - eval_node       (memoized step columns)

Lexing, parsing and the variable-count guard abort the request. Evaluation
failures are absorbed per row: the row's result becomes False and the
message is kept on the row for callers that want it.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from .ast_nodes import Node
from .errors import EvalError, ParseError, TooManyVariablesError
from .tokenize import Token, collect_variables, tokenize
from .tt_evaluator import eval_node, eval_postfix
from .tt_parser import build_ast, collect_subexpressions, to_postfix

# --- CONFIGURATION ---
F_FIRST = "F_FIRST"
T_FIRST = "T_FIRST"
ROW_ORDERS = (F_FIRST, T_FIRST)

_FALLBACK_MAX_VARIABLES = 12  # 4096 rows

_DEBUG_ENABLED = os.getenv("TRUTHTABLE_DEBUG", "0") == "1"


def _debug_print(*args, **kwargs):
    if _DEBUG_ENABLED:
        print(*args, file=sys.stderr, **kwargs)


def _read_max_variables() -> int:
    """TRUTHTABLE_MAX_VARIABLES, or 12 when unset, non-numeric or negative."""
    raw = os.getenv("TRUTHTABLE_MAX_VARIABLES")
    if raw is None:
        return _FALLBACK_MAX_VARIABLES
    try:
        value = int(raw)
    except ValueError:
        print(f"[truthtable] ignoring TRUTHTABLE_MAX_VARIABLES={raw!r}: not an integer", file=sys.stderr)
        return _FALLBACK_MAX_VARIABLES
    if value < 0:
        print(f"[truthtable] ignoring TRUTHTABLE_MAX_VARIABLES={raw!r}: negative", file=sys.stderr)
        return _FALLBACK_MAX_VARIABLES
    return value


DEFAULT_MAX_VARIABLES = _read_max_variables()


@dataclass
class TableOptions:
    """
    Rendering and enumeration options supplied by the presentation layer.

    use_tf / show_row_index only affect rendering; show_steps and row_order
    change what the enumerator produces.
    """
    use_tf: bool = True
    show_row_index: bool = False
    show_steps: bool = False
    row_order: str = F_FIRST
    max_variables: int = DEFAULT_MAX_VARIABLES

    def __post_init__(self):
        if self.row_order not in ROW_ORDERS:
            raise ValueError(f"row_order must be one of {ROW_ORDERS}, got {self.row_order!r}")


@dataclass
class TruthRow:
    index: int                      # 0-based
    assignment: Dict[str, bool]     # sorted-variable order
    result: bool
    steps: List[bool] = field(default_factory=list)
    error: Optional[str] = None     # absorbed evaluation error, if any


@dataclass
class TruthTable:
    expression: str
    variables: List[str]
    postfix: List[Token]
    ast: Node
    steps: List[str]
    rows: List[TruthRow]
    options: TableOptions

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def summary(self) -> str:
        names = ", ".join(self.variables) or "(none)"
        return f"Variables: {names} · Rows: {1 << len(self.variables)} · Expression: {self.expression}"


# -------------------------------------------------------------------------
# Enumeration
# -------------------------------------------------------------------------

def iter_assignments(variables: List[str], row_order: str = F_FIRST) -> Iterator[Dict[str, bool]]:
    """
    Yield all 2^n assignments.

    The leftmost variable is the most significant bit of the row index.
    F_FIRST maps bit 1 to True, T_FIRST maps bit 0 to True.
    """
    if row_order not in ROW_ORDERS:
        raise ValueError(f"row_order must be one of {ROW_ORDERS}, got {row_order!r}")
    n = len(variables)
    for i in range(1 << n):
        env = {}
        for j, name in enumerate(variables):
            bit = (i >> (n - j - 1)) & 1
            env[name] = (bit == 1) if row_order == F_FIRST else (bit == 0)
        yield env


def enumerate_rows(
    variables: List[str],
    postfix: List[Token],
    ast: Optional[Node] = None,
    options: Optional[TableOptions] = None,
) -> List[TruthRow]:
    """
    Evaluate the expression for every assignment of `variables`.

    The result column uses eval_postfix. With options.show_steps, every step
    is evaluated with eval_node against one cache per row. An EvalError never
    stops the table: the affected value is reported as False.
    """
    options = options or TableOptions()
    steps = []
    if options.show_steps:
        if ast is None:
            ast = build_ast(postfix)
        steps = [node for node, _ in collect_subexpressions(ast)]

    rows: List[TruthRow] = []
    for i, env in enumerate(iter_assignments(variables, options.row_order)):
        error = None
        try:
            value = eval_postfix(postfix, env)
        except EvalError as e:
            _debug_print(f"[enumerate_rows] row {i}: {e}")
            value = False
            error = str(e)

        step_values: List[bool] = []
        if steps:
            cache: Dict[int, bool] = {}
            for node in steps:
                try:
                    step_values.append(eval_node(node, env, cache))
                except EvalError as e:
                    step_values.append(False)
                    error = error or str(e)

        rows.append(TruthRow(index=i, assignment=env, result=value, steps=step_values, error=error))
    return rows


# -------------------------------------------------------------------------
# Front door
# -------------------------------------------------------------------------

def build_truth_table(text: str, options: Optional[TableOptions] = None) -> TruthTable:
    """
    Tokenize, validate, parse and enumerate an expression.

    Raises:
        LexError: unexpected character or number.
        ParseError: empty input, mismatched parentheses, missing operands.
        TooManyVariablesError: more free variables than options.max_variables.
    """
    options = options or TableOptions()
    expr = (text or "").strip()
    if not expr:
        raise ParseError("Please enter an expression.")

    tokens = tokenize(expr)
    variables = collect_variables(tokens)
    if len(variables) > options.max_variables:
        raise TooManyVariablesError(
            f"Too many variables ({len(variables)}). This would create "
            f"{1 << len(variables)} rows. Limit is {options.max_variables} variables."
        )

    postfix = to_postfix(tokens)
    ast = build_ast(postfix)
    labels = [label for _, label in collect_subexpressions(ast)] if options.show_steps else []

    rows = enumerate_rows(variables, postfix, ast, options)
    _debug_print(f"[build_truth_table] {expr!r}: {len(variables)} vars, {len(rows)} rows")
    return TruthTable(
        expression=expr,
        variables=variables,
        postfix=postfix,
        ast=ast,
        steps=labels,
        rows=rows,
        options=options,
    )
