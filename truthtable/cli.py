#!/usr/bin/env python3
"""
Truth Table CLI

Usage:
    truthtable "p -> q"
    truthtable "!(a & b)" --steps --index --order T_FIRST
"""

import argparse
import sys

from .errors import TruthTableError
from .render import render_table
from .tt_runtime import DEFAULT_MAX_VARIABLES, ROW_ORDERS, F_FIRST, TableOptions, build_truth_table


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="truthtable",
        description="Print the truth table of a boolean expression.",
    )
    parser.add_argument("expression", help="e.g. \"(p and q) -> r\", \"a ∧ ¬b\", \"x <=> y\"")
    parser.add_argument("--binary", action="store_true", help="show 1/0 instead of T/F")
    parser.add_argument("--index", action="store_true", help="show a row number column")
    parser.add_argument("--steps", action="store_true", help="show one column per sub-expression")
    parser.add_argument("--order", choices=ROW_ORDERS, default=F_FIRST, help="row ordering (default: F_FIRST)")
    parser.add_argument(
        "--max-variables", type=int, default=DEFAULT_MAX_VARIABLES,
        help=f"refuse expressions with more free variables (default: {DEFAULT_MAX_VARIABLES})",
    )
    parser.add_argument("--summary", action="store_true", help="print a one-line summary after the table")
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    options = TableOptions(
        use_tf=not args.binary,
        show_row_index=args.index,
        show_steps=args.steps,
        row_order=args.order,
        max_variables=args.max_variables,
    )
    try:
        table = build_truth_table(args.expression, options)
    except TruthTableError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(render_table(table))
    if args.summary:
        print()
        print(table.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
