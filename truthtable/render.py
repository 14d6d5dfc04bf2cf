"""
render.py - Plain-text rendering of a TruthTable
"""
from typing import List

from .tt_runtime import TruthTable


def format_value(value: bool, use_tf: bool = True) -> str:
    if use_tf:
        return "T" if value else "F"
    return "1" if value else "0"


def render_table(table: TruthTable) -> str:
    """
    Lay the table out as aligned text columns.

    Header: optional "#", the variables, the step labels (if requested),
    then "Result". Row indices are shown 1-based.
    """
    opts = table.options
    header: List[str] = []
    if opts.show_row_index:
        header.append("#")
    header.extend(table.variables)
    if opts.show_steps:
        header.extend(table.steps)
    header.append("Result")

    body: List[List[str]] = []
    for row in table.rows:
        cells = []
        if opts.show_row_index:
            cells.append(str(row.index + 1))
        cells.extend(format_value(row.assignment[v], opts.use_tf) for v in table.variables)
        if opts.show_steps:
            cells.extend(format_value(v, opts.use_tf) for v in row.steps)
        cells.append(format_value(row.result, opts.use_tf))
        body.append(cells)

    widths = [len(h) for h in header]
    for cells in body:
        for k, cell in enumerate(cells):
            widths[k] = max(widths[k], len(cell))

    def line(cells):
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    return "\n".join([line(header)] + [line(cells) for cells in body])
