"""
truthtable/canonical.py - Canonical rendering of expression trees
"""
from typing import Dict

from .ast_nodes import CONST, OP, VAR, Node, iter_postorder


def _render(node: Node, labels: Dict[int, str]) -> str:
    if node.kind == VAR:
        return node.name
    if node.kind == CONST:
        return "T" if node.value else "F"
    if node.kind == OP:
        if node.op.arity == 1:
            (child,) = node.operands
            inner = labels[child.id]
            # binary labels already carry their own parentheses
            if child.kind == OP and child.op.arity == 1:
                return f"{node.op.symbol}({inner})"
            return node.op.symbol + inner
        left, right = node.operands
        return f"({labels[left.id]} {node.op.symbol} {labels[right.id]})"
    return "?"


def format_tree(root: Node) -> Dict[int, str]:
    """Canonical label of every node under `root`, keyed by node id."""
    labels: Dict[int, str] = {}
    for node in iter_postorder(root):
        labels[node.id] = _render(node, labels)
    return labels


def format_node(node: Node) -> str:
    """
    Render a node to its canonical label.

    Rules:
        - Variables render as their original name, constants as T / F.
        - Negation renders as "!x" over a leaf or a binary combinator
          ("!(a & b)") and as "!(!x)" over another negation.
        - Binary operators are always fully parenthesized: "(a & b)".

    The label doubles as the step column header and as the de-duplication
    key for sub-expressions.
    """
    return format_tree(node)[node.id]
