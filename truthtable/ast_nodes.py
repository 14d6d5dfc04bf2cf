"""
ast_nodes.py

Expression tree nodes.

Every node gets a fresh integer id at construction. The id is only a
memoization key for step evaluation: nodes compare by identity, never by
structure. Structural de-duplication of steps goes through the rendered
label (see canonical.py).
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from .operator_lexicon import Operator

# Node kinds
VAR = "var"
CONST = "const"
OP = "op"

# Process-wide so ids are never reused, even across separately built trees
_node_ids = itertools.count(1)


@dataclass(eq=False)
class Node:
    kind: str
    name: Optional[str] = None
    value: Optional[bool] = None
    op: Optional[Operator] = None
    operands: Tuple["Node", ...] = ()
    id: int = field(default_factory=lambda: next(_node_ids))

    @property
    def is_leaf(self) -> bool:
        return self.kind != OP

    def __repr__(self):
        if self.kind == VAR:
            return f"Node#{self.id}(var {self.name})"
        if self.kind == CONST:
            return f"Node#{self.id}(const {self.value})"
        return f"Node#{self.id}({self.op.key} {', '.join(repr(c) for c in self.operands)})"


def iter_postorder(root: Node) -> Iterator[Node]:
    """Yield operands before their combinator, left to right, without recursion."""
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded or node.is_leaf:
            yield node
            continue
        stack.append((node, True))
        for child in reversed(node.operands):
            stack.append((child, False))


def make_var(name: str) -> Node:
    return Node(VAR, name=name)


def make_const(value: bool) -> Node:
    return Node(CONST, value=bool(value))


def make_op(op: Operator, *operands: Node) -> Node:
    """Combinator node; operand count must match the operator's arity."""
    if len(operands) != op.arity:
        raise ValueError(f"{op.key} takes {op.arity} operand(s), got {len(operands)}")
    return Node(OP, op=op, operands=tuple(operands))
