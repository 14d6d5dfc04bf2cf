"""
tt_evaluator.py

Two interchangeable evaluation strategies with identical semantics:

    eval_postfix : stack machine over the postfix sequence (result column)
    eval_node    : recursive tree walk memoized by node id (step columns)

Both must agree on every assignment.
"""

from __future__ import annotations

from typing import Dict, List, Mapping

from .ast_nodes import CONST as NODE_CONST
from .ast_nodes import OP as NODE_OP
from .ast_nodes import VAR, Node
from .errors import EvalError, MalformedExpression, UnboundVariable
from .operator_lexicon import OPERATORS, apply_operator
from .tokenize import CONST, IDENT, OP, Token

Assignment = Mapping[str, bool]


def eval_postfix(postfix: List[Token], assignment: Assignment) -> bool:
    """
    Evaluate a postfix sequence under one assignment.

    Raises:
        UnboundVariable: an identifier has no value in the assignment.
        MalformedExpression: operands run out, or more than one value remains.
    """
    stack: List[bool] = []
    for tok in postfix:
        if tok.kind == IDENT:
            if tok.value not in assignment:
                raise UnboundVariable(tok.value)
            stack.append(bool(assignment[tok.value]))
        elif tok.kind == CONST:
            stack.append(bool(tok.value))
        elif tok.kind == OP:
            info = OPERATORS.get(tok.value)
            if info is None:
                raise EvalError(f"Unknown operator '{tok.raw or tok.value}'")
            if info.arity == 1:
                if len(stack) < 1:
                    raise MalformedExpression("Invalid expression: missing operand for unary operator")
                a = stack.pop()
                stack.append(apply_operator(info.key, a))
            elif info.arity == 2:
                if len(stack) < 2:
                    raise MalformedExpression("Invalid expression: missing operands for binary operator")
                b = stack.pop()
                a = stack.pop()
                stack.append(apply_operator(info.key, a, b))
            else:
                raise EvalError("Unsupported operator arity")
        else:
            raise EvalError("Unexpected token in evaluation")

    if len(stack) != 1:
        raise MalformedExpression("Invalid expression: leftover values after evaluation")
    return stack[0]


def eval_node(node: Node, assignment: Assignment, cache: Dict[int, bool]) -> bool:
    """
    Evaluate a subtree, memoizing every node value in `cache` by node id.

    The cache belongs to a single assignment; callers start a fresh one per row.
    """
    # Explicit stack: operands are pushed right-to-left so the left one is
    # evaluated first; cached subtrees are never expanded.
    stack = [(node, False)]
    while stack:
        n, expanded = stack.pop()
        if n.id in cache:
            continue

        if n.kind == VAR:
            if n.name not in assignment:
                raise UnboundVariable(n.name)
            val = bool(assignment[n.name])
        elif n.kind == NODE_CONST:
            val = bool(n.value)
        elif n.kind == NODE_OP:
            if len(n.operands) != n.op.arity:
                raise EvalError("Unsupported operator arity")
            if not expanded:
                stack.append((n, True))
                stack.extend((child, False) for child in reversed(n.operands))
                continue
            val = apply_operator(n.op.key, *(cache[child.id] for child in n.operands))
        else:
            raise EvalError("Unknown node type")

        cache[n.id] = val
    return cache[node.id]
