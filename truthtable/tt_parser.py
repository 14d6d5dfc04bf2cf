"""
tt_parser.py

Operator-precedence parsing for boolean expressions.

    tokens --to_postfix--> postfix (RPN) --build_ast--> expression tree

to_postfix is a shunting-yard pass driven by the operator registry.
build_ast replays the postfix sequence on a node stack, which is also where
missing operands are detected.
"""

from __future__ import annotations

import os
import sys
from typing import List, Set, Tuple

from .ast_nodes import Node, iter_postorder, make_const, make_op, make_var
from .canonical import format_node, format_tree
from .errors import ParseError
from .operator_lexicon import LEFT, OPERATORS
from .tokenize import CONST, IDENT, LPAREN, OP, RPAREN, Token, tokenize

# ==========================================
# DEBUGGING INSTRUMENTATION
# ==========================================
# Enable with: TRUTHTABLE_DEBUG=1
_DEBUG_ENABLED = os.getenv("TRUTHTABLE_DEBUG", "0") == "1"


def _debug_print(*args, **kwargs):
    """Print only if debug is enabled."""
    if _DEBUG_ENABLED:
        print(*args, file=sys.stderr, **kwargs)


# ==========================================
# 1. SHUNTING-YARD
# ==========================================

def to_postfix(tokens: List[Token]) -> List[Token]:
    """
    Reorder infix tokens into postfix order.

    An incoming operator pops every stacked operator that binds tighter, or
    equally tight when the incoming operator is left-associative. NOT needs
    no special case: it is prefix-only, right-associative and binds tightest.

    Raises:
        ParseError: unknown operator key or mismatched parentheses.
    """
    output: List[Token] = []
    stack: List[Token] = []

    for tok in tokens:
        if tok.kind in (IDENT, CONST):
            output.append(tok)
        elif tok.kind == OP:
            info = OPERATORS.get(tok.value)
            if info is None:
                raise ParseError(f"Unknown operator '{tok.raw or tok.value}'")
            while stack and stack[-1].kind == OP:
                top = OPERATORS[stack[-1].value]
                if top.precedence > info.precedence or (
                    top.precedence == info.precedence and info.associativity == LEFT
                ):
                    output.append(stack.pop())
                else:
                    break
            stack.append(tok)
        elif tok.kind == LPAREN:
            stack.append(tok)
        elif tok.kind == RPAREN:
            found = False
            while stack:
                t = stack.pop()
                if t.kind == LPAREN:
                    found = True
                    break
                output.append(t)
            if not found:
                raise ParseError('Mismatched parentheses: missing "("')
        else:
            raise ParseError(f"Unexpected token: {tok!r}")

    while stack:
        t = stack.pop()
        if t.kind in (LPAREN, RPAREN):
            raise ParseError("Mismatched parentheses")
        output.append(t)

    _debug_print(f"[to_postfix] {' '.join(t.raw for t in output)}")
    return output


# ==========================================
# 2. AST CONSTRUCTION
# ==========================================

def build_ast(postfix: List[Token]) -> Node:
    """
    Rebuild the expression tree from a postfix sequence.

    Binary operators pop the right operand first, then the left one.

    Raises:
        ParseError: an operator lacks operands, or the walk does not end
        with exactly one node.
    """
    stack: List[Node] = []
    for tok in postfix:
        if tok.kind == IDENT:
            stack.append(make_var(tok.value))
        elif tok.kind == CONST:
            stack.append(make_const(tok.value))
        elif tok.kind == OP:
            info = OPERATORS.get(tok.value)
            if info is None:
                raise ParseError(f"Unknown operator '{tok.raw or tok.value}'")
            if info.arity == 1:
                if not stack:
                    raise ParseError("Invalid expression: missing operand for unary operator")
                a = stack.pop()
                stack.append(make_op(info, a))
            elif info.arity == 2:
                if len(stack) < 2:
                    raise ParseError("Invalid expression: missing operands for binary operator")
                b = stack.pop()
                a = stack.pop()
                stack.append(make_op(info, a, b))
            else:
                raise ParseError("Unsupported operator arity")
        else:
            raise ParseError("Unexpected token in AST build")

    if len(stack) != 1:
        raise ParseError("Invalid expression: could not build AST")
    if _DEBUG_ENABLED:
        _debug_print(f"[build_ast] root={format_node(stack[0])}")
    return stack[0]


# ==========================================
# 3. SUB-EXPRESSION STEPS
# ==========================================

def collect_subexpressions(root: Node) -> List[Tuple[Node, str]]:
    """
    Combinator nodes in post-order, each with its canonical label.

    A label seen before is skipped, so "(a & b) | (a & b)" yields the
    "(a & b)" step once. The root is included as the last step.
    """
    order: List[Tuple[Node, str]] = []
    seen: Set[str] = set()
    labels = format_tree(root)

    for n in iter_postorder(root):
        if n.is_leaf:
            continue
        label = labels[n.id]
        if label not in seen:
            seen.add(label)
            order.append((n, label))
    return order


def parse_expression(text: str) -> Tuple[List[Token], List[Token], Node]:
    """Convenience: tokenize, convert to postfix and build the tree."""
    tokens = tokenize(text)
    postfix = to_postfix(tokens)
    return tokens, postfix, build_ast(postfix)
