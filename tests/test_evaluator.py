"""
Evaluator tests — truth functions, both strategies, memoization and
evaluation errors.
"""

import itertools

import pytest

from truthtable.errors import EvalError, MalformedExpression, UnboundVariable
from truthtable.operator_lexicon import OPERATORS, apply_operator
from truthtable.tokenize import tokenize
from truthtable.tt_evaluator import eval_node, eval_postfix
from truthtable.tt_parser import build_ast, parse_expression, to_postfix


TRUTH = {
    "AND": lambda a, b: a and b,
    "XOR": lambda a, b: a != b,
    "OR": lambda a, b: a or b,
    "IMP": lambda a, b: (not a) or b,
    "IFF": lambda a, b: a == b,
}


def test_registry_table():
    """Arity / precedence / associativity must match the published table."""
    expected = {
        "NOT": (1, 5, "right"),
        "AND": (2, 4, "left"),
        "XOR": (2, 3, "left"),
        "OR": (2, 2, "left"),
        "IMP": (2, 1, "right"),
        "IFF": (2, 0, "left"),
    }
    got = {k: (op.arity, op.precedence, op.associativity) for k, op in OPERATORS.items()}
    assert got == expected


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        OPERATORS["NAND"] = OPERATORS["AND"]


def test_truth_functions():
    assert apply_operator("NOT", True) is False
    assert apply_operator("NOT", False) is True
    for key, fn in TRUTH.items():
        for a, b in itertools.product([False, True], repeat=2):
            assert apply_operator(key, a, b) == fn(a, b), (key, a, b)


def test_apply_operator_wrong_arity():
    with pytest.raises(EvalError):
        apply_operator("AND", True)
    with pytest.raises(EvalError):
        apply_operator("NOT", True, False)


def test_eval_postfix_basic():
    postfix = to_postfix(tokenize("a & !b"))
    assert eval_postfix(postfix, {"a": True, "b": False}) is True
    assert eval_postfix(postfix, {"a": True, "b": True}) is False


def test_eval_postfix_constants():
    assert eval_postfix(to_postfix(tokenize("1 <-> 0")), {}) is False
    assert eval_postfix(to_postfix(tokenize("T -> F")), {}) is False
    assert eval_postfix(to_postfix(tokenize("F -> F")), {}) is True


def test_eval_postfix_unbound_variable():
    postfix = to_postfix(tokenize("a | b"))
    with pytest.raises(UnboundVariable) as exc:
        eval_postfix(postfix, {"a": True})
    assert exc.value.name == "b"
    assert str(exc.value) == "Unbound variable 'b'"
    assert isinstance(exc.value, EvalError)


def test_eval_postfix_missing_operand():
    postfix = to_postfix(tokenize("a &"))
    with pytest.raises(MalformedExpression):
        eval_postfix(postfix, {"a": True})


def test_eval_postfix_leftover_values():
    postfix = to_postfix(tokenize("a b"))
    with pytest.raises(MalformedExpression) as exc:
        eval_postfix(postfix, {"a": True, "b": True})
    assert "leftover values" in str(exc.value)


def test_eval_node_matches_postfix():
    _, postfix, root = parse_expression("(p -> q) & (q -> r) -> (p -> r)")
    for p, q, r in itertools.product([False, True], repeat=3):
        env = {"p": p, "q": q, "r": r}
        assert eval_node(root, env, {}) == eval_postfix(postfix, env) is True


def test_eval_node_fills_cache_by_id():
    _, _, root = parse_expression("!(a & b)")
    cache = {}
    eval_node(root, {"a": True, "b": True}, cache)
    inner = root.operands[0]
    assert cache[root.id] is False
    assert cache[inner.id] is True
    # every node in the tree is cached: !, &, a, b
    assert len(cache) == 4


def test_eval_node_uses_cached_value():
    """A cached node value is returned without re-evaluating the subtree."""
    _, _, root = parse_expression("a & !a")
    cache = {root.id: True}
    assert eval_node(root, {"a": False}, cache) is True
    assert eval_node(root, {"a": False}, {}) is False


def test_eval_node_unbound_variable():
    root = build_ast(to_postfix(tokenize("x -> y")))
    with pytest.raises(UnboundVariable):
        eval_node(root, {"x": True}, {})


def test_eval_node_deep_negation_chain():
    """Nesting deeper than the interpreter's recursion limit still evaluates."""
    _, postfix, root = parse_expression("!" * 3001 + "a")
    for a in (False, True):
        assert eval_node(root, {"a": a}, {}) is (not a)
        assert eval_postfix(postfix, {"a": a}) is (not a)
