"""
Truth Table Operator Lexicon (Single Source of Truth)

This module defines the operator registry and every surface form the lexer
accepts. The tokenizer, parser, renderer and evaluators all import from here
so that precedence, symbols and truth functions never drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Tuple

from .errors import EvalError

LEFT = "left"
RIGHT = "right"


@dataclass(frozen=True)
class Operator:
    """
    Immutable operator metadata.

    precedence: higher binds tighter.
    symbol: canonical display form used in step labels.
    """
    key: str
    arity: int
    precedence: int
    associativity: str
    symbol: str
    fn: Callable[..., bool]


# Registry, keyed by operator key (never mutated after import)
OPERATORS: Mapping[str, Operator] = MappingProxyType({
    "NOT": Operator("NOT", 1, 5, RIGHT, "!",   lambda a: not a),
    "AND": Operator("AND", 2, 4, LEFT,  "&",   lambda a, b: a and b),
    "XOR": Operator("XOR", 2, 3, LEFT,  "^",   lambda a, b: a != b),
    "OR":  Operator("OR",  2, 2, LEFT,  "|",   lambda a, b: a or b),
    "IMP": Operator("IMP", 2, 1, RIGHT, "->",  lambda a, b: (not a) or b),
    "IFF": Operator("IFF", 2, 0, LEFT,  "<->", lambda a, b: a == b),
})

# Surface form -> operator key (the tokenizer matches symbols longest-first)
OPERATOR_LEXEMES: List[Tuple[str, str]] = [
    # Biconditional
    ("<=>", "IFF"), ("<->", "IFF"), ("↔", "IFF"), ("iff", "IFF"),
    # Implication
    ("->", "IMP"), ("=>", "IMP"), ("→", "IMP"), ("implies", "IMP"),
    # Exclusive or
    ("⊕", "XOR"), ("^", "XOR"), ("xor", "XOR"),
    # Conjunction
    ("∧", "AND"), ("&", "AND"), ("and", "AND"),
    # Disjunction
    ("∨", "OR"), ("|", "OR"), ("or", "OR"),
    # Negation
    ("¬", "NOT"), ("~", "NOT"), ("!", "NOT"), ("not", "NOT"),
]

# Word forms are only recognized as whole identifiers
WORD_OPERATORS: Dict[str, str] = {m: op for m, op in OPERATOR_LEXEMES if m.isalpha()}
SYMBOL_OPERATORS: Dict[str, str] = {m: op for m, op in OPERATOR_LEXEMES if not m.isalpha()}

# Case-insensitive constant words ("1"/"0" also arrive here from the digit scanner)
CONST_LEXEMES: Dict[str, bool] = {
    "true": True, "t": True, "1": True,
    "false": False, "f": False, "0": False,
}


def apply_operator(key: str, *operands: bool) -> bool:
    """Apply an operator's truth function to exactly `arity` operands."""
    op = OPERATORS.get(key)
    if op is None:
        raise EvalError(f"Unknown operator '{key}'")
    if len(operands) != op.arity:
        raise EvalError("Unsupported operator arity")
    return bool(op.fn(*(bool(v) for v in operands)))
