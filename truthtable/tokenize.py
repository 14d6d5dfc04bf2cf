"""
truthtable/tokenize.py

Lexer for mixed-notation boolean expressions.
Single source of truth for turning raw text into typed tokens.
"""

import os
import re
import sys
from dataclasses import dataclass
from typing import Any, List, Optional

from .errors import LexError
from .operator_lexicon import CONST_LEXEMES, SYMBOL_OPERATORS, WORD_OPERATORS

# Token kinds
LPAREN = "lparen"
RPAREN = "rparen"
OP = "op"
CONST = "const"
IDENT = "ident"

_WHITESPACE = " \t\n\r"

# Sort by length descending so "<->" wins over "->" and "<=>" is never split
_SYMBOL_PATTERN = re.compile(
    "|".join(re.escape(m) for m in sorted(SYMBOL_OPERATORS, key=len, reverse=True))
)
_WORD_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_DIGITS_PATTERN = re.compile(r"[0-9]+")

_DEBUG_ENABLED = os.getenv("TRUTHTABLE_DEBUG", "0") == "1"


def _debug_print(*args, **kwargs):
    """Print only if debug is enabled."""
    if _DEBUG_ENABLED:
        print(*args, file=sys.stderr, **kwargs)


@dataclass(frozen=True)
class Token:
    """
    A lexed token.

    value: operator key for OP, bool for CONST, name for IDENT, the
    parenthesis character for LPAREN/RPAREN.
    raw: surface form as written.
    position: 1-based offset in the trimmed input.
    """
    kind: str
    value: Any
    raw: str
    position: Optional[int] = None

    def __str__(self):
        return self.raw


def tokenize(text: str) -> List[Token]:
    """
    Convert expression text into tokens.

    Raises:
        LexError: on a character no lexeme accepts, or a number other than 0/1.
    """
    s = text.strip()
    tokens: List[Token] = []
    i = 0

    while i < len(s):
        ch = s[i]
        if ch in _WHITESPACE:
            i += 1
            continue

        if ch == "(":
            tokens.append(Token(LPAREN, "(", "(", i + 1))
            i += 1
            continue
        if ch == ")":
            tokens.append(Token(RPAREN, ")", ")", i + 1))
            i += 1
            continue

        m = _SYMBOL_PATTERN.match(s, i)
        if m:
            raw = m.group(0)
            tokens.append(Token(OP, SYMBOL_OPERATORS[raw], raw, i + 1))
            i = m.end()
            continue

        m = _WORD_PATTERN.match(s, i)
        if m:
            raw = m.group(0)
            word = raw.lower()
            if word in CONST_LEXEMES:
                tokens.append(Token(CONST, CONST_LEXEMES[word], raw, i + 1))
            elif word in WORD_OPERATORS:
                tokens.append(Token(OP, WORD_OPERATORS[word], raw, i + 1))
            else:
                tokens.append(Token(IDENT, raw, raw, i + 1))
            i = m.end()
            continue

        m = _DIGITS_PATTERN.match(s, i)
        if m:
            num = m.group(0)
            if num not in ("0", "1"):
                raise LexError(
                    f"Unexpected number '{num}'. Only 0 or 1 are allowed as constants.",
                    i + 1,
                )
            tokens.append(Token(CONST, CONST_LEXEMES[num], num, i + 1))
            i = m.end()
            continue

        raise LexError(f"Unexpected character '{ch}' at position {i + 1}", i + 1)

    _debug_print(f"[tokenize] {len(tokens)} tokens: {' '.join(t.raw for t in tokens)}")
    return tokens


def variable_sort_key(name: str):
    """Case-insensitive first, lower case before upper case on ties ("a" < "A" < "b")."""
    return (name.casefold(), name.swapcase())


def collect_variables(tokens: List[Token]) -> List[str]:
    """Distinct identifier names, sorted ascending. This order fixes columns and row bits."""
    return sorted({t.value for t in tokens if t.kind == IDENT}, key=variable_sort_key)
