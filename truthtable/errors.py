"""
errors.py

Exception hierarchy shared by the lexer, parser and evaluators.

Lexing and parsing errors abort a request and are shown to the user
verbatim. Evaluation errors are absorbed per row by the enumerator.
"""

from __future__ import annotations

from typing import Optional


# -------------------------------------------------------------------------
# Exceptions
# -------------------------------------------------------------------------


class TruthTableError(Exception):
    """Base class for every error raised by the truthtable package."""


class LexError(TruthTableError):
    """
    Raised when the input contains a character or number the lexer rejects.

    `position` is the 1-based offset in the trimmed input, or None when the
    error is not tied to a single character (e.g. a malformed number).
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class ParseError(TruthTableError):
    """Raised on mismatched parentheses, unknown operators or missing operands."""


class TooManyVariablesError(TruthTableError):
    """Raised when an expression has more free variables than the configured ceiling."""


class EvalError(TruthTableError):
    """Base class for evaluation failures."""


class UnboundVariable(EvalError):
    """Raised when a variable has no value in the assignment."""

    def __init__(self, name: str):
        super().__init__(f"Unbound variable '{name}'")
        self.name = name


class MalformedExpression(EvalError):
    """Raised when postfix evaluation runs out of operands or leaves extras behind."""
