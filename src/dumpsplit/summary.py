"""
Classify split statements for reporting (``dumpsplit stats``).

This is read-only bookkeeping on top of the splitter; ``sqlparse`` is only
asked what kind of statement it sees, never where statements end.
"""
from __future__ import annotations

import collections
import typing as t

import sqlparse


def describe(statement: str) -> str:
    """Return the statement type: ``CREATE``, ``INSERT``, ... or ``UNKNOWN``."""
    parsed = sqlparse.parse(statement)
    if not parsed:
        return "UNKNOWN"
    return parsed[0].get_type().upper()


def tally(statements: t.Iterable[str]) -> collections.Counter:
    return collections.Counter(describe(s) for s in statements)
