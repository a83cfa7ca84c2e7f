"""
Split a cleaned SQL script into statements.

The script is cut on every delimiter first; the pieces (*tokens*) are then
re-joined wherever a cut landed inside a single-quoted literal.  Whether a cut
is inside a literal is decided purely by quote parity: a token with an odd
number of unescaped ``'`` opens (or closes) a literal.

A quote is *escaped* when an odd-length run of backslashes precedes it
(``\\'``).  An even run (``\\\\'``) escapes the backslashes themselves, so the
quote still counts.  Doubled quotes (``''``) are not treated as an escape;
the dumps this targets use backslash escaping only.

The splitter never rejects input.  If the script ends inside an open literal,
the unterminated tail is dropped from the result and reported through
:attr:`Segmentation.unterminated` and a warning on this module's logger.
"""
from __future__ import annotations

import enum
import logging
import re
import typing as t

log = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"

# A quote preceded by an odd number of backslashes.
_ESCAPED_QUOTE_RE = re.compile(r"(?<!\\)(?:\\\\)*\\'")


class QuoteState(t.NamedTuple):
    total: int
    escaped: int

    @property
    def unescaped(self) -> int:
        return self.total - self.escaped

    @property
    def odd(self) -> bool:
        """True when the token leaves a literal open (or closes one)."""
        return self.unescaped % 2 == 1


class Segmentation(t.NamedTuple):
    """Result of :func:`segment`."""

    statements: list[str]
    unterminated: str | None = None


class _State(enum.Enum):
    SCANNING = "scanning"
    ACCUMULATING = "accumulating"


def quote_state(token: str) -> QuoteState:
    """Count all single quotes in *token* and those that are escaped."""
    return QuoteState(token.count("'"), len(_ESCAPED_QUOTE_RE.findall(token)))


def segment(cleaned: str, delimiter: str = DEFAULT_DELIMITER) -> Segmentation:
    """
    Split *cleaned* on *delimiter*, keeping delimiters that sit inside
    single-quoted literals.

    Statements are returned in script order, without their terminating
    delimiter and with surrounding whitespace untouched.  A blank final token
    (what follows the last delimiter) is not a statement.
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")

    tokens = cleaned.split(delimiter)
    last = len(tokens) - 1

    statements: list[str] = []
    buf: list[str] = []
    state = _State.SCANNING

    for index, token in enumerate(tokens):
        if state is _State.SCANNING:
            if index == last and not token.strip():
                break
            if not quote_state(token).odd:
                statements.append(token)
                continue
            buf = [token]
            state = _State.ACCUMULATING
            continue

        buf.append(token)
        if quote_state(token).odd:
            statements.append(delimiter.join(buf))
            buf = []
            state = _State.SCANNING

    unterminated = None
    if state is _State.ACCUMULATING:
        unterminated = delimiter.join(buf)
        log.warning(
            "Dropped unterminated literal at end of script (%d chars): %.60r",
            len(unterminated),
            unterminated,
        )

    log.debug("Split %d token(s) into %d statement(s)", len(tokens), len(statements))
    return Segmentation(statements, unterminated)


def split(cleaned: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Return only the statements of :func:`segment`."""
    return segment(cleaned, delimiter).statements
