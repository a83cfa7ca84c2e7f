"""
Remark stripping for SQL dump files.

A *remark* is a whole line whose first character is the marker (``#`` for
MySQL-style dumps).  Remark lines are blanked, never removed, so line *n* of
the cleaned script is still line *n* of the dump.

Only whole-line remarks are handled.  Block comments (``/* ... */``) are left
in place: the dump tool this format comes from shipped a block-comment pass,
but it regex-escaped each line before matching and therefore never matched
anything.  That pass is not reproduced.
"""
from __future__ import annotations

DEFAULT_MARKER = "#"


def strip(raw: str, marker: str = DEFAULT_MARKER) -> str:
    """
    Return *raw* with every remark line replaced by an empty line.

    Each processed line is written back followed by ``"\\n"``.  A trailing
    empty line (the artifact of a terminal newline) is not processed, so
    ``"a\\n"`` stays ``"a\\n"`` and ``""`` stays ``""``.
    """
    lines = raw.split("\n")
    last = len(lines) - 1

    out: list[str] = []
    for index, line in enumerate(lines):
        if index == last and not line:
            break
        out.append("" if line.startswith(marker) else line)

    return "".join(f"{line}\n" for line in out)
