from __future__ import annotations

import hashlib
import logging
import pathlib

from dumpsplit.remarks import DEFAULT_MARKER, strip
from dumpsplit.splitter import DEFAULT_DELIMITER, Segmentation, segment

log = logging.getLogger(__name__)


def calculate_checksum(sql_text: str) -> str:
    """Return a SHA‑256 hex digest of the given SQL text."""
    return hashlib.sha256(sql_text.encode("utf-8")).hexdigest()


class DumpFile:
    """Representation of one SQL dump file on disk."""

    def __init__(self, path: pathlib.Path, encoding: str = "utf-8") -> None:
        self.path: pathlib.Path = path
        self.name: str = path.name
        self.sql: str = path.read_text(encoding=encoding)
        self.checksum: str = calculate_checksum(self.sql)

    def segment(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        marker: str = DEFAULT_MARKER,
    ) -> Segmentation:
        """Strip remark lines, then split into statements."""
        result = segment(strip(self.sql, marker), delimiter)
        log.debug("%s: %d statement(s)", self.name, len(result.statements))
        return result

    def __repr__(self) -> str:
        return f"DumpFile({str(self.path)!r})"


def discover(path: pathlib.Path, encoding: str = "utf-8") -> list[DumpFile]:
    """
    Return **sorted** list of ``DumpFile`` objects found at *path*.

    *path* may be a single ``.sql`` file or a directory (not searched
    recursively).  A directory that does not exist yet means “no dumps”
    rather than *FileNotFoundError*.
    """
    if path.is_file():
        return [DumpFile(path, encoding)] if path.suffix.lower() == ".sql" else []
    if not path.exists():
        return []

    items: list[DumpFile] = []
    for p in path.iterdir():
        if p.is_file() and p.suffix.lower() == ".sql":
            items.append(DumpFile(p, encoding))

    return sorted(items, key=lambda d: d.name)
