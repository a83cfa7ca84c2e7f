"""
dumpsplit: cut SQL dump files into individually executable statements.
"""
from __future__ import annotations

__version__ = "0.1.0"

from dumpsplit.remarks import strip
from dumpsplit.splitter import Segmentation, quote_state, segment, split

__all__ = [
    "__version__",
    "Segmentation",
    "quote_state",
    "segment",
    "split",
    "strip",
]
