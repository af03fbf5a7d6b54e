"""Scan subpackage: bracket-aware scanning primitives.

Re-exports the public API for the scan module:
- scan_top_level: report top-level characters, flag stray closers
- split_top_level: split at top-level separators
- has_top_level: test for a top-level character
- read_round / read_square: consume one bracketed span
"""

from castlist.scan.readers import ReadResult, read_round, read_square
from castlist.scan.scanner import has_top_level, scan_top_level, split_top_level

__all__ = [
    "ReadResult",
    "has_top_level",
    "read_round",
    "read_square",
    "scan_top_level",
    "split_top_level",
]
