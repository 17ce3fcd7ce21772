"""Line-level diff engine for script review.

Exports
-------
diff_lines
    Compute the LCS-based edit script between two line sequences.
original_lines / updated_lines
    Rebuild either input from an edit script.
summarize
    Count the operations of each kind.
split_lines / join_lines
    Convert between text and line sequences.
LCSTable
    Prefix LCS length table backing the engine.
TextDiffer
    Text-level facade with input bounds, logging, and metrics.
"""

from .compare import TextDiffer
from .engine import diff_lines, original_lines, summarize, updated_lines
from .lcs_table import LCSTable
from .lines import join_lines, split_lines

__all__ = [
    "LCSTable",
    "TextDiffer",
    "diff_lines",
    "join_lines",
    "original_lines",
    "split_lines",
    "summarize",
    "updated_lines",
]
