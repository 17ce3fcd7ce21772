"""Split text into the line sequences consumed by the diff engine."""

from __future__ import annotations


def split_lines(text: str, *, normalize_newlines: bool = False) -> list[str]:
    """Split *text* on ``"\\n"`` into a list of lines.

    The split is literal: an empty string yields ``[""]`` and a trailing
    newline yields a trailing empty line, so every position in the source
    text belongs to exactly one line.

    Parameters
    ----------
    text:
        The text to split.
    normalize_newlines:
        When ``True``, ``"\\r\\n"`` and lone ``"\\r"`` are converted to
        ``"\\n"`` first.  Otherwise a ``"\\r"`` stays part of the line
        content and participates in equality.

    Examples
    --------
    >>> split_lines("")
    ['']
    >>> split_lines("a\\nb\\n")
    ['a', 'b', '']
    """
    if normalize_newlines:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def join_lines(lines: list[str]) -> str:
    """Inverse of :func:`split_lines` for newline-normalized text."""
    return "\n".join(lines)
