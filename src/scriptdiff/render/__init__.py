"""Presentation of edit scripts as marker-prefixed text or HTML."""

from .html_renderer import DiffHtmlRenderer
from .text_renderer import DiffTextRenderer

__all__ = [
    "DiffHtmlRenderer",
    "DiffTextRenderer",
]
