"""
Markdown rendering for note previews and the public note viewer.
"""

from .blocks import (
    Block,
    Heading,
    InlineSpan,
    LineBreak,
    ListBlock,
    ListItem,
    Paragraph,
    Quote,
    SpanKind,
)
from .formatting import FormatKind, Selection, apply_format, clear_formatting, format_selection
from .html import block_to_html, blocks_to_html, render_not_found_page, render_page
from .inline import INLINE_RULES, InlineRule, safe_href, strip_formatting, substitute, tokenize
from .renderer import LineKind, ListAccumulator, MarkdownRenderer, classify_line, render

__all__ = [
    # Blocks
    "Block",
    "Heading",
    "Paragraph",
    "Quote",
    "LineBreak",
    "ListBlock",
    "ListItem",
    "InlineSpan",
    "SpanKind",
    # Renderer
    "MarkdownRenderer",
    "ListAccumulator",
    "LineKind",
    "classify_line",
    "render",
    # Inline
    "INLINE_RULES",
    "InlineRule",
    "substitute",
    "strip_formatting",
    "tokenize",
    "safe_href",
    # Markup
    "block_to_html",
    "blocks_to_html",
    "render_page",
    "render_not_found_page",
    # Editor formatting
    "FormatKind",
    "Selection",
    "apply_format",
    "clear_formatting",
    "format_selection",
]
