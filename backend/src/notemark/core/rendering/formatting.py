"""
Editor toolbar formatting.

Wraps or prefixes the selected part of a note with markdown markers, and
strips them again for "clear formatting".
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .inline import ANY_CHAR, SPACE, sub_links


class FormatKind(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    QUOTE = "quote"
    LIST = "list"
    NUMBERED_LIST = "numbered-list"
    LINK = "link"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"


_TEMPLATES: Dict[FormatKind, str] = {
    FormatKind.BOLD: "**{}**",
    FormatKind.ITALIC: "*{}*",
    FormatKind.UNDERLINE: "__{}__",
    FormatKind.STRIKETHROUGH: "~~{}~~",
    FormatKind.CODE: "`{}`",
    FormatKind.QUOTE: "> {}",
    FormatKind.LIST: "- {}",
    FormatKind.NUMBERED_LIST: "1. {}",
    FormatKind.LINK: "[{}](url)",
    FormatKind.H1: "# {}",
    FormatKind.H2: "## {}",
    FormatKind.H3: "### {}",
}

# Applied in order; the anchored ones only touch the start of the selection
_CLEAR_RULES = (
    (re.compile(rf"\*\*({ANY_CHAR}*?)\*\*"), r"\1", 0),
    (re.compile(rf"\*({ANY_CHAR}*?)\*"), r"\1", 0),
    (re.compile(rf"__({ANY_CHAR}*?)__"), r"\1", 0),
    (re.compile(rf"~~({ANY_CHAR}*?)~~"), r"\1", 0),
    (re.compile(rf"`({ANY_CHAR}*?)`"), r"\1", 0),
    (re.compile(rf"^>{SPACE}*"), "", 1),
    (re.compile(rf"^[-*]{SPACE}*"), "", 1),
    (re.compile(rf"^[0-9]+\.{SPACE}*"), "", 1),
)

_CLEAR_LINK = re.compile(rf"\[({ANY_CHAR}*?)\]\({ANY_CHAR}*?\)")


@dataclass(frozen=True)
class Selection:
    """Note content plus the selected range after an edit."""

    content: str
    start: int
    end: int


def apply_format(selected: str, kind: FormatKind) -> str:
    """Wrap or prefix ``selected`` with the markers for ``kind``."""
    return _TEMPLATES[FormatKind(kind)].format(selected)


def clear_formatting(selected: str) -> str:
    """Remove inline markers and a leading block marker from ``selected``."""
    for pattern, replacement, count in _CLEAR_RULES:
        selected = pattern.sub(replacement, selected, count=count)
    return sub_links(_CLEAR_LINK, r"\1", selected)


def format_selection(
    content: str, start: int, end: int, kind: Optional[FormatKind]
) -> Selection:
    """Format ``content[start:end]`` and select the replacement.

    ``kind=None`` clears formatting. An empty selection leaves everything
    unchanged.
    """
    if not 0 <= start <= end <= len(content):
        raise ValueError(
            f"Invalid selection {start}:{end} for content of length {len(content)}"
        )

    selected = content[start:end]
    if not selected:
        return Selection(content=content, start=start, end=end)

    replacement = clear_formatting(selected) if kind is None else apply_format(selected, kind)
    new_content = content[:start] + replacement + content[end:]
    return Selection(content=new_content, start=start, end=start + len(replacement))
