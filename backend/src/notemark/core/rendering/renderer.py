"""
Line-oriented markdown renderer.

One forward pass over the lines of a note. Each line is run through the
inline pipeline, then classified on its *raw* prefix. List lines are
buffered in a ``ListAccumulator`` and emitted as a single ``ListBlock`` when
the run ends; every other line produces at most one block.

The only state carried between lines is the accumulator (``None`` when no
list is open), so the pass is a fold::

    acc = None
    for index, line in enumerate(lines):
        acc = renderer.step(acc, blocks, index, line)
    renderer.flush(acc, blocks)

Rendering never fails: unmatched markers stay in the output as literal text.
"""

import html
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .blocks import Block, Heading, LineBreak, ListBlock, ListItem, Paragraph, Quote
from .inline import SPACE, SPACE_CHARS, strip_formatting, substitute, tokenize

_ORDERED_PREFIX = re.compile(rf"^[0-9]+\.{SPACE}")


class LineKind(str, Enum):
    """Structural classification of a raw line, in precedence order."""

    UNORDERED_ITEM = "unordered_item"
    ORDERED_ITEM = "ordered_item"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    QUOTE = "quote"
    EMPTY = "empty"
    PARAGRAPH = "paragraph"


_PREFIXES = {
    LineKind.HEADING_1: "# ",
    LineKind.HEADING_2: "## ",
    LineKind.HEADING_3: "### ",
    LineKind.QUOTE: "> ",
}

_HEADING_LEVELS = {
    LineKind.HEADING_1: 1,
    LineKind.HEADING_2: 2,
    LineKind.HEADING_3: 3,
}


def classify_line(line: str) -> LineKind:
    """Classify a raw line. The first matching rule wins."""
    if line.startswith(("- ", "* ")):
        return LineKind.UNORDERED_ITEM
    if _ORDERED_PREFIX.match(line):
        return LineKind.ORDERED_ITEM
    for kind, prefix in _PREFIXES.items():
        if line.startswith(prefix):
            return kind
    if not line.strip(SPACE_CHARS):
        return LineKind.EMPTY
    return LineKind.PARAGRAPH


@dataclass
class ListAccumulator:
    """The list currently being buffered."""

    ordered: bool
    line: int
    items: List[ListItem] = field(default_factory=list)

    def to_block(self) -> ListBlock:
        return ListBlock(line=self.line, ordered=self.ordered, items=list(self.items))


class MarkdownRenderer:
    """Renders note text into blocks.

    ``safe`` escapes user text and filters link schemes before markup is
    generated. The default keeps the legacy behavior where inline markup is
    produced from unescaped text.
    """

    def __init__(self, safe: bool = False):
        self.safe = safe

    def render(self, text: str) -> List[Block]:
        blocks: List[Block] = []
        acc: Optional[ListAccumulator] = None

        for index, line in enumerate(text.split("\n")):
            acc = self.step(acc, blocks, index, line)

        self.flush(acc, blocks)
        return blocks

    def step(
        self,
        acc: Optional[ListAccumulator],
        blocks: List[Block],
        index: int,
        line: str,
    ) -> Optional[ListAccumulator]:
        """Handle one line and return the accumulator for the next one."""
        markup = substitute(line, safe=self.safe)
        kind = classify_line(line)

        if kind in (LineKind.UNORDERED_ITEM, LineKind.ORDERED_ITEM):
            ordered = kind is LineKind.ORDERED_ITEM
            if acc is None or acc.ordered != ordered:
                self.flush(acc, blocks)
                acc = ListAccumulator(ordered=ordered, line=index)

            if ordered:
                content = self._inline(
                    index,
                    _ORDERED_PREFIX.sub("", line, count=1),
                    _ORDERED_PREFIX.sub("", markup, count=1),
                )
            else:
                content = self._inline(index, line[2:], self._strip_prefix(markup, line[:2]))
            acc.items.append(ListItem(**content))
            return acc

        self.flush(acc, blocks)

        if kind in _HEADING_LEVELS:
            prefix = _PREFIXES[kind]
            content = self._inline(index, line[len(prefix):], self._strip_prefix(markup, prefix))
            blocks.append(Heading(level=_HEADING_LEVELS[kind], **content))
        elif kind is LineKind.QUOTE:
            prefix = _PREFIXES[kind]
            content = self._inline(index, line[len(prefix):], self._strip_prefix(markup, prefix))
            blocks.append(Quote(**content))
        elif kind is LineKind.EMPTY:
            blocks.append(LineBreak(line=index))
        else:
            blocks.append(Paragraph(**self._inline(index, line, markup)))

        return None

    def flush(self, acc: Optional[ListAccumulator], blocks: List[Block]) -> None:
        """Emit the open list, if there is one."""
        if acc is not None and acc.items:
            blocks.append(acc.to_block())

    def _strip_prefix(self, markup: str, prefix: str) -> str:
        # Prefixes are measured on the substituted text, which is escaped in safe mode
        width = len(html.escape(prefix)) if self.safe else len(prefix)
        return markup[width:]

    def _inline(self, index: int, raw: str, markup: str) -> Dict[str, Any]:
        return {
            "line": index,
            "html": markup,
            "text": strip_formatting(raw),
            "spans": tokenize(raw, safe=self.safe),
        }


def render(text: str, *, safe: bool = False) -> List[Block]:
    """Render note text into an ordered list of blocks."""
    return MarkdownRenderer(safe=safe).render(text)
