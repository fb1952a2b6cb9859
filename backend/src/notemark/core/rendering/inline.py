"""
Inline markdown handling: emphasis, code and links inside a single line.

Two independent views of the same syntax live here:

- ``substitute`` runs the ordered (pattern, template) pipeline and returns
  markup. Each rule is applied to the whole line before the next one runs,
  so later rules see the output of earlier ones. Nested or ambiguous markers
  (``***x***``) are resolved by that ordering, not by a grammar.
- ``tokenize`` scans the raw text once and returns typed spans of plain text,
  leaving markup decisions to the caller.
"""

import html
import re
from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, List, Union
from urllib.parse import urlparse

from .blocks import InlineSpan, SpanKind

SAFE_LINK_SCHEMES = frozenset(("", "http", "https", "mailto"))

CODE_CLASS = "bg-muted px-1 rounded"
LINK_CLASS = "text-blue-600 underline"

# Any character except a line terminator. Markers never pair across \r or
# the Unicode line and paragraph separators.
ANY_CHAR = r"[^\n\r\u2028\u2029]"

# Whitespace as the editor trims it. Unlike str.isspace this includes the
# byte order mark and leaves out the \x1c-\x1f separators and \x85.
SPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
SPACE = f"[{re.escape(SPACE_CHARS)}]"

_SEGMENT = re.compile(ANY_CHAR + "+")


@dataclass(frozen=True)
class InlineRule:
    """A named pattern and the markup template it is replaced with."""

    name: str
    kind: SpanKind
    pattern: re.Pattern
    template: str


INLINE_RULES = (
    InlineRule("bold", SpanKind.STRONG, re.compile(rf"\*\*({ANY_CHAR}*?)\*\*"), r"<strong>\1</strong>"),
    InlineRule("italic", SpanKind.EMPHASIS, re.compile(rf"\*({ANY_CHAR}*?)\*"), r"<em>\1</em>"),
    InlineRule("underline", SpanKind.UNDERLINE, re.compile(rf"__({ANY_CHAR}*?)__"), r"<u>\1</u>"),
    InlineRule(
        "strikethrough",
        SpanKind.STRIKETHROUGH,
        re.compile(rf"~~({ANY_CHAR}*?)~~"),
        r"<del>\1</del>",
    ),
    InlineRule(
        "code",
        SpanKind.CODE,
        re.compile(rf"`({ANY_CHAR}*?)`"),
        rf'<code class="{CODE_CLASS}">\1</code>',
    ),
    InlineRule(
        "link",
        SpanKind.LINK,
        re.compile(rf"\[({ANY_CHAR}*?)\]\(({ANY_CHAR}*?)\)"),
        rf'<a href="\2" class="{LINK_CLASS}">\1</a>',
    ),
)

# Characters that can open one of the rules above
_OPENERS = frozenset("*_~`[")

_URL_NOISE = re.compile(r"[\x00-\x20\x7f]")

Replacement = Union[str, Callable[[re.Match], str]]


class LinkOpeners:
    """Answers "can a link start at this ``[``?" without rescanning the line.

    A link label runs to the first ``](`` after its ``[`` and the target to
    the first ``)`` after that, all inside one line segment. So a ``[``
    opens a link exactly when it sits before the last ``](`` of its segment
    that still has a ``)`` after it.
    """

    def __init__(self, text: str):
        self._starts: List[int] = []
        self._limits: List[int] = []
        for segment in _SEGMENT.finditer(text):
            start, end = segment.span()
            close = text.rfind(")", start, end)
            limit = text.rfind("](", start, close) if close >= 0 else -1
            if limit > start:
                self._starts.append(start)
                self._limits.append(limit)

    def __contains__(self, pos: int) -> bool:
        index = bisect_right(self._starts, pos) - 1
        return index >= 0 and pos < self._limits[index]


def sub_links(pattern: re.Pattern, replacement: Replacement, text: str) -> str:
    """``pattern.sub`` for link patterns, only trying ``[`` that can open a link.

    ``pattern`` must match ``[label](target)`` with the label and target
    ending at the first possible closer, as the link rule does.
    """
    openers = LinkOpeners(text)
    parts: List[str] = []
    last = search = 0

    while True:
        start = text.find("[", search)
        if start < 0:
            break
        match = pattern.match(text, start) if start in openers else None
        if match is None:
            search = start + 1
            continue
        parts.append(text[last:start])
        parts.append(replacement(match) if callable(replacement) else match.expand(replacement))
        last = search = match.end()

    parts.append(text[last:])
    return "".join(parts)


def _apply(rule: InlineRule, replacement: Replacement, text: str) -> str:
    if rule.kind is SpanKind.LINK:
        return sub_links(rule.pattern, replacement, text)
    return rule.pattern.sub(replacement, text)


def safe_href(url: str) -> str:
    """Return ``url`` if its scheme is allowed for display, else ``"#"``."""
    candidate = _URL_NOISE.sub("", url)
    try:
        scheme = urlparse(candidate).scheme.lower()
    except ValueError:
        return "#"
    return url if scheme in SAFE_LINK_SCHEMES else "#"


def _escaped_link(match: re.Match) -> str:
    # The line was escaped already, so check the href as the browser will read it
    href = match.group(2)
    if safe_href(html.unescape(href)) == "#":
        href = "#"
    return f'<a href="{href}" class="{LINK_CLASS}">{match.group(1)}</a>'


def substitute(text: str, *, safe: bool = False) -> str:
    """Run the inline pipeline over one line.

    With ``safe`` the line is HTML-escaped first and link targets outside
    SAFE_LINK_SCHEMES are replaced by ``#``. Without it the generated markup
    is trusted and user text passes through unescaped.
    """
    if safe:
        text = html.escape(text)

    for rule in INLINE_RULES:
        replacement: Replacement = rule.template
        if safe and rule.kind is SpanKind.LINK:
            replacement = _escaped_link
        text = _apply(rule, replacement, text)

    return text


def strip_formatting(text: str) -> str:
    """Remove inline markers, keeping inner text and link labels."""
    for rule in INLINE_RULES:
        text = _apply(rule, r"\1", text)
    return text


def tokenize(text: str, *, safe: bool = False) -> List[InlineSpan]:
    """Split raw line content into typed spans.

    At each position the rules are tried in pipeline order and the first
    one that matches there wins. Span text has nested markers stripped.
    Empty emphasis runs (``****``) are dropped. With ``safe`` link targets
    go through ``safe_href``.
    """
    spans: List[InlineSpan] = []
    plain: List[str] = []
    openers = LinkOpeners(text)
    pos = 0

    while pos < len(text):
        match = None
        if text[pos] in _OPENERS:
            for rule in INLINE_RULES:
                if rule.kind is SpanKind.LINK and pos not in openers:
                    continue
                match = rule.pattern.match(text, pos)
                if match:
                    break

        if match is None:
            plain.append(text[pos])
            pos += 1
            continue

        if plain:
            spans.append(InlineSpan(kind=SpanKind.TEXT, text="".join(plain)))
            plain = []

        inner = strip_formatting(match.group(1))
        if rule.kind is SpanKind.LINK:
            href = safe_href(match.group(2)) if safe else match.group(2)
            spans.append(InlineSpan(kind=SpanKind.LINK, text=inner, href=href))
        elif rule.kind is SpanKind.CODE:
            # code content is literal
            if match.group(1):
                spans.append(InlineSpan(kind=SpanKind.CODE, text=match.group(1)))
        elif inner:
            spans.append(InlineSpan(kind=rule.kind, text=inner))
        pos = match.end()

    if plain:
        spans.append(InlineSpan(kind=SpanKind.TEXT, text="".join(plain)))

    return spans
