"""
Rendered block and inline span types.

A render pass turns note text into an ordered list of blocks. Each block
carries three views of its inline content:

- ``html``: the markup produced by inline substitution (trusted for the
  mode it was rendered in, never escaped again by the view layer)
- ``text``: the same content with markdown markers removed
- ``spans``: a flat list of typed inline runs for clients that build
  their own markup
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SpanKind(str, Enum):
    """Kinds of inline runs."""

    TEXT = "text"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    LINK = "link"


class InlineSpan(BaseModel):
    """One inline run of plain text."""

    model_config = ConfigDict(frozen=True)

    kind: SpanKind
    text: str
    href: Optional[str] = None


class _InlineContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0, description="Source line index, used as a stable rendering key")
    html: str = ""
    text: str = ""
    spans: List[InlineSpan] = Field(default_factory=list)


class Heading(_InlineContent):
    kind: Literal["heading"] = "heading"
    level: Literal[1, 2, 3]


class Paragraph(_InlineContent):
    kind: Literal["paragraph"] = "paragraph"


class Quote(_InlineContent):
    kind: Literal["quote"] = "quote"


class ListItem(_InlineContent):
    """A single list entry."""


class LineBreak(BaseModel):
    """Marker for an empty source line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["line_break"] = "line_break"
    line: int = Field(ge=0)


class ListBlock(BaseModel):
    """A contiguous run of same-type list lines."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    line: int = Field(ge=0)
    ordered: bool
    items: List[ListItem]

    @property
    def item_html(self) -> List[str]:
        return [item.html for item in self.items]


Block = Annotated[
    Union[Heading, Paragraph, Quote, LineBreak, ListBlock],
    Field(discriminator="kind"),
]
