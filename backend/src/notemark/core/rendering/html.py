"""Map rendered blocks to HTML for the preview pane and public viewer."""

import html
from typing import Iterable, Optional

from .blocks import Block, Heading, LineBreak, ListBlock, Paragraph, Quote

HEADING_CLASSES = {
    1: "text-2xl font-bold my-2",
    2: "text-xl font-bold my-2",
    3: "text-lg font-bold my-2",
}
QUOTE_CLASS = "border-l-4 border-gray-300 pl-4 my-2 italic"
PARAGRAPH_CLASS = "my-1"
UNORDERED_LIST_CLASS = "my-2 list-disc list-inside"
ORDERED_LIST_CLASS = "my-2 list-decimal list-inside"


def block_to_html(block: Block) -> str:
    """Render one block. Inline ``html`` is embedded as is."""
    if isinstance(block, Heading):
        tag = f"h{block.level}"
        return f'<{tag} class="{HEADING_CLASSES[block.level]}">{block.html}</{tag}>'
    if isinstance(block, Quote):
        return f'<blockquote class="{QUOTE_CLASS}">{block.html}</blockquote>'
    if isinstance(block, Paragraph):
        return f'<p class="{PARAGRAPH_CLASS}">{block.html}</p>'
    if isinstance(block, LineBreak):
        return "<br />"
    if isinstance(block, ListBlock):
        tag, css = ("ol", ORDERED_LIST_CLASS) if block.ordered else ("ul", UNORDERED_LIST_CLASS)
        items = "".join(f"<li>{item.html}</li>" for item in block.items)
        return f'<{tag} class="{css}">{items}</{tag}>'
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def blocks_to_html(blocks: Iterable[Block]) -> str:
    return "\n".join(block_to_html(block) for block in blocks)


def render_page(title: Optional[str], blocks: Iterable[Block], untitled: str = "Untitled") -> str:
    """Build the standalone public viewer page for a note."""
    heading = html.escape(title or untitled)
    body = blocks_to_html(blocks)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8" />\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1" />\n'
        f"<title>{heading}</title>\n"
        "</head>\n"
        "<body>\n"
        '<div class="flex flex-col items-center min-h-screen bg-background p-4">\n'
        '<div class="w-full max-w-2xl bg-white rounded-lg shadow p-6 mt-8">\n'
        f'<h1 class="text-2xl font-bold mb-4">{heading}</h1>\n'
        f'<div class="prose prose-sm max-w-none">\n{body}\n</div>\n'
        "</div>\n"
        "</div>\n"
        "</body>\n"
        "</html>\n"
    )


def render_not_found_page() -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        '<head>\n<meta charset="utf-8" />\n<title>Note Not Found</title>\n</head>\n'
        "<body>\n"
        '<div class="flex flex-col items-center justify-center h-screen">\n'
        '<h1 class="text-2xl font-bold mb-4">Note Not Found</h1>\n'
        '<p class="text-muted-foreground">This share link is invalid or the note has been deleted.</p>\n'
        "</div>\n"
        "</body>\n"
        "</html>\n"
    )
