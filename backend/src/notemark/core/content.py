"""
Helpers for the rich-document JSON notes are stored as.

The editor saves a single paragraph holding the whole note body::

    {"type": "doc", "content": [
        {"type": "paragraph", "content": [{"type": "text", "text": "..."}]}
    ]}
"""

from typing import Any, Dict


def extract_note_text(content: Any) -> str:
    """Return the body text of a stored note, or "" if there is none."""
    if isinstance(content, str):
        return content

    node = content
    for _ in range(2):
        if not isinstance(node, dict):
            return ""
        children = node.get("content")
        if not isinstance(children, list) or not children:
            return ""
        node = children[0]

    if not isinstance(node, dict):
        return ""
    text = node.get("text")
    return text if isinstance(text, str) else ""


def build_note_document(text: str) -> Dict[str, Any]:
    """Wrap note text in the document shape the editor saves."""
    return {
        "type": "doc",
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}],
            }
        ],
    }
