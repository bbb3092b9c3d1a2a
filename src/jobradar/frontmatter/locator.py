"""Find the ``---`` delimited block in a Secretary markdown response."""

from __future__ import annotations

import re

_BOM = "\ufeff"
_BLOCK_RE = re.compile(
    r"^---[ \t]*\r?\n(?P<body>.*?)^---[ \t]*\r?$",
    re.MULTILINE | re.DOTALL,
)


def locate_frontmatter(document: str | None) -> str | None:
    """Return the inner text of the first frontmatter block, if any.

    The block does not need to open the document; responses occasionally
    carry a short preamble before the first delimiter.
    """
    if not document:
        return None
    text = document.lstrip(_BOM)
    match = _BLOCK_RE.search(text)
    if match is None:
        return None
    return match.group("body")
