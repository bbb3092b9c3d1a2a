"""Quote-aware extraction of inline JSON literals that follow a ``key:`` marker."""

from __future__ import annotations

from jobradar.frontmatter.types import Span

_CLOSERS = {"[": "]", "{": "}"}
_QUOTES = frozenset({'"', "'"})


def find_structured_opener(text: str, key: str) -> int | None:
    """Return the index of the ``[`` or ``{`` that starts the value of ``key``.

    Only the first occurrence of ``"<key>:"`` is considered. ``None`` means the
    key is absent or its value does not start with a bracket.
    """
    marker = f"{key}:"
    key_idx = text.find(marker)
    if key_idx == -1:
        return None
    idx = key_idx + len(marker)
    length = len(text)
    while idx < length and text[idx].isspace():
        idx += 1
    if idx >= length or text[idx] not in _CLOSERS:
        return None
    return idx


def locate_balanced(text: str, key: str) -> Span | None:
    """Locate the balanced array/object literal following ``key:``.

    Depth is tracked for the opener's bracket family only, and brackets inside
    single- or double-quoted strings are ignored. Returns ``None`` when the key
    is missing, the value is not bracketed, or the literal never closes.
    """
    start = find_structured_opener(text, key)
    if start is None:
        return None

    opener = text[start]
    closer = _CLOSERS[opener]
    depth = 0
    quote: str | None = None
    escaped = False

    for idx in range(start, len(text)):
        ch = text[idx]
        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue
        if ch in _QUOTES:
            quote = ch
        elif ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return Span(start, idx + 1)
    return None


def extract_balanced(text: str, key: str) -> str | None:
    span = locate_balanced(text, key)
    if span is None:
        return None
    return span.slice(text)
