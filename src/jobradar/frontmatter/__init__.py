from .decoder import decode_frontmatter, parse_document
from .locator import locate_frontmatter
from .scanner import extract_balanced, find_structured_opener, locate_balanced
from .types import (
    STRUCTURED_KEYS,
    DecodeError,
    FrontmatterParseResult,
    Span,
)

__all__ = [
    "STRUCTURED_KEYS",
    "DecodeError",
    "FrontmatterParseResult",
    "Span",
    "decode_frontmatter",
    "extract_balanced",
    "find_structured_opener",
    "locate_balanced",
    "locate_frontmatter",
    "parse_document",
]
