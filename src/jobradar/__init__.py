"""jobradar public API."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from jobradar.batch import JobLink, normalize_batch
from jobradar.frontmatter import (
    DecodeError,
    FrontmatterParseResult,
    decode_frontmatter,
    locate_balanced,
    locate_frontmatter,
    parse_document,
)

try:
    __version__ = version("jobradar")
except PackageNotFoundError:  # pragma: no cover - during source-only use
    __version__ = "unknown"

__all__ = [
    "DecodeError",
    "FrontmatterParseResult",
    "JobLink",
    "__version__",
    "decode_frontmatter",
    "locate_balanced",
    "locate_frontmatter",
    "normalize_batch",
    "parse_document",
]
