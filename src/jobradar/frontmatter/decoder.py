"""Decode Secretary frontmatter into raw scalars plus inline JSON values."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from jobradar.frontmatter.locator import locate_frontmatter
from jobradar.frontmatter.scanner import find_structured_opener, locate_balanced
from jobradar.frontmatter.types import (
    DELIMITER,
    STRUCTURED_KEYS,
    DecodeError,
    FrontmatterParseResult,
)

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _parse_scalar_lines(block: str) -> dict[str, Any]:
    meta: dict[str, Any] = {}
    for line in _LINE_SPLIT_RE.split(block):
        stripped = line.strip()
        if not stripped or stripped == DELIMITER:
            continue
        idx = stripped.find(":")
        if idx <= 0:
            continue
        key = stripped[:idx].strip()
        # Only the first colon splits, so "starts: 09:30" keeps "09:30".
        meta[key] = stripped[idx + 1 :].strip()
    return meta


def _decode_structured(
    block: str, key: str, meta: dict[str, Any]
) -> DecodeError | None:
    span = locate_balanced(block, key)
    if span is None:
        opener_idx = find_structured_opener(block, key)
        if opener_idx is None:
            return None
        return DecodeError(key, f"unterminated {block[opener_idx]} literal")

    raw = span.slice(block)
    try:
        meta[key] = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        return DecodeError(key, str(exc))
    return None


def decode_frontmatter(
    block: str | None,
) -> tuple[dict[str, Any], list[DecodeError]]:
    """Decode a located frontmatter block.

    Every ``key: value`` line becomes a raw string entry. For the keys in
    ``STRUCTURED_KEYS`` the balanced JSON literal following the key anywhere in
    the block replaces the raw entry when it decodes. A literal that fails to
    decode keeps the raw entry and is reported as a ``DecodeError``; it never
    aborts the decode.
    """
    if not block:
        return {}, []

    meta = _parse_scalar_lines(block)
    errors: list[DecodeError] = []
    for key in STRUCTURED_KEYS:
        error = _decode_structured(block, key, meta)
        if error is not None:
            logger.warning("Frontmatter key %r kept as raw text: %s", key, error.message)
            errors.append(error)
    return meta, errors


def parse_document(document: str | None) -> FrontmatterParseResult:
    """Locate the frontmatter of ``document`` and decode it."""
    block = locate_frontmatter(document)
    if block is None:
        return FrontmatterParseResult(frontmatter=None)
    meta, errors = decode_frontmatter(block)
    return FrontmatterParseResult(frontmatter=block, meta=meta, errors=errors)
