"""Frontmatter data classes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Keys whose values the Secretary templates emit as inline JSON.
STRUCTURED_KEYS: tuple[str, ...] = (
    "chapters",
    "toc",
    "confidence",
    "provenance",
    "slides",
)

DELIMITER = "---"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open offsets of a balanced literal inside a text."""

    start: int
    end: int

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True, slots=True)
class DecodeError:
    """A structured-eligible key whose literal could not be decoded."""

    key: str
    message: str

    def __str__(self) -> str:
        return f"{self.key} is not valid JSON: {self.message}"


@dataclass(frozen=True, slots=True)
class FrontmatterParseResult:
    frontmatter: str | None
    meta: dict[str, Any] = field(default_factory=dict)
    errors: list[DecodeError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "frontmatter": self.frontmatter,
            "meta": dict(self.meta),
            "errors": [str(error) for error in self.errors],
        }
