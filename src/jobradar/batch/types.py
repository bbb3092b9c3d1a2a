"""Batch import data classes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

DEFAULT_JOB_NAME = "Untitled job"

# (field name, expected type) probes, evaluated in order.
NAME_CANDIDATES: tuple[tuple[str, type], ...] = (
    ("name", str),
    ("title", str),
    ("job", str),
)
URL_CANDIDATES: tuple[tuple[str, type], ...] = (
    ("url", str),
    ("link", str),
    ("href", str),
)
CONSUMED_FIELDS = frozenset(
    field_name for field_name, _ in NAME_CANDIDATES + URL_CANDIDATES
)

# Accepted wrapper fields, in priority order. "sessions" is the legacy alias.
WRAPPER_FIELDS: tuple[str, ...] = ("items", "jobs", "sessions")


@dataclass(frozen=True, slots=True)
class JobLink:
    """One entry of a job overview page."""

    name: str = DEFAULT_JOB_NAME
    url: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only snapshot of the leftover item fields.
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "url": self.url, "metadata": dict(self.metadata)}
