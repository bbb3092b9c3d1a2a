"""Normalize batch job lists returned by the list extraction template."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from jobradar.batch.types import (
    CONSUMED_FIELDS,
    DEFAULT_JOB_NAME,
    NAME_CANDIDATES,
    URL_CANDIDATES,
    WRAPPER_FIELDS,
    JobLink,
)
from jobradar.errors import MalformedBatchShapeError


def _is_item_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _first_typed(
    item: Mapping[str, Any], candidates: tuple[tuple[str, type], ...], default: str
) -> str:
    for field_name, expected in candidates:
        value = item.get(field_name)
        if isinstance(value, expected):
            return value
    return default


def map_item_to_job_link(item: Any) -> JobLink:
    if not isinstance(item, Mapping):
        return JobLink(name=DEFAULT_JOB_NAME, url="", metadata={})

    name = _first_typed(item, NAME_CANDIDATES, DEFAULT_JOB_NAME)
    url = _first_typed(item, URL_CANDIDATES, "")
    metadata = {
        key: value for key, value in item.items() if key not in CONSUMED_FIELDS
    }
    return JobLink(name=name, url=url, metadata=metadata)


def _resolve_items(value: Any) -> Sequence[Any]:
    if _is_item_sequence(value):
        return value
    if isinstance(value, Mapping):
        for wrapper in WRAPPER_FIELDS:
            candidate = value.get(wrapper)
            if _is_item_sequence(candidate):
                return candidate
    raise MalformedBatchShapeError(
        "No valid job list found. Expected a list or an object with "
        "items/jobs/sessions.",
        hint="Check that the list extraction template returns structured_data as a list.",
    )


def normalize_batch(value: Any) -> list[JobLink]:
    """Turn a decoded batch payload into one ``JobLink`` per item.

    Accepted shapes, in order: a list, or an object holding the list under
    ``items``, ``jobs`` or ``sessions``. Items that are not objects become
    placeholder links, so the result always has as many entries as the input.

    Raises:
        MalformedBatchShapeError: if ``value`` matches none of the shapes.
    """
    return [map_item_to_job_link(item) for item in _resolve_items(value)]
