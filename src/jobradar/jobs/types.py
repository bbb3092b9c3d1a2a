"""Job record produced by the single-job import."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any


class JobType(str, Enum):
    DISHWASHER = "dishwasher"
    KITCHEN = "kitchen"
    HOUSEKEEPING = "housekeeping"
    HELPER = "helper"
    SERVICE = "service"

    @classmethod
    def from_value(cls, value: object) -> JobType | None:
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        for item in cls:
            if item.value == normalized:
                return item
        return None


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass(frozen=True, slots=True)
class Job:
    title: str
    company: str
    location: str
    location_region: str
    employment_type: str
    start_date: str
    job_type: JobType
    phone: str
    email: str
    description: str

    has_accommodation: bool = False
    has_meals: bool = False

    company_description: str | None = None
    company_website: str | None = None
    company_address: str | None = None
    full_description: str | None = None
    contract_type: str | None = None
    experience_level: str | None = None
    education: str | None = None
    contact_person: str | None = None
    contact_phone: str | None = None
    contact_email: str | None = None
    working_hours: str | None = None
    application_deadline: str | None = None
    job_reference: str | None = None
    salary: str | None = None
    url: str | None = None

    requirements: tuple[str, ...] = field(default_factory=tuple)
    benefits: tuple[str, ...] = field(default_factory=tuple)
    languages: tuple[str, ...] = field(default_factory=tuple)
    certifications: tuple[str, ...] = field(default_factory=tuple)
    tasks: tuple[str, ...] = field(default_factory=tuple)
    offers: tuple[str, ...] = field(default_factory=tuple)

    salary_min: float | None = None
    salary_max: float | None = None
    number_of_positions: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Document shape with camelCase keys; unset values and empty lists are omitted."""
        data: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            if isinstance(value, tuple):
                if not value:
                    continue
                value = list(value)
            elif isinstance(value, JobType):
                value = value.value
            data[_camel(item.name)] = value
        return data
