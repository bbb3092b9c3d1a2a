"""Map single-job extraction results onto ``Job`` records."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from jobradar.errors import JobMappingError
from jobradar.jobs.types import Job, JobType

_LOCATION_TO_REGION: dict[str, str] = {
    "bolzano": "bolzano",
    "bozen": "bolzano",
    "merano": "merano",
    "meran": "merano",
    "bressanone": "bressanone",
    "brixen": "bressanone",
    "brunico": "brunico",
    "bruneck": "brunico",
    "vipiteno": "vipiteno",
    "sterzing": "vipiteno",
}

# Checked in declaration order; the first keyword hit wins.
_JOB_TYPE_KEYWORDS: dict[JobType, tuple[str, ...]] = {
    JobType.DISHWASHER: ("dishwasher", "lavapiatti", "spül", "spüler", "spülerin"),
    JobType.KITCHEN: (
        "kitchen",
        "cucina",
        "koch",
        "chef",
        "cook",
        "cuoco",
        "aiuto cuoco",
        "commis",
    ),
    JobType.HOUSEKEEPING: (
        "housekeeping",
        "pulizie",
        "reinigung",
        "hauswirtschaft",
        "cleaning",
    ),
    JobType.HELPER: ("helper", "aiuto", "helfer", "assistent", "assistente"),
    JobType.SERVICE: (
        "service",
        "servizio",
        "kellner",
        "waiter",
        "cameriere",
        "barista",
        "reception",
    ),
}

_TRUTHY = frozenset({"true", "yes", "1", "si", "ja"})
_NUMBER_PREFIX_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_REQUIRED_FIELDS = ("title", "company", "location", "phone", "email", "description")


def _clean(value: Any) -> str | None:
    if isinstance(value, str):
        return value.strip()
    return None


def infer_job_type(title: str | None, description: str | None) -> JobType | None:
    haystack = f"{title or ''} {description or ''}".lower()
    for job_type, keywords in _JOB_TYPE_KEYWORDS.items():
        if any(keyword in haystack for keyword in keywords):
            return job_type
    return None


def infer_location_region(location: str | None) -> str | None:
    if not location:
        return None
    normalized = location.strip().lower()
    if normalized in _LOCATION_TO_REGION:
        return _LOCATION_TO_REGION[normalized]
    for city, region in _LOCATION_TO_REGION.items():
        if city in normalized or normalized in city:
            return region
    return None


def to_string_list(value: Any) -> tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value if str(item).strip())
    if isinstance(value, str) and value.strip():
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return ()


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    if isinstance(value, (int, float)):
        return value != 0
    return False


def to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        match = _NUMBER_PREFIX_RE.match(value.strip())
        if match:
            return float(match.group(0))
    return None


def map_structured_data_to_job(data: Mapping[str, Any]) -> Job:
    """Validate ``data`` and build a ``Job``.

    Missing required fields, an unmappable location region and an
    undetectable job type are collected and raised together.
    """
    if not isinstance(data, Mapping):
        raise JobMappingError(["structured data must be an object"])

    problems: list[str] = []
    required: dict[str, str] = {}
    for name in _REQUIRED_FIELDS:
        value = _clean(data.get(name))
        if not value:
            problems.append(f"{name} is required")
        required[name] = value or ""

    location_region = _clean(data.get("locationRegion"))
    if not location_region:
        location_region = infer_location_region(required["location"])
        if not location_region:
            problems.append(
                f'locationRegion could not be derived from location "{required["location"]}"'
            )

    employment_type = _clean(data.get("employmentType"))
    if not employment_type:
        problems.append("employmentType is required")

    start_date = _clean(data.get("startDate"))
    if not start_date:
        problems.append("startDate is required")

    job_type = JobType.from_value(data.get("jobType"))
    if job_type is None:
        job_type = infer_job_type(required["title"], required["description"])
        if job_type is None:
            problems.append("jobType could not be derived from title/description")

    if problems:
        raise JobMappingError(problems)

    return Job(
        title=required["title"],
        company=required["company"],
        location=required["location"],
        location_region=location_region or "",
        employment_type=employment_type or "",
        start_date=start_date or "",
        job_type=job_type,
        phone=required["phone"],
        email=required["email"],
        description=required["description"],
        has_accommodation=to_bool(data.get("hasAccommodation")),
        has_meals=to_bool(data.get("hasMeals")),
        company_description=_clean(data.get("companyDescription")),
        company_website=_clean(data.get("companyWebsite")),
        company_address=_clean(data.get("companyAddress")),
        full_description=_clean(data.get("fullDescription")),
        contract_type=_clean(data.get("contractType")),
        experience_level=_clean(data.get("experienceLevel")),
        education=_clean(data.get("education")),
        contact_person=_clean(data.get("contactPerson")),
        contact_phone=_clean(data.get("contactPhone")),
        contact_email=_clean(data.get("contactEmail")),
        working_hours=_clean(data.get("workingHours")),
        application_deadline=_clean(data.get("applicationDeadline")),
        job_reference=_clean(data.get("jobReference")),
        salary=_clean(data.get("salary")),
        url=_clean(data.get("url")),
        requirements=to_string_list(data.get("requirements")),
        benefits=to_string_list(data.get("benefits")),
        languages=to_string_list(data.get("languages")),
        certifications=to_string_list(data.get("certifications")),
        tasks=to_string_list(data.get("tasks")),
        offers=to_string_list(data.get("offers")),
        salary_min=to_number(data.get("salaryMin")),
        salary_max=to_number(data.get("salaryMax")),
        number_of_positions=to_number(data.get("numberOfPositions")),
    )
