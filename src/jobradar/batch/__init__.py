from .normalizer import map_item_to_job_link, normalize_batch
from .types import DEFAULT_JOB_NAME, WRAPPER_FIELDS, JobLink

__all__ = [
    "DEFAULT_JOB_NAME",
    "JobLink",
    "WRAPPER_FIELDS",
    "map_item_to_job_link",
    "normalize_batch",
]
