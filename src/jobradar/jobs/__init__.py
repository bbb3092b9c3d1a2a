from .mapper import map_structured_data_to_job
from .types import Job, JobType

__all__ = ["Job", "JobType", "map_structured_data_to_job"]
