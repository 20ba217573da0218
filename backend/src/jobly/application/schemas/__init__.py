"""Input schemas"""

from .job import JobCreate, JobUpdate
__all__ = ["JobCreate", "JobUpdate"]
