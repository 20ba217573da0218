"""ORM Models Package"""

from .job import JobModel

__all__ = [
    "JobModel",
]
