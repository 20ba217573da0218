"""Domain Entities - Core business objects"""

from .job import Job
__all__ = ["Job"]
