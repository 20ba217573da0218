"""Repository implementations"""

from .job import JobRepository
__all__ = ["JobRepository"]
