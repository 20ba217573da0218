"""Repository contracts"""

from .interfaces import IStorageClient, IJobRepository
__all__ = ["IStorageClient", "IJobRepository"]
