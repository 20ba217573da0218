"""
Repository Interfaces (Abstract Base Classes)
Define contracts for data access without implementation details
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Sequence, Union

from jobly.application.schemas import JobCreate, JobUpdate
from jobly.domain.entities import Job


class IStorageClient(ABC):
    """Storage service interface: query text plus ordered parameters in, rows out"""

    @abstractmethod
    async def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Execute a parameterized statement and return result rows"""
        pass


class IJobRepository(ABC):
    """Job repository interface"""

    @abstractmethod
    async def find_all(self) -> List[Job]:
        """Get all jobs ordered by title"""
        pass

    @abstractmethod
    async def get(self, title: str) -> Job:
        """Get job by title"""
        pass

    @abstractmethod
    async def create(self, data: Union[JobCreate, Mapping[str, Any]]) -> Job:
        """Create new job"""
        pass

    @abstractmethod
    async def update(self, title: str, patch: Union[JobUpdate, Mapping[str, Any]]) -> Job:
        """Partially update existing job"""
        pass

    @abstractmethod
    async def remove(self, title: str) -> None:
        """Delete job"""
        pass
