"""
Job Repository Implementation
CRUD over the jobs table through an injected storage client
"""
from typing import Any, Dict, List, Mapping, Optional, Union

from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from jobly.application.repositories.interfaces import IJobRepository, IStorageClient
from jobly.application.schemas import JobCreate, JobUpdate
from jobly.core.exceptions import BadRequestException, DuplicateResourceException, NotFoundException
from jobly.domain.entities import Job
from jobly.infrastructure.persistence.sql import sql_for_partial_update

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

JOB_COLUMNS = "title, salary, equity, company_handle"
UPDATABLE_FIELDS = ("title", "salary", "equity")


def is_unique_violation(error: IntegrityError) -> bool:
    """True when the driver reports a uniqueness conflict rather than another constraint"""
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code == UNIQUE_VIOLATION
    return "unique" in str(orig).lower()


class JobRepository(IJobRepository):
    """Job repository over an IStorageClient; every call round-trips to storage"""

    def __init__(self, storage: IStorageClient):
        self.storage = storage

    async def find_all(self) -> List[Job]:
        """Get all jobs ordered by title"""
        rows = await self._query(
            f"""
            SELECT {JOB_COLUMNS}
            FROM jobs
            ORDER BY title
            """
        )
        return [Job.from_row(row) for row in rows]

    async def get(self, title: str) -> Job:
        """Get job by title"""
        rows = await self._query(
            f"""
            SELECT {JOB_COLUMNS}
            FROM jobs
            WHERE title = $1
            """,
            [title],
        )
        if not rows:
            raise NotFoundException("Job", title)

        return Job.from_row(rows[0])

    async def create(self, data: Union[JobCreate, Mapping[str, Any]]) -> Job:
        """
        Create new job.

        The duplicate pre-check gives a clean error in the common case; the
        unique key on jobs.title still decides when two creators race.
        """
        job = data if isinstance(data, JobCreate) else self._validate(JobCreate, data)

        duplicate = await self._query(
            """
            SELECT title
            FROM jobs
            WHERE title = $1
            """,
            [job.title],
        )
        if duplicate:
            raise DuplicateResourceException("Job", "title", job.title)

        try:
            rows = await self._query(
                f"""
                INSERT INTO jobs ({JOB_COLUMNS})
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}
                """,
                [job.title, job.salary, job.equity, job.company_handle],
            )
        except IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateResourceException("Job", "title", job.title) from e
            raise

        logger.info(f"Created job {job.title!r} for company {job.company_handle!r}")
        return Job.from_row(rows[0])

    async def update(self, title: str, patch: Union[JobUpdate, Mapping[str, Any]]) -> Job:
        """
        Partially update a job: only the supplied fields change.

        Accepts title, salary and equity; raises BadRequestException for an
        empty patch or any other field, NotFoundException for an unknown title.
        """
        if isinstance(patch, JobUpdate):
            changes = patch.to_patch()
        else:
            changes = self._validate_patch(patch)

        set_cols, values = sql_for_partial_update(changes, {}, allowed=UPDATABLE_FIELDS)
        title_idx = f"${len(values) + 1}"

        try:
            rows = await self._query(
                f"""
                UPDATE jobs
                SET {set_cols}
                WHERE title = {title_idx}
                RETURNING {JOB_COLUMNS}
                """,
                [*values, title],
            )
        except IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateResourceException("Job", "title", changes.get("title", title)) from e
            raise

        if not rows:
            raise NotFoundException("Job", title)

        logger.info(f"Updated job {title!r}: {', '.join(changes)}")
        return Job.from_row(rows[0])

    async def remove(self, title: str) -> None:
        """Delete job"""
        rows = await self._query(
            """
            DELETE
            FROM jobs
            WHERE title = $1
            RETURNING title
            """,
            [title],
        )
        if not rows:
            raise NotFoundException("Job", title)

        logger.info(f"Removed job {title!r}")

    async def _query(self, sql: str, params: Optional[List[Any]] = None) -> List[Dict[str, Any]]:
        try:
            return await self.storage.query(sql, params or [])
        except SQLAlchemyError as e:
            logger.error(f"Job query failed: {str(e)}")
            raise

    @staticmethod
    def _validate(schema, data: Mapping[str, Any]):
        try:
            return schema.model_validate(dict(data))
        except ValidationError as e:
            raise BadRequestException(str(e)) from e

    def _validate_patch(self, patch: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate values through JobUpdate while keeping the caller's key order"""
        if not patch:
            return {}
        rejected = [key for key in patch if key not in UPDATABLE_FIELDS]
        if rejected:
            raise BadRequestException(f"Cannot update field(s): {', '.join(rejected)}")

        validated = self._validate(JobUpdate, patch).to_patch()
        return {key: validated[key] for key in patch}
