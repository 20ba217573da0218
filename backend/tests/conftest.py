"""
Shared pytest fixtures

    storage    -- in-memory SQLite storage client with the jobs table created
    repository -- JobRepository bound to that storage
    job_data   -- a valid job creation payload
"""
import re
from decimal import Decimal
from typing import Any, Dict, List, Sequence

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from jobly.application.repositories.interfaces import IStorageClient
from jobly.core.database import Base
from jobly.infrastructure.persistence import models  # noqa: F401
from jobly.infrastructure.persistence.repositories import JobRepository


PLACEHOLDER = re.compile(r"\$(\d+)")


class SQLiteStorage(IStorageClient):
    """
    Storage double running the repository's SQL on in-memory SQLite.

    $n placeholders are rebound as :pn named parameters; every statement is
    recorded in `statements` as (sql, params).
    """

    def __init__(self):
        self.engine = create_engine(
            "sqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        Base.metadata.create_all(self.engine)
        self.statements: List[tuple] = []

    async def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        self.statements.append((sql, list(params)))
        bound = {
            f"p{idx}": str(value) if isinstance(value, Decimal) else value
            for idx, value in enumerate(params, start=1)
        }
        with self.engine.begin() as conn:
            result = conn.exec_driver_sql(PLACEHOLDER.sub(r":p\1", sql), bound)
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]


@pytest.fixture
def storage():
    storage = SQLiteStorage()
    yield storage
    storage.engine.dispose()


@pytest.fixture
def repository(storage):
    return JobRepository(storage)


@pytest.fixture
def job_data():
    return {
        "title": "Conservation officer",
        "salary": 110000,
        "equity": Decimal("0.5"),
        "company_handle": "anderson-arias-morrow",
    }
