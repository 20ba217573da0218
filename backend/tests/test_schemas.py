"""
Tests for job input schemas and the Job entity
"""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from jobly.application.schemas import JobCreate, JobUpdate
from jobly.domain.entities import Job


class TestJobCreate:
    """Test creation payload validation"""

    def test_accepts_camel_case_company_handle(self):
        job = JobCreate.model_validate({
            "title": "Chef",
            "salary": 50000,
            "equity": "0.1",
            "companyHandle": "bistro",
        })

        assert job.company_handle == "bistro"
        assert job.equity == Decimal("0.1")

    def test_nullable_fields_must_still_be_present(self):
        with pytest.raises(ValidationError):
            JobCreate.model_validate({"title": "Chef", "company_handle": "bistro"})

    @pytest.mark.parametrize("equity", ["-0.1", "1.01"])
    def test_equity_bounds(self, equity):
        with pytest.raises(ValidationError):
            JobCreate(title="Chef", salary=None, equity=equity, company_handle="bistro")

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            JobCreate(
                title="Chef", salary=None, equity=None, company_handle="bistro", id=3
            )


class TestJobUpdate:
    """Test partial update payload"""

    def test_patch_contains_only_supplied_fields(self):
        assert JobUpdate(salary=0).to_patch() == {"salary": 0}

    def test_explicit_null_is_present(self):
        assert JobUpdate(equity=None).to_patch() == {"equity": None}

    def test_empty(self):
        assert JobUpdate().to_patch() == {}

    def test_title_cannot_be_null(self):
        with pytest.raises(ValidationError):
            JobUpdate(title=None)

    def test_company_handle_not_updatable(self):
        with pytest.raises(ValidationError):
            JobUpdate.model_validate({"company_handle": "other"})


class TestJobEntity:
    """Test Job entity"""

    def test_from_row_normalizes_float_equity(self):
        job = Job.from_row({
            "title": "Chef", "salary": 1, "equity": 0.25, "company_handle": "bistro"
        })

        assert job.equity == Decimal("0.25")
        assert isinstance(job.equity, Decimal)

    def test_from_row_keeps_null_equity(self):
        job = Job.from_row({
            "title": "Chef", "salary": None, "equity": None, "company_handle": "bistro"
        })

        assert job.equity is None
        assert job.to_dict() == {
            "title": "Chef", "salary": None, "equity": None, "company_handle": "bistro"
        }
