"""
Job Schemas
Pydantic schemas for job creation and partial updates
"""
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobCreate(BaseModel):
    """Create a job; all four fields must be present (salary and equity may be null)"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255, examples=["Conservation officer"])
    salary: Optional[int] = Field(..., ge=0, description="Annual salary")
    equity: Optional[Decimal] = Field(..., ge=0, le=1, description="Equity share between 0 and 1")
    company_handle: str = Field(
        ...,
        min_length=1,
        max_length=25,
        alias="companyHandle",
        examples=["anderson-arias-morrow"]
    )


class JobUpdate(BaseModel):
    """
    Partial update of a job.

    Only title, salary and equity are updatable. Presence is tracked
    explicitly: a field set to None or 0 is part of the patch, an omitted
    field is not.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError('title cannot be null')
        return v

    def to_patch(self) -> Dict[str, Any]:
        """Only the fields the caller actually supplied"""
        return self.model_dump(exclude_unset=True)
