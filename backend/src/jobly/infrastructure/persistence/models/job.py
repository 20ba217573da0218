"""
Job ORM Model
SQLAlchemy model for job postings
"""
from sqlalchemy import Column, String, Integer, Numeric, CheckConstraint

from jobly.core.database import Base


class JobModel(Base):
    """Job posting table ORM model"""

    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity_max_one"),
    )

    # Title is the natural key
    title = Column(String(255), primary_key=True)

    salary = Column(Integer, nullable=True)
    equity = Column(Numeric, nullable=True)

    # References companies.handle; the companies table is owned elsewhere
    company_handle = Column(String(25), nullable=False, index=True)

    def __repr__(self):
        return f"<JobModel {self.title} at {self.company_handle}>"
