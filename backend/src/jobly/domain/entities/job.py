"""
Job Domain Entity
Immutable job posting business object
"""
from dataclasses import dataclass, asdict
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Job:
    """Job posting domain entity - immutable"""

    title: str
    salary: Optional[int]
    equity: Optional[Decimal]
    company_handle: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Job":
        """Build from a storage row; equity is normalized to Decimal"""
        equity = row["equity"]
        if equity is not None and not isinstance(equity, Decimal):
            equity = Decimal(str(equity))

        return cls(
            title=row["title"],
            salary=row["salary"],
            equity=equity,
            company_handle=row["company_handle"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
