"""
SQL Helpers
Builds the SET clause for partial updates
"""
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional

from jobly.core.exceptions import BadRequestException


class PartialUpdate(NamedTuple):
    """SET clause with $n placeholders and the values they bind, in order"""

    set_cols: str
    values: List[Any]


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def sql_for_partial_update(
    data: Mapping[str, Any],
    column_names: Mapping[str, str],
    allowed: Optional[Iterable[str]] = None,
) -> PartialUpdate:
    """
    Turn a mapping of changed fields into a parameterized SET clause.

    Args:
        data: field -> new value, only the fields being changed. Iteration
              order decides both column order and placeholder numbering.
        column_names: field -> column for fields whose storage name differs,
              e.g. {"firstName": "first_name"}. Other fields are used verbatim.
        allowed: optional allow-list of field names.

    Returns:
        PartialUpdate, e.g. for {"firstName": "Aliya", "age": 32}:
            set_cols = '"first_name"=$1, "age"=$2'
            values = ["Aliya", 32]

    Raises:
        BadRequestException: data is empty, or holds a field outside `allowed`.
    """
    keys = list(data)
    if not keys:
        raise BadRequestException("No data")

    if allowed is not None:
        permitted = set(allowed)
        rejected = [key for key in keys if key not in permitted]
        if rejected:
            raise BadRequestException(f"Cannot update field(s): {', '.join(rejected)}")

    cols = [
        f"{quote_identifier(column_names.get(key, key))}=${idx}"
        for idx, key in enumerate(keys, start=1)
    ]

    return PartialUpdate(", ".join(cols), [data[key] for key in keys])
