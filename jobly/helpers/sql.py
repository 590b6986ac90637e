"""
SQL-building helpers shared by the data-access classes
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from ..core.errors import BadRequestError


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    py_to_sql: Optional[Mapping[str, str]] = None,
) -> Tuple[str, Dict[str, Any]]:
    """
    Build the ``SET`` clause and bind values for a partial update.

    Only the keys present in ``data_to_update`` are set. Each key is mapped
    to its column through ``py_to_sql`` (falling back to the key itself),
    and each column gets a named bind parameter of the same name:

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        ('"first_name"=:first_name, "age"=:age', {'first_name': 'Aliya', 'age': 32})

    Keys must come from a validated schema; they are written into the SQL
    as identifiers. Values are always bound.

    Args:
        data_to_update: Field name to new value
        py_to_sql: Field name to SQL column name, for names that differ

    Returns:
        Tuple of (set clause, bind values keyed by column name)

    Raises:
        BadRequestError: If there is nothing to update
    """
    if not data_to_update:
        raise BadRequestError("No data")

    py_to_sql = py_to_sql or {}
    cols = []
    values: Dict[str, Any] = {}
    for key, value in data_to_update.items():
        column = py_to_sql.get(key, key)
        cols.append(f'"{column}"=:{column}')
        values[column] = value

    return ", ".join(cols), values
