from __future__ import annotations

from typing import Any, Mapping

from ..errors import BadRequestError


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
    marker: str = "?",
) -> tuple[str, list[Any]]:
    """
    Turn a partial-update mapping into the body of an UPDATE ... SET clause.

    data_to_update: field -> new value, e.g. {"numEmployees": 12, "name": "Acme"}
    js_to_sql: field -> storage column for fields whose names differ,
        e.g. {"numEmployees": "num_employees"}; unmapped fields are used as-is.
    marker: parameter prefix. SQLite numbers positional parameters as ?1,
        PostgreSQL as $1.

    Returns (set_cols, values):
        ('"num_employees"=?1, "name"=?2', [12, "Acme"])

    Raises BadRequestError when there is nothing to update.
    """
    keys = list(data_to_update.keys())
    if not keys:
        raise BadRequestError("No data")

    cols = [
        f'"{js_to_sql.get(col_name) or col_name}"={marker}{idx + 1}'
        for idx, col_name in enumerate(keys)
    ]
    return ", ".join(cols), list(data_to_update.values())
