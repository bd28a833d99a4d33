from __future__ import annotations

from sqlite3 import Connection
from typing import Any

from ..errors import BadRequestError, NotFoundError
from . import job_repo
from .sql import sql_for_partial_update

_COLUMNS = (
    'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

# API field -> storage column, for fields whose names differ
_JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS companies (
            handle TEXT PRIMARY KEY CHECK (handle = lower(handle)),
            name TEXT UNIQUE NOT NULL,
            num_employees INTEGER CHECK (
                num_employees IS NULL OR (typeof(num_employees) = 'integer' AND num_employees >= 0)
            ),
            description TEXT NOT NULL,
            logo_url TEXT
        )
        """
    )


def create(conn: Connection, data: dict) -> dict[str, Any]:
    """
    Insert a company from {handle, name, description, numEmployees, logoUrl}.

    Raises BadRequestError if the handle is already taken.
    """
    handle = data.get("handle")
    dup = conn.execute("SELECT handle FROM companies WHERE handle = ?", (handle,)).fetchone()
    if dup is not None:
        raise BadRequestError(f"Duplicate company: {handle}")

    rows = conn.execute(
        "INSERT INTO companies(handle, name, description, num_employees, logo_url) "
        f"VALUES(?, ?, ?, ?, ?) RETURNING {_COLUMNS}",
        (
            handle,
            data.get("name"),
            data.get("description"),
            data.get("numEmployees"),
            data.get("logoUrl"),
        ),
    ).fetchall()
    return dict(rows[0])


def find_all(conn: Connection) -> list[dict[str, Any]]:
    rows = conn.execute(f"SELECT {_COLUMNS} FROM companies ORDER BY name").fetchall()
    return [dict(r) for r in rows]


def get(conn: Connection, handle: str) -> dict[str, Any]:
    """Company with its jobs: {handle, name, ..., jobs: [{id, title, salary, equity}, ...]}"""
    row = conn.execute(f"SELECT {_COLUMNS} FROM companies WHERE handle = ?", (handle,)).fetchone()
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    company = dict(row)
    jobs = job_repo.find_by_company(conn, handle)
    for j in jobs:
        j.pop("companyHandle", None)
    company["jobs"] = jobs
    return company


def update(conn: Connection, handle: str, data: dict) -> dict[str, Any]:
    set_cols, values = sql_for_partial_update(data, _JS_TO_SQL)
    handle_var_idx = f"?{len(values) + 1}"

    sql = f"UPDATE companies SET {set_cols} WHERE handle = {handle_var_idx} RETURNING {_COLUMNS}"
    rows = conn.execute(sql, [*values, handle]).fetchall()
    if not rows:
        raise NotFoundError(f"No company: {handle}")
    return dict(rows[0])


def remove(conn: Connection, handle: str) -> None:
    rows = conn.execute("DELETE FROM companies WHERE handle = ? RETURNING handle", (handle,)).fetchall()
    if not rows:
        raise NotFoundError(f"No company: {handle}")
