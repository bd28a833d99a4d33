from __future__ import annotations

import logging
from sqlite3 import Connection
from typing import Any

from ..errors import NotFoundError
from .sql import sql_for_partial_update

logger = logging.getLogger(__name__)

_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS jobs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            salary INTEGER CHECK (salary IS NULL OR (typeof(salary) = 'integer' AND salary >= 0)),
            equity TEXT CHECK (
                equity IS NULL
                OR (
                    equity GLOB '[0-9]*'
                    AND equity NOT GLOB '*[^0-9.]*'
                    AND equity NOT GLOB '*.*.*'
                    AND CAST(equity AS REAL) <= 1.0
                )
            ),
            company_handle TEXT NOT NULL REFERENCES companies(handle) ON DELETE CASCADE
        )
        """
    )
    conn.execute("CREATE INDEX IF NOT EXISTS idx_jobs_company ON jobs(company_handle)")


def _to_job(row) -> dict[str, Any]:
    # equity stays the decimal text it was written as: "0", "0.3"
    return dict(row)


def create(conn: Connection, data: dict) -> dict[str, Any]:
    """
    Insert a job from {title, salary, equity, companyHandle}.

    Returns {id, title, salary, equity, companyHandle}. There is no duplicate
    check; a missing company surfaces as sqlite3.IntegrityError.
    """
    rows = conn.execute(
        "INSERT INTO jobs(title, salary, equity, company_handle) VALUES(?, ?, ?, ?) "
        f"RETURNING {_COLUMNS}",
        (data.get("title"), data.get("salary"), data.get("equity"), data.get("companyHandle")),
    ).fetchall()
    return _to_job(rows[0])


def find_all(
    conn: Connection,
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool | str | None = None,
) -> list[dict[str, Any]]:
    """
    List jobs, optionally filtered.

    title: case-insensitive substring of the title
    min_salary: salary >= min_salary
    has_equity: only "true" (or True) filters, keeping jobs with equity > 0

    Filters are ANDed and bound positionally in the order they are added.
    """
    values: list[Any] = []
    where: list[str] = []

    if title:
        values.append(f"%{title}%")
        where.append(f"casefold(title) LIKE casefold(?{len(values)})")

    if min_salary:
        values.append(min_salary)
        where.append(f"salary >= ?{len(values)}")

    if has_equity is True or has_equity == "true":
        values.append(0)
        where.append(f"CAST(equity AS REAL) > ?{len(values)}")

    sql = f"SELECT {_COLUMNS} FROM jobs"
    if where:
        sql += " WHERE " + " AND ".join(where)
    sql += " ORDER BY id"
    logger.debug("find_all sql=%s values=%s", sql, values)
    return [_to_job(r) for r in conn.execute(sql, values).fetchall()]


def get(conn: Connection, job_id: int) -> dict[str, Any]:
    row = conn.execute(f"SELECT {_COLUMNS} FROM jobs WHERE id = ?", (job_id,)).fetchone()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    return _to_job(row)


def find_by_company(conn: Connection, handle: str) -> list[dict[str, Any]]:
    rows = conn.execute(
        f"SELECT {_COLUMNS} FROM jobs WHERE company_handle = ? ORDER BY id",
        (handle,),
    ).fetchall()
    return [_to_job(r) for r in rows]


def update(conn: Connection, job_id: int, data: dict) -> dict[str, Any]:
    """
    Partial update: only the fields present in `data` change, None writes NULL.

    Field names are column names (title, salary, equity).
    Raises BadRequestError for empty data, NotFoundError for an unknown id.
    """
    set_cols, values = sql_for_partial_update(data, {})
    id_var_idx = f"?{len(values) + 1}"

    sql = f"UPDATE jobs SET {set_cols} WHERE id = {id_var_idx} RETURNING {_COLUMNS}"
    logger.debug("update sql=%s", sql)
    rows = conn.execute(sql, [*values, job_id]).fetchall()
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    return _to_job(rows[0])


def remove(conn: Connection, job_id: int) -> None:
    rows = conn.execute("DELETE FROM jobs WHERE id = ? RETURNING id", (job_id,)).fetchall()
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
