from __future__ import annotations

from typing import Any

from ..db import get_conn
from ..logs import LogContext
from ..repository import job_repo


def ensure_job_schema():
    with get_conn() as conn:
        job_repo.ensure_schema(conn)
        conn.commit()


def create_job(data: dict, log: LogContext) -> dict[str, Any]:
    with get_conn() as conn:
        job = job_repo.create(conn, data)
        conn.commit()
    log.set_entity("JOB", str(job["id"]))
    log.set_after(job)
    return job


def list_jobs(
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool | str | None = None,
) -> list[dict[str, Any]]:
    with get_conn() as conn:
        return job_repo.find_all(conn, title=title, min_salary=min_salary, has_equity=has_equity)


def get_job(job_id: int) -> dict[str, Any]:
    with get_conn() as conn:
        return job_repo.get(conn, job_id)


def update_job(job_id: int, data: dict, log: LogContext) -> dict[str, Any]:
    """Apply a partial update; NotFoundError/BadRequestError propagate to the caller."""
    log.set_entity("JOB", str(job_id))
    with get_conn() as conn:
        job = job_repo.update(conn, job_id, data)
        conn.commit()
    log.set_after(job)
    return job


def remove_job(job_id: int, log: LogContext) -> None:
    log.set_entity("JOB", str(job_id))
    with get_conn() as conn:
        job_repo.remove(conn, job_id)
        conn.commit()
