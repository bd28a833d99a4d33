from __future__ import annotations

from typing import Any

from ..db import get_conn
from ..logs import LogContext
from ..repository import company_repo


def ensure_company_schema():
    with get_conn() as conn:
        company_repo.ensure_schema(conn)
        conn.commit()


def create_company(data: dict, log: LogContext) -> dict[str, Any]:
    log.set_entity("COMPANY", str(data.get("handle")))
    with get_conn() as conn:
        company = company_repo.create(conn, data)
        conn.commit()
    log.set_after(company)
    return company


def list_companies() -> list[dict[str, Any]]:
    with get_conn() as conn:
        return company_repo.find_all(conn)


def get_company(handle: str) -> dict[str, Any]:
    with get_conn() as conn:
        return company_repo.get(conn, handle)


def update_company(handle: str, data: dict, log: LogContext) -> dict[str, Any]:
    log.set_entity("COMPANY", handle)
    with get_conn() as conn:
        company = company_repo.update(conn, handle, data)
        conn.commit()
    log.set_after(company)
    return company


def remove_company(handle: str, log: LogContext) -> None:
    """Delete a company; its jobs go with it (ON DELETE CASCADE)."""
    log.set_entity("COMPANY", handle)
    with get_conn() as conn:
        company_repo.remove(conn, handle)
        conn.commit()
