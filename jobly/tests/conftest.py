import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "jobly_test.db"
    # Point jobly to this temp DB
    os.environ["JOBLY_DB_PATH"] = str(path)
    from jobly.logs import ensure_log_schema
    from jobly.services.company_svc import ensure_company_schema
    from jobly.services.job_svc import ensure_job_schema
    ensure_log_schema()
    ensure_company_schema()
    ensure_job_schema()
    return str(path)


@pytest.fixture()
def client(tmp_db_path):
    from jobly.api import app
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("JOBLY_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    conn = sqlite3.connect(tmp_db_path)
    try:
        for t in ("jobs", "companies", "operation_log"):
            conn.execute(f"DELETE FROM {t}")
        conn.commit()
    finally:
        conn.close()
    yield


@pytest.fixture()
def seeded(tmp_db_path):
    """Three companies c1..c3 with one job each; returns the job ids in order."""
    from jobly.db import get_conn
    with get_conn() as conn:
        for h in ("c1", "c2", "c3"):
            conn.execute(
                "INSERT INTO companies(handle, name, num_employees, description, logo_url) "
                "VALUES(?, ?, ?, ?, ?)",
                (h, h.upper(), int(h[1]), f"Desc{h[1]}", f"http://{h}.img"),
            )
        ids = []
        for title, salary, equity, handle in (
            ("j1", 100000, "0", "c1"),
            ("j2", 90000, "0", "c2"),
            ("j3", 80000, "0.3", "c3"),
        ):
            cur = conn.execute(
                "INSERT INTO jobs(title, salary, equity, company_handle) VALUES(?, ?, ?, ?)",
                (title, salary, equity, handle),
            )
            ids.append(int(cur.lastrowid))
        conn.commit()
    return ids
