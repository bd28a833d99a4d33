from __future__ import annotations

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from ..errors import AppError
from ..logs import LogContext
from ..services.job_svc import create_job, list_jobs, get_job, update_job, remove_job

router = APIRouter()


class JobNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)  # fraction of the company, 0..1
    companyHandle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(BaseModel):
    # id and companyHandle are fixed once a job exists
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)


@router.post("/jobs", status_code=201)
def api_job_create(body: JobNew):
    log = LogContext("CREATE_JOB")
    payload = body.model_dump()
    log.set_payload(payload)
    try:
        job = create_job(payload, log)
        log.write("OK")
        return {"job": job}
    except AppError as e:
        log.write("ERROR", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")


@router.get("/jobs")
def api_job_list(
    title: Optional[str] = None,
    min_salary: Optional[int] = Query(None, ge=0, alias="minSalary"),
    has_equity: Optional[str] = Query(None, alias="hasEquity"),
):
    jobs = list_jobs(title=title, min_salary=min_salary, has_equity=has_equity)
    return {"jobs": jobs}


@router.get("/jobs/{job_id}")
def api_job_get(job_id: int):
    try:
        return {"job": get_job(job_id)}
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/jobs/{job_id}")
def api_job_update(job_id: int, body: JobUpdate):
    log = LogContext("UPDATE_JOB")
    # unset fields stay untouched; explicit nulls are written
    data = body.model_dump(exclude_unset=True)
    log.set_payload(data)
    try:
        job = update_job(job_id, data, log)
        log.write("OK")
        return {"job": job}
    except AppError as e:
        log.write("ERROR", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")


@router.delete("/jobs/{job_id}")
def api_job_delete(job_id: int):
    log = LogContext("DELETE_JOB")
    try:
        remove_job(job_id, log)
        log.write("OK")
        return {"deleted": job_id}
    except AppError as e:
        log.write("ERROR", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")
