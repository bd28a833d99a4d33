from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ..errors import AppError
from ..logs import LogContext
from ..services.company_svc import (
    create_company,
    list_companies,
    get_company,
    update_company,
    remove_company,
)

router = APIRouter()


class CompanyNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    handle: str = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: str = Field(..., min_length=1)
    description: str
    numEmployees: Optional[int] = Field(None, ge=0)
    logoUrl: Optional[str] = None


class CompanyUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    numEmployees: Optional[int] = Field(None, ge=0)
    logoUrl: Optional[str] = None


@router.post("/companies", status_code=201)
def api_company_create(body: CompanyNew):
    log = LogContext("CREATE_COMPANY")
    payload = body.model_dump()
    log.set_payload(payload)
    try:
        company = create_company(payload, log)
        log.write("OK")
        return {"company": company}
    except AppError as e:
        log.write("ERROR", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")


@router.get("/companies")
def api_company_list():
    return {"companies": list_companies()}


@router.get("/companies/{handle}")
def api_company_get(handle: str):
    try:
        return {"company": get_company(handle)}
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/companies/{handle}")
def api_company_update(handle: str, body: CompanyUpdate):
    log = LogContext("UPDATE_COMPANY")
    data = body.model_dump(exclude_unset=True)
    log.set_payload(data)
    try:
        company = update_company(handle, data, log)
        log.write("OK")
        return {"company": company}
    except AppError as e:
        log.write("ERROR", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")


@router.delete("/companies/{handle}")
def api_company_delete(handle: str):
    log = LogContext("DELETE_COMPANY")
    try:
        remove_company(handle, log)
        log.write("OK")
        return {"deleted": handle}
    except AppError as e:
        log.write("ERROR", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail="internal error")
