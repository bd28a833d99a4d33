"""
FastAPI app entry point aggregating per-resource routers under jobly/routes.
Run with `uvicorn jobly.api:app`.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .logs import ensure_log_schema, LogContext
from .services.company_svc import ensure_company_schema
from .services.job_svc import ensure_job_schema

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_log_schema()
    # companies first: jobs.company_handle references it
    try:
        ensure_company_schema()
        ensure_job_schema()
    except Exception as e:
        logger.exception("schema setup failed")
        LogContext("STARTUP").write("ERROR", f"ensure_schema_failed: {e}")
        raise
    yield


app = FastAPI(title="jobly-api", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers (split by resource)
from .routes import base as base_routes
from .routes import companies as companies_routes
from .routes import jobs as jobs_routes
from .routes import logs as logs_routes

app.include_router(base_routes.router)
app.include_router(companies_routes.router)
app.include_router(jobs_routes.router)
app.include_router(logs_routes.router)
