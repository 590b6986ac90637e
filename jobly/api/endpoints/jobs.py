"""
API endpoints for job management
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlmodel import Session

from ...core.errors import BadRequestError
from ...core.security import ensure_admin
from ...db.database import get_session
from ...models.job import (
    JobDeletedResponse,
    JobListResponse,
    JobNew,
    JobRead,
    JobResponse,
    JobUpdate,
)
from ...services.job_store import JobStore
from ..validation import validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()


def get_job_store(session: Session = Depends(get_session)) -> JobStore:
    return JobStore(session)


def _parse_job_id(job_id: str) -> Optional[int]:
    """Return the id as an int, or None unless it is plain ASCII digits"""
    if job_id.isascii() and job_id.isdigit():
        return int(job_id)
    return None


def _invalid_id_response() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Job ID must be number"})


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    payload: Dict[str, Any] = Body(...),
    admin: dict = Depends(ensure_admin),
    store: JobStore = Depends(get_job_store),
):
    """
    Create a job.

    Body is ``{title, salary, equity, company_handle}``; admin only.
    """
    job_new = validate_payload(JobNew, payload)
    job = store.create(job_new.model_dump())
    return JobResponse(job=JobRead.model_validate(job))


@router.get("", response_model=JobListResponse)
async def list_jobs(
    title: Optional[str] = None,
    min_salary: Optional[int] = Query(default=None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(default=None, alias="hasEquity"),
    store: JobStore = Depends(get_job_store),
):
    """
    List jobs, optionally filtered.

    - title: case-insensitive partial match
    - minSalary: salary at least this much
    - hasEquity: true for jobs offering equity, false for jobs without
    """
    jobs = store.find_all(title=title, min_salary=min_salary, has_equity=has_equity)
    return JobListResponse(jobs=[JobRead.model_validate(job) for job in jobs])


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, store: JobStore = Depends(get_job_store)):
    """Get a specific job by ID"""
    parsed_id = _parse_job_id(job_id)
    if parsed_id is None:
        return _invalid_id_response()
    job = store.get(parsed_id)
    return JobResponse(job=JobRead.model_validate(job))


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: str,
    payload: Dict[str, Any] = Body(...),
    admin: dict = Depends(ensure_admin),
    store: JobStore = Depends(get_job_store),
):
    """
    Partially update a job's title, salary or equity; admin only.

    The company a job belongs to cannot be changed.
    """
    parsed_id = _parse_job_id(job_id)
    if parsed_id is None:
        return _invalid_id_response()

    if "company_handle" in payload or "companyHandle" in payload:
        logger.warning(f"Refused company change on job {job_id} by {admin.get('username')}")
        raise BadRequestError("Cannot change company handle")

    job_update = validate_payload(JobUpdate, payload)
    job = store.update(parsed_id, job_update.model_dump(exclude_unset=True))
    return JobResponse(job=JobRead.model_validate(job))


@router.delete("/{job_id}", response_model=JobDeletedResponse)
async def delete_job(
    job_id: str,
    admin: dict = Depends(ensure_admin),
    store: JobStore = Depends(get_job_store),
):
    """Delete a job; admin only"""
    parsed_id = _parse_job_id(job_id)
    if parsed_id is None:
        return _invalid_id_response()
    store.remove(parsed_id)
    return JobDeletedResponse(deleted=job_id)
