import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.core.validation import parse_filters
from app.crud import job as job_crud
from app.schemas.company import DeletedResponse
from app.schemas.job import (
    JobCreateRequest,
    JobEnvelope,
    JobFilterParams,
    JobListEnvelope,
    JobResponse,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(get_admin_user)
):
    """
    Create a job posting for an existing company.

    Authorization required: admin
    """
    new_job = job_crud.create(db, request)
    logger.info(f"Created job {new_job.id}: {new_job.title} at {new_job.company_handle}")
    return JobEnvelope(job=JobResponse.model_validate(new_job))


@router.get("/", response_model=JobListEnvelope)
def list_jobs(request: Request, db: Session = Depends(get_db)):
    """
    List jobs ordered by title.

    Optional query filters:
    - title: case-insensitive partial match
    - minSalary: lower bound on salary
    - hasEquity: true for jobs with non-zero equity

    Any other query parameter is rejected with 400.
    """
    if request.query_params:
        filters = parse_filters(JobFilterParams, request.query_params)
        jobs = job_crud.find_all(db, filters)
    else:
        jobs = job_crud.find_all(db)

    return JobListEnvelope(jobs=[JobResponse.model_validate(j) for j in jobs])


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID.
    """
    job = job_crud.get(db, job_id)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(get_admin_user)
):
    """
    Patch a job. Fields can be: title, salary, equity.

    Authorization required: admin
    """
    job = job_crud.update(db, job_id, request.model_dump(exclude_unset=True, by_alias=True))
    logger.info(f"Updated job {job_id}")
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.delete("/{job_id}", response_model=DeletedResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(get_admin_user)
):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)

    logger.info(f"Deleted job {job_id}")
    return DeletedResponse(deleted=str(job_id))
