"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from app.core.database import execute
from app.core.exceptions import BadRequestError, NotFoundError
from app.core.sql import PositiveFlag, at_least, contains, sql_for_filtered_data, sql_for_partial_update
from app.models.company import Company
from app.models.job import Job
from app.schemas.job import JobCreateRequest

# Search filters accepted by find_all. hasEquity always contributes a
# fragment: "equity" > 0 when true, "equity" >= 0 otherwise.
JOB_FILTERS = {
    "title": contains("title"),
    "minSalary": at_least("salary"),
    "hasEquity": PositiveFlag("equity"),
}

# Updatable job fields share their column names
JS_TO_SQL: Dict[str, str] = {}

_COLUMNS = "id, title, salary, equity, company_handle"


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id

    Raises:
        BadRequestError: If the company does not exist
    """
    if db.get(Company, job_data.company_handle) is None:
        raise BadRequestError(f"No company: {job_data.company_handle}")

    db_job = Job(**job_data.model_dump())

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def find_all(db: Session, filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    List jobs ordered by title, optionally filtered.

    Args:
        db: Database session
        filters: Optional search filters, keys from JOB_FILTERS

    Returns:
        List of job rows as dicts
    """
    where = ""
    values: List[Any] = []
    if filters is not None:
        filter_cols, values = sql_for_filtered_data(filters, JOB_FILTERS)
        where = f"WHERE {filter_cols}"

    result = execute(
        db,
        f"""SELECT {_COLUMNS}
            FROM jobs
            {where}
            ORDER BY title""",
        values,
    )
    return [dict(row) for row in result.mappings()]


def get(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no such job
    """
    job = db.get(Job, job_id)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")
    return job


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a job. Never changes id or companyHandle.

    Args:
        db: Database session
        job_id: Job ID to update
        data: Field -> new value (title, salary, equity)

    Returns:
        The updated job row

    Raises:
        BadRequestError: If data is empty
        NotFoundError: If no such job
    """
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    id_idx = len(values) + 1

    result = execute(
        db,
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = ${id_idx}
            RETURNING {_COLUMNS}""",
        [*values, job_id],
    )
    row = result.mappings().first()
    if row is None:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    job = dict(row)
    db.commit()
    return job


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no such job
    """
    job = get(db, job_id)
    db.delete(job)
    db.commit()
