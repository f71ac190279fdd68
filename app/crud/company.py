"""
CRUD operations for the Company model.

Listing and patching go through the clause builders in app.core.sql and run
as raw SQL; everything else uses the ORM.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from app.core.database import execute
from app.core.exceptions import BadRequestError, NotFoundError
from app.core.sql import at_least, at_most, contains, sql_for_filtered_data, sql_for_partial_update
from app.models.company import Company
from app.schemas.company import CompanyCreateRequest

# Search filters accepted by find_all
COMPANY_FILTERS = {
    "nameLike": contains("name"),
    "minEmployees": at_least("num_employees"),
    "maxEmployees": at_most("num_employees"),
}

# Request field -> column, for fields whose names differ
JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

_COLUMNS = "handle, name, description, num_employees, logo_url"


def create(db: Session, company_data: CompanyCreateRequest) -> Company:
    """
    Create a new company.

    Raises:
        BadRequestError: If the handle is already taken
    """
    if db.get(Company, company_data.handle) is not None:
        raise BadRequestError(f"Duplicate company: {company_data.handle}")

    db_company = Company(**company_data.model_dump())

    db.add(db_company)
    db.commit()
    db.refresh(db_company)

    return db_company


def find_all(db: Session, filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    List companies ordered by name.

    Args:
        db: Database session
        filters: Optional search filters, keys from COMPANY_FILTERS

    Returns:
        List of company rows as dicts

    Raises:
        BadRequestError: If filters is an empty mapping or has unknown keys
    """
    where = ""
    values: List[Any] = []
    if filters is not None:
        filter_cols, values = sql_for_filtered_data(filters, COMPANY_FILTERS)
        where = f"WHERE {filter_cols}"

    result = execute(
        db,
        f"""SELECT {_COLUMNS}
            FROM companies
            {where}
            ORDER BY name""",
        values,
    )
    return [dict(row) for row in result.mappings()]


def get(db: Session, handle: str) -> Company:
    """
    Retrieve a company with its jobs.

    Raises:
        NotFoundError: If no such company
    """
    company = db.get(Company, handle)
    if company is None:
        raise NotFoundError(f"No company: {handle}")
    return company


def update(db: Session, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a company; only the supplied fields change.

    Args:
        db: Database session
        handle: Company to update
        data: camelCase field -> new value (name, description, numEmployees, logoUrl)

    Returns:
        The updated company row

    Raises:
        BadRequestError: If data is empty
        NotFoundError: If no such company
    """
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    handle_idx = len(values) + 1

    result = execute(
        db,
        f"""UPDATE companies
            SET {set_cols}
            WHERE handle = ${handle_idx}
            RETURNING {_COLUMNS}""",
        [*values, handle],
    )
    row = result.mappings().first()
    if row is None:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    company = dict(row)
    db.commit()
    return company


def remove(db: Session, handle: str) -> None:
    """
    Delete a company and, through the cascade, its jobs.

    Raises:
        NotFoundError: If no such company
    """
    company = get(db, handle)
    db.delete(company)
    db.commit()
