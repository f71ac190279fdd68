import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.core.validation import parse_filters
from app.crud import company as company_crud
from app.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailEnvelope,
    CompanyDetailResponse,
    CompanyEnvelope,
    CompanyFilterParams,
    CompanyListEnvelope,
    CompanyResponse,
    CompanyUpdateRequest,
    DeletedResponse,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=CompanyEnvelope)
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(get_admin_user)
):
    """
    Create a company.

    Authorization required: admin
    """
    company = company_crud.create(db, request)
    logger.info(f"Created company {company.handle} by {admin_user['username']}")
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.get("/", response_model=CompanyListEnvelope)
def list_companies(request: Request, db: Session = Depends(get_db)):
    """
    List companies ordered by name.

    Optional query filters:
    - nameLike: case-insensitive partial match on name
    - minEmployees / maxEmployees: bounds on numEmployees

    Any other query parameter is rejected with 400.
    """
    if request.query_params:
        filters = parse_filters(CompanyFilterParams, request.query_params)
        companies = company_crud.find_all(db, filters)
    else:
        companies = company_crud.find_all(db)

    return CompanyListEnvelope(
        companies=[CompanyResponse.model_validate(c) for c in companies]
    )


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """
    Retrieve a company with its jobs ({id, title, salary, equity}).
    """
    company = company_crud.get(db, handle)
    return CompanyDetailEnvelope(company=CompanyDetailResponse.model_validate(company))


@router.patch("/{handle}", response_model=CompanyEnvelope)
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(get_admin_user)
):
    """
    Patch a company. Fields can be: name, description, numEmployees, logoUrl.

    Authorization required: admin
    """
    company = company_crud.update(db, handle, request.model_dump(exclude_unset=True, by_alias=True))
    logger.info(f"Updated company {handle} by {admin_user['username']}")
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.delete("/{handle}", response_model=DeletedResponse)
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(get_admin_user)
):
    """
    Delete a company and its jobs.

    Authorization required: admin
    """
    company_crud.remove(db, handle)
    logger.info(f"Deleted company {handle} by {admin_user['username']}")
    return DeletedResponse(deleted=handle)
