"""
Pydantic schemas for companies.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field, model_validator

from app.schemas.base import CamelFilter, CamelModel, CamelRequest


class CompanyCreateRequest(CamelRequest):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdateRequest(CamelRequest):
    """
    Schema for patching a company.

    Every field is optional; the handle can never change.
    """
    name: str = Field(None, min_length=1)
    description: str = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyFilterParams(CamelFilter):
    """Query-string filters for GET /companies"""
    name_like: Optional[str] = None
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_employee_range(self):
        if (self.min_employees is not None
                and self.max_employees is not None
                and self.min_employees > self.max_employees):
            raise ValueError("minEmployees cannot be greater than maxEmployees")
        return self


class CompanyResponse(CamelModel):
    """Schema for company response"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJobResponse(CamelModel):
    """A job as listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None


class CompanyDetailResponse(CompanyResponse):
    """Company together with its job postings"""
    jobs: List[CompanyJobResponse] = []


class CompanyEnvelope(CamelModel):
    company: CompanyResponse


class CompanyDetailEnvelope(CamelModel):
    company: CompanyDetailResponse


class CompanyListEnvelope(CamelModel):
    companies: List[CompanyResponse]


class DeletedResponse(CamelModel):
    deleted: str
