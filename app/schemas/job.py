from pydantic import Field, field_validator
from typing import List, Optional
from decimal import Decimal

from app.schemas.base import CamelFilter, CamelModel, CamelRequest


class JobCreateRequest(CamelRequest):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(CamelRequest):
    """
    Schema for patching a job.

    The id and companyHandle of a job never change.
    """
    title: str = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)


class JobFilterParams(CamelFilter):
    """Query-string filters for GET /jobs"""
    title: Optional[str] = None
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: Optional[bool] = None

    @field_validator("has_equity", mode="before")
    @classmethod
    def parse_has_equity(cls, v):
        """Only the literals true/false are accepted, not 0/1/yes/no"""
        if v is None or isinstance(v, bool):
            return v
        if isinstance(v, str) and v.lower() in ("true", "false"):
            return v.lower() == "true"
        raise ValueError("hasEquity must be true or false")


class JobResponse(CamelModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str


class JobEnvelope(CamelModel):
    job: JobResponse


class JobListEnvelope(CamelModel):
    jobs: List[JobResponse]
