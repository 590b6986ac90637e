"""
Database and request/response models for job postings
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field as PydanticField, field_serializer
from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field


class Job(SQLModel, table=True):
    """Job table model"""
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="jobs_salary_check"),
        CheckConstraint("equity <= 1.0", name="jobs_equity_check"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    salary: Optional[int] = Field(default=None)
    equity: Optional[Decimal] = Field(default=None)
    company_handle: str = Field(foreign_key="companies.handle", max_length=25)


class JobNew(BaseModel):
    """Payload for creating a job"""
    model_config = ConfigDict(extra="forbid")

    title: str = PydanticField(min_length=1)
    salary: Optional[int] = PydanticField(default=None, ge=0, strict=True)
    equity: Optional[float] = PydanticField(default=None, ge=0, le=1, strict=True)
    company_handle: str = PydanticField(min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """Payload for a partial job update; only fields sent are changed"""
    model_config = ConfigDict(extra="forbid")

    # title may be omitted but never nulled
    title: str = PydanticField(default=None, min_length=1)
    salary: Optional[int] = PydanticField(default=None, ge=0, strict=True)
    equity: Optional[float] = PydanticField(default=None, ge=0, le=1, strict=True)


class JobRead(BaseModel):
    """Public job shape"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str = PydanticField(
        validation_alias=AliasChoices("company_handle", "companyHandle"),
        serialization_alias="companyHandle",
    )

    @field_serializer("equity")
    def serialize_equity(self, equity: Optional[Decimal]) -> Optional[str]:
        if equity is None:
            return None
        # NUMERIC columns may come back padded ("0.1000000000")
        return format(equity.normalize(), "f")


class JobResponse(BaseModel):
    job: JobRead


class JobListResponse(BaseModel):
    jobs: List[JobRead]


class JobDeletedResponse(BaseModel):
    deleted: str
