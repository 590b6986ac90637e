"""
Database model for companies that post jobs
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class Company(SQLModel, table=True):
    """Company table model"""
    __tablename__ = "companies"

    handle: str = Field(primary_key=True, max_length=25)
    name: str = Field(unique=True)
    num_employees: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = Field(default=None)
    logo_url: Optional[str] = Field(default=None)
