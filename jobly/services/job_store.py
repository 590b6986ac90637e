"""
Data access for the jobs table
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, or_, text
from sqlmodel import Session, col, select

from ..core.errors import BadRequestError, NotFoundError
from ..helpers.sql import sql_for_partial_update
from ..models.company import Company
from ..models.job import Job

logger = logging.getLogger(__name__)


class JobStore:
    """All SQL for the jobs resource, bound to one session"""

    def __init__(self, session: Session):
        self.session = session

    def create(self, data: Dict[str, Any]) -> Job:
        """
        Insert a new job.

        Args:
            data: ``{title, salary, equity, company_handle}``

        Returns:
            The stored job, including its id

        Raises:
            BadRequestError: If the title is taken or the company is unknown
        """
        title = data["title"]
        duplicate = self.session.exec(select(Job.id).where(Job.title == title)).first()
        if duplicate is not None:
            raise BadRequestError(f"Duplicate job: {title}")

        handle = data["company_handle"]
        if self.session.get(Company, handle) is None:
            raise BadRequestError(f"No company: {handle}")

        equity = data.get("equity")
        job = Job(
            title=title,
            salary=data.get("salary"),
            equity=Decimal(str(equity)) if equity is not None else None,
            company_handle=handle,
        )
        self.session.add(job)
        self.session.commit()
        self.session.refresh(job)

        logger.info(f"Created job {job.id} ({job.title}) for {job.company_handle}")
        return job

    def find_all(
        self,
        title: Optional[str] = None,
        min_salary: Optional[int] = None,
        has_equity: Optional[bool] = None,
    ) -> List[Job]:
        """
        List jobs ordered by title.

        Args:
            title: Case-insensitive substring of the title
            min_salary: Minimum salary; falsy means no filter
            has_equity: True for equity > 0, False for no equity, None for either
        """
        statement = select(Job)

        if title:
            statement = statement.where(col(Job.title).ilike(f"%{title}%"))

        if min_salary:
            statement = statement.where(col(Job.salary) >= min_salary)

        if has_equity is True:
            statement = statement.where(col(Job.equity).is_not(None), col(Job.equity) > 0)
        elif has_equity is False:
            statement = statement.where(or_(col(Job.equity).is_(None), col(Job.equity) == 0))

        statement = statement.order_by(Job.title)
        return list(self.session.exec(statement).all())

    def get(self, job_id: int) -> Job:
        """Fetch one job, raising NotFoundError if there is none"""
        job = self.session.get(Job, job_id)
        if job is None:
            raise NotFoundError(f"No job: {job_id}")
        return job

    def update(self, job_id: int, data: Dict[str, Any]) -> Job:
        """
        Partially update a job: only the fields present in ``data`` change.

        Args:
            job_id: Job to update
            data: Any of ``{title, salary, equity}``

        Returns:
            The updated job

        Raises:
            BadRequestError: If ``data`` is empty
            NotFoundError: If there is no such job
        """
        set_cols, values = sql_for_partial_update(data)
        columns = Job.__table__.c
        statement = (
            text(
                f"UPDATE jobs SET {set_cols} WHERE id = :job_id "
                "RETURNING id, title, salary, equity, company_handle"
            )
            .bindparams(job_id=job_id, **values)
            .columns(
                columns.id,
                columns.title,
                columns.salary,
                columns.equity,
                columns.company_handle,
            )
        )
        row = self.session.exec(statement).first()
        if row is None:
            self.session.rollback()
            raise NotFoundError(f"No job: {job_id}")
        self.session.commit()

        logger.info(f"Updated job {job_id}: {sorted(values)}")
        return Job(**row._mapping)

    def remove(self, job_id: int) -> None:
        """Delete a job, raising NotFoundError if there is none"""
        statement = delete(Job).where(col(Job.id) == job_id).returning(col(Job.id))
        deleted = self.session.exec(statement).first()
        if deleted is None:
            self.session.rollback()
            raise NotFoundError(f"No job: {job_id}")
        self.session.commit()

        logger.info(f"Deleted job {job_id}")
