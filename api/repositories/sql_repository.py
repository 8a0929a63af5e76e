"""Data access helpers for the ``user_details`` table, backed by SQLAlchemy."""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import func, select

from api.db.models import UserDetail
from api.db.session import get_session


class UserDetailsRepository:
    """Filtered select/insert/update helpers keyed by the user number column."""

    def get_by_user_no(self, user_no: str) -> Optional[UserDetail]:
        """Return the single row for ``user_no``; raises MultipleResultsFound on duplicates."""
        with get_session() as session:
            stmt = select(UserDetail).where(UserDetail.user_no == user_no)
            return session.execute(stmt).scalar_one_or_none()

    def exists(self, user_no: str) -> bool:
        with get_session() as session:
            stmt = select(UserDetail.id).where(UserDetail.user_no == user_no).limit(1)
            return session.execute(stmt).first() is not None

    def insert(
        self,
        user_no: str,
        *,
        name: Optional[str] = None,
        aadhaar_no: Optional[str] = None,
        userjson: Any = None,
        loantype: Optional[str] = None,
    ) -> UserDetail:
        entity = UserDetail(
            user_no=user_no,
            name=name,
            aadhaar_no=aadhaar_no,
            userjson=userjson,
            loantype=loantype,
        )
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def update(
        self,
        user_no: str,
        *,
        name: Optional[str] = None,
        aadhaar_no: Optional[str] = None,
        userjson: Any = None,
        loantype: Optional[str] = None,
    ) -> list[UserDetail]:
        """Overwrite the profile fields of every row carrying ``user_no``."""
        with get_session() as session:
            rows = session.execute(select(UserDetail).where(UserDetail.user_no == user_no)).scalars().all()
            for row in rows:
                row.name = name
                row.aadhaar_no = aadhaar_no
                row.userjson = userjson
                row.loantype = loantype
            session.commit()
            for row in rows:
                session.refresh(row)
            return list(rows)

    def list_profiles(self, loan_type: Optional[str] = None) -> tuple[list[UserDetail], int]:
        """All rows, optionally restricted to a loan type (case-insensitive), with the total count."""
        with get_session() as session:
            stmt = select(UserDetail).order_by(UserDetail.id)
            count_stmt = select(func.count()).select_from(UserDetail)
            if loan_type:
                condition = func.lower(UserDetail.loantype) == loan_type.lower()
                stmt = stmt.where(condition)
                count_stmt = count_stmt.where(condition)
            rows = session.execute(stmt).scalars().all()
            total = session.execute(count_stmt).scalar_one()
            return list(rows), int(total or 0)
