"""
User profile use cases on top of the ``user_details`` table.

Profiles are created by the loan application forms (KCC and KCC-AH) and
looked up again by the user number.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from sqlalchemy.exc import MultipleResultsFound, SQLAlchemyError

from api.core.logging import get_logger
from api.db.models import AADHAAR_COLUMN, NAME_COLUMN, USER_NO_COLUMN
from api.repositories.sql_repository import UserDetailsRepository

logger = get_logger(__name__)

LOAN_TYPE_KCC = "KCC"
LOAN_TYPE_KCCAH = "KCCAH"


class UserServiceError(Exception):
    """Base class for user profile failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserNotFoundError(UserServiceError):
    def __init__(self, user_no: str):
        super().__init__(f"No user with matching {USER_NO_COLUMN} {user_no!r}")
        self.user_no = user_no


class LoanTypeMismatchError(UserServiceError):
    def __init__(self, user_no: str, expected: str, actual: str):
        super().__init__(f"User {user_no!r} holds loan type {actual!r}, not {expected!r}")
        self.user_no = user_no
        self.expected = expected
        self.actual = actual


class ProfileStoreError(UserServiceError):
    """The profile store rejected or failed the query."""


@dataclass
class SubmitResult:
    updated: bool
    rows: list[dict] = field(default_factory=list)

    @property
    def message(self) -> str:
        return "Data updated successfully" if self.updated else "Data inserted successfully"


@dataclass
class UserListing:
    users: list[dict]
    total: int


def _user_no(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


class UserService:
    """Insert/update/lookup flows for loan applicant profiles."""

    def __init__(self, repository: Optional[UserDetailsRepository] = None) -> None:
        self.repository = repository or UserDetailsRepository()

    def submit(self, payload: dict) -> SubmitResult:
        user_no = _user_no(payload.get(USER_NO_COLUMN))
        fields = {
            "name": payload.get(NAME_COLUMN),
            "aadhaar_no": payload.get(AADHAAR_COLUMN),
            "userjson": payload.get("userjson"),
            "loantype": payload.get("loantype"),
        }
        is_update = bool(payload.get("isUpdate"))
        logger.info("Submitting user data user_no=%s loantype=%s update=%s", user_no, fields["loantype"], is_update)
        try:
            if is_update:
                if not self.repository.exists(user_no):
                    raise UserNotFoundError(user_no)
                rows = self.repository.update(user_no, **fields)
                return SubmitResult(updated=True, rows=[row.to_dict() for row in rows])
            row = self.repository.insert(user_no, **fields)
            return SubmitResult(updated=False, rows=[row.to_dict()])
        except (SQLAlchemyError, RuntimeError) as exc:
            raise ProfileStoreError(str(exc)) from exc

    def _fetch(self, user_no: str):
        try:
            row = self.repository.get_by_user_no(user_no)
        except MultipleResultsFound as exc:
            raise ProfileStoreError(f"More than one row for {USER_NO_COLUMN} {user_no!r}") from exc
        except (SQLAlchemyError, RuntimeError) as exc:
            raise ProfileStoreError(str(exc)) from exc
        if row is None:
            raise UserNotFoundError(user_no)
        return row

    def get_payload(self, user_no: Any) -> Any:
        """Return the stored ``userjson`` for ``user_no``."""
        return self._fetch(_user_no(user_no)).userjson

    def list_users(self, requested: Optional[str], tag: str) -> UserListing:
        """
        List profiles. The loan type filter applies only when ``requested``
        names this endpoint's ``tag`` (case-insensitive); anything else lists all.
        """
        loan_type = tag if (requested or "").strip().lower() == tag.lower() else None
        try:
            rows, total = self.repository.list_profiles(loan_type)
        except (SQLAlchemyError, RuntimeError) as exc:
            raise ProfileStoreError(str(exc)) from exc
        logger.info("Fetched %s user records (loantype=%s)", total, loan_type)
        return UserListing(users=[row.to_dict() for row in rows], total=total)

    def get_scoped(self, user_no: Any, expected: str) -> dict:
        """Full row for ``user_no`` provided its loan type is empty or ``expected``."""
        row = self._fetch(_user_no(user_no))
        if row.loantype and row.loantype != expected:
            raise LoanTypeMismatchError(row.user_no, expected, row.loantype)
        return row.to_dict()
