from __future__ import annotations

import pytest

from api.services.user_service import (
    LOAN_TYPE_KCC,
    LOAN_TYPE_KCCAH,
    LoanTypeMismatchError,
    UserNotFoundError,
    UserService,
)


class FakeRow:
    def __init__(self, user_no, loantype, userjson=None):
        self.user_no = user_no
        self.loantype = loantype
        self.userjson = userjson

    def to_dict(self):
        return {"உ_எண்": self.user_no, "loantype": self.loantype, "userjson": self.userjson}


class FakeRepository:
    def __init__(self, rows=()):
        self.rows = list(rows)
        self.filters = []

    def get_by_user_no(self, user_no):
        return next((r for r in self.rows if r.user_no == user_no), None)

    def list_profiles(self, loan_type=None):
        self.filters.append(loan_type)
        rows = [r for r in self.rows if loan_type is None or (r.loantype or "").lower() == loan_type.lower()]
        return rows, len(rows)


def test_list_users_only_filters_on_own_tag():
    repo = FakeRepository([FakeRow("1", "KCC"), FakeRow("2", "KCCAH")])
    svc = UserService(repo)

    assert svc.list_users("Kcc", LOAN_TYPE_KCC).total == 1
    assert svc.list_users("kccah", LOAN_TYPE_KCC).total == 2
    assert svc.list_users(None, LOAN_TYPE_KCCAH).total == 2
    assert repo.filters == [LOAN_TYPE_KCC, None, None]


def test_get_scoped_mismatch_carries_both_types():
    svc = UserService(FakeRepository([FakeRow("42", "KCC")]))
    with pytest.raises(LoanTypeMismatchError) as exc_info:
        svc.get_scoped("42", LOAN_TYPE_KCCAH)
    assert exc_info.value.expected == LOAN_TYPE_KCCAH
    assert exc_info.value.actual == LOAN_TYPE_KCC


def test_get_payload_strips_identifier():
    svc = UserService(FakeRepository([FakeRow("42", "KCC", {"a": 1})]))
    assert svc.get_payload(" 42 ") == {"a": 1}
    with pytest.raises(UserNotFoundError):
        svc.get_payload(None)
