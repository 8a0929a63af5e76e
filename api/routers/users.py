from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Query
from fastapi.responses import JSONResponse

from api.core.logging import get_logger
from api.db.models import USER_NO_COLUMN
from api.services.user_service import (
    LOAN_TYPE_KCC,
    LOAN_TYPE_KCCAH,
    LoanTypeMismatchError,
    ProfileStoreError,
    UserNotFoundError,
    UserService,
)

router = APIRouter(tags=["users"])
service = UserService()
logger = get_logger(__name__)

# Messages shown by the Tamil-language frontend
MSG_USER_NOT_FOUND = "பயனர் கிடைக்கவில்லை"
MSG_STORE_ERROR = "சேமிப்பக பிழை"


def _as_object(payload: Any) -> dict:
    """Bodies that are missing or not JSON objects carry no fields."""
    return payload if isinstance(payload, dict) else {}


@router.post("/submit-user-data")
def submit_user_data(payload: Any = Body(None)):
    payload = _as_object(payload)
    try:
        result = service.submit(payload)
    except UserNotFoundError as exc:
        logger.warning("User not found for update: %s", exc.user_no)
        return JSONResponse(
            {"message": "User not found for update", "error": f"No user with matching {USER_NO_COLUMN}"},
            status_code=404,
        )
    except ProfileStoreError as exc:
        logger.error("User data submit failed: %s", exc.message)
        failed = "Update failed" if payload.get("isUpdate") else "Insert failed"
        return JSONResponse({"message": failed, "error": exc.message}, status_code=500)
    return {"message": result.message, "data": result.rows}


@router.post("/get-user-by-id")
def get_user_by_id(payload: Any = Body(None)):
    payload = _as_object(payload)
    try:
        userjson = service.get_payload(payload.get("userId"))
    except UserNotFoundError:
        return JSONResponse({"error": "User not found"}, status_code=404)
    except ProfileStoreError as exc:
        logger.error("Profile lookup failed: %s", exc.message)
        return JSONResponse({"error": "Database error", "details": exc.message}, status_code=500)
    return {"userjson": userjson}


def _list_users(loantype: Optional[str], tag: str):
    try:
        listing = service.list_users(loantype, tag)
    except ProfileStoreError as exc:
        logger.error("Profile listing failed: %s", exc.message)
        return JSONResponse({"success": False, "error": "Database error"}, status_code=500)
    return {"success": True, "users": listing.users, "total": listing.total}


@router.get("/get-all-users")
def get_all_users(loantype: Optional[str] = Query(None)):
    return _list_users(loantype, LOAN_TYPE_KCC)


@router.get("/get-all-usersAH")
def get_all_users_ah(loantype: Optional[str] = Query(None)):
    return _list_users(loantype, LOAN_TYPE_KCCAH)


def _scoped_user(user_no: str, expected: str):
    logger.info("Fetching %s user %s=%s", expected, USER_NO_COLUMN, user_no)
    try:
        return service.get_scoped(user_no, expected)
    except UserNotFoundError:
        return JSONResponse({"message": MSG_USER_NOT_FOUND}, status_code=404)
    except LoanTypeMismatchError:
        return JSONResponse({"message": f"இந்த {USER_NO_COLUMN} NO IN {expected}"}, status_code=400)
    except ProfileStoreError as exc:
        logger.error("Profile lookup failed: %s", exc.message)
        return JSONResponse({"message": MSG_STORE_ERROR, "details": exc.message}, status_code=500)


@router.get("/api/user-data/{user_no}")
def get_kcc_user(user_no: str):
    return _scoped_user(user_no, LOAN_TYPE_KCC)


@router.get("/api/user-data-kccah/{user_no}")
def get_kccah_user(user_no: str):
    return _scoped_user(user_no, LOAN_TYPE_KCCAH)
