"""Database helpers for the user profile store (engine/session/model export)."""

from .session import Base, get_engine, get_session, reset_engine
from .models import UserDetail

__all__ = ["Base", "UserDetail", "get_engine", "get_session", "reset_engine"]
