"""SQLAlchemy model for the externally owned ``user_details`` table."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, JSON, String, Text, func, inspect

from .session import Base

# Column names as they exist in the shared database
USER_NO_COLUMN = "உ_எண்"
NAME_COLUMN = "பெயர்"
AADHAAR_COLUMN = "ஆதார்_எண்"


class UserDetail(Base):
    __tablename__ = "user_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_no = Column(USER_NO_COLUMN, String(64), nullable=False, index=True)
    name = Column(NAME_COLUMN, Text, nullable=True)
    aadhaar_no = Column(AADHAAR_COLUMN, String(32), nullable=True)
    userjson = Column(JSON, nullable=True)
    loantype = Column(String(16), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self) -> dict:
        """Row keyed by database column names, as clients expect it."""
        row = {}
        for attr in inspect(self).mapper.column_attrs:
            value = getattr(self, attr.key)
            if hasattr(value, "isoformat"):
                value = value.isoformat()
            row[attr.columns[0].name] = value
        return row
