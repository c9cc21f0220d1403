"""
Pydantic schemas for statement filtering and export.
"""

import datetime as dt
import enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class StatementFormat(str, enum.Enum):
    """Rendering target for a statement."""
    CSV = "csv"
    TEXT = "text"


class StatementFilter(BaseModel):
    """
    Criteria for narrowing a statement.

    Every criterion is optional and all present criteria must
    match. Blank strings are treated as absent.
    """
    text_query: str | None = Field(default=None, max_length=255)
    start_date: dt.date | None = None
    end_date: dt.date | None = None

    @field_validator("text_query", mode="before")
    @classmethod
    def blank_query_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def blank_date_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ShareResponse(BaseModel):
    url: str
