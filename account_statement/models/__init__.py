"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from account_statement.models.base import Base
from account_statement.models.entry import Entry

__all__ = [
    "Base",
    "Entry",
]
