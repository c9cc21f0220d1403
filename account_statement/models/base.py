"""
Database engine, session management, and base model.

Every model inherits from Base. Every request gets its own
session from get_db(); nothing database-related is shared
between requests.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from account_statement.config import get_settings

settings = get_settings()


def _connect_args(url: str) -> dict:
    # SQLite connections are bound to the creating thread by default,
    # FastAPI runs sync endpoints in a threadpool.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


# --- Engine ---
# pool_pre_ping=True tests connections before using them, which
# handles a database restart or a stale connection.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)

# --- Session Factory ---
# autocommit=False: the entry store decides when each mutation
# is committed, so a failed write never leaves partial changes.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally guarantees the session is closed when the
    request finishes, even if an error occurs.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
