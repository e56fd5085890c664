"""
Database connection for the SQL receipt store (STORE_BACKEND=sql)
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings

Base = declarative_base()


def create_session_factory(database_url: str = settings.DATABASE_URL, echo: bool = settings.DEBUG):
    """Build an engine + session factory and make sure the tables exist."""
    connect_args = {}
    engine_kwargs = {}
    # SQLite needs check_same_thread=False when shared across threads
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        # in-memory SQLite: every session must share one connection
        if ":memory:" in database_url or database_url == "sqlite://":
            engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(
        database_url,
        connect_args=connect_args,
        echo=echo,
        **engine_kwargs,
    )

    import app.receipts.models  # noqa: F401  — register models
    Base.metadata.create_all(bind=engine)

    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
