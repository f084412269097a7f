# File: beaver_core/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker


def create_session_factory(database_url: str) -> sessionmaker:
    """
    Build the engine for ``database_url`` and return a session factory
    bound to it. The engine stays reachable as ``factory.kw["bind"]``.
    """
    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False} if "sqlite" in database_url else {},
    )
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
