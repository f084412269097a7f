# File: beaver_core/api/deps.py

from collections.abc import Generator

from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
