#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Callable, Generator, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from core.app_context import AppContext
from core.config_loader import get_config
from core.errors import AuthenticationError, NotFound, PermissionDenied
from core.identity import VerifiedIdentity
from database.database import SessionLocal
from database.models import User


@lru_cache()
def get_app_context() -> AppContext:
    """Wired singletons (identity provider, engines), built once per process."""
    return AppContext.build(get_config())


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_session_factory() -> Callable[[], Session]:
    """Session factory for work that outlives the request (background tasks)."""
    return SessionLocal


def get_identity_provider(ctx: AppContext = Depends(get_app_context)):
    return ctx.identity


def get_bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    if not authorization:
        raise AuthenticationError("No token provided")
    scheme, _, token = authorization.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        raise AuthenticationError("No token provided")
    return token.strip()


def get_current_identity(
    token: str = Depends(get_bearer_token),
    identity=Depends(get_identity_provider)
) -> VerifiedIdentity:
    return identity.verify_token(token)


def get_current_user(
    identity: VerifiedIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
) -> User:
    user = db.get(User, identity.subject_id)
    if user is None:
        raise NotFound("User profile not found. Please complete registration.")
    return user


def require_role(*roles: str):
    """
    Dependency factory restricting an endpoint to the given roles.

    Usage:
        @router.get("/stats")
        def stats(user: User = Depends(require_role('admin'))):
            ...
    """
    def _check(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise PermissionDenied("Insufficient permissions")
        return user

    return _check
