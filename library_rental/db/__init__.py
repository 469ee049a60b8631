"""Database package"""

from library_rental.db.session import (
    AsyncSessionLocal,
    build_engine,
    build_session_factory,
    create_schema,
    engine,
    session_scope,
)
from library_rental.models.base import Base

__all__ = [
    "Base",
    "AsyncSessionLocal",
    "build_engine",
    "build_session_factory",
    "create_schema",
    "engine",
    "session_scope",
]
