"""
Persistence layer for registered users.

Wraps the Supabase client and reports every outcome as an explicit
``Ok`` / ``Err`` result instead of raising.
"""

from db.error_handling import (
    DatabaseError,
    DbResult,
    Err,
    Ok,
    QueryError,
    RowNotFound,
    UniqueViolation,
)
from db.supabase_client import create_supabase
from db.users import UserQueries

__all__ = [
    "DatabaseError",
    "DbResult",
    "Err",
    "Ok",
    "QueryError",
    "RowNotFound",
    "UniqueViolation",
    "UserQueries",
    "create_supabase",
]
