#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Error handling utilities for database operations.

Database calls never raise into the request handlers. ``run_query`` executes a
call and wraps the outcome in ``Ok`` or ``Err``; the caller matches on the
variant.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from postgrest.exceptions import APIError

logger = logging.getLogger(__name__)

# Type variables for better typing
T = TypeVar('T')

# Postgres / PostgREST error codes
UNIQUE_VIOLATION = "23505"
NO_ROWS = "PGRST116"


class DatabaseError(Exception):
    """Base class for database-related errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class UniqueViolation(DatabaseError):
    """A unique constraint rejected the row."""
    pass


class RowNotFound(DatabaseError):
    """No row matched the query."""
    pass


class QueryError(DatabaseError):
    """Any other failure reported by the database or the client."""
    pass


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: DatabaseError


DbResult = Union[Ok[T], Err]


def classify_error(error: Exception) -> DatabaseError:
    """Classify an error raised by the client for appropriate handling."""
    if isinstance(error, DatabaseError):
        return error

    if isinstance(error, APIError):
        message = error.message or str(error)
        if error.code == UNIQUE_VIOLATION:
            return UniqueViolation(message, code=error.code)
        if error.code == NO_ROWS:
            return RowNotFound(message, code=error.code)
        return QueryError(message, code=error.code)

    return QueryError(str(error) or type(error).__name__)


def run_query(operation_name: str, func: Callable[[], T]) -> DbResult[T]:
    """
    Execute a database call and report its outcome as a result value.

    Args:
        operation_name: Name of the operation for logging
        func: Zero-argument callable performing the call

    Returns:
        Ok with the call's return value, or Err with the classified error
    """
    try:
        return Ok(func())
    except Exception as e:
        error = classify_error(e)

    if isinstance(error, RowNotFound):
        logger.debug(f"Database operation '{operation_name}' matched no rows")
    else:
        logger.error(f"Error in database operation '{operation_name}': {error.message}")
    return Err(error)
