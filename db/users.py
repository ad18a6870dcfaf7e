#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Queries against the users table.
"""

import logging
from typing import Any, Dict, List

from supabase import Client

from db.error_handling import DbResult, QueryError, RowNotFound, run_query
from models.user import NewUser

# Initialize logger
logger = logging.getLogger(__name__)


class UserQueries:
    """
    Thin wrapper over the Supabase client for the users table.

    Every method performs a single database call and returns ``Ok`` or ``Err``.
    """

    def __init__(self, client: Client, table: str = "users"):
        self.client = client
        self.table = table

    def _users(self):
        return self.client.table(self.table)

    def insert(self, user: NewUser) -> DbResult[Dict[str, Any]]:
        """Insert one user and return the stored row, including its generated id."""
        def _insert():
            response = self._users().insert(user.to_row()).execute()
            if not response.data:
                raise QueryError("Insert did not return the stored row")
            return response.data[0]

        return run_query("insert_user", _insert)

    def list_all(self) -> DbResult[List[Dict[str, Any]]]:
        """Get all users, most recently created first."""
        def _list():
            response = self._users().select("*").order("id", desc=True).execute()
            return response.data or []

        return run_query("list_users", _list)

    def get(self, user_id: int, columns: str = "*") -> DbResult[Dict[str, Any]]:
        """Get a user by id. A missing row is reported as ``RowNotFound``."""
        def _get():
            response = self._users().select(columns).eq("id", user_id).limit(1).execute()
            if not response.data:
                raise RowNotFound(f"No user with id {user_id}")
            return response.data[0]

        return run_query("get_user", _get)

    def delete(self, user_id: int) -> DbResult[int]:
        """Delete a user by id and return the number of removed rows."""
        def _delete():
            response = self._users().delete().eq("id", user_id).execute()
            return len(response.data or [])

        return run_query("delete_user", _delete)

    def count(self) -> DbResult[int]:
        """Count all users without fetching any rows."""
        def _count():
            response = self._users().select("id", count="exact", head=True).execute()
            return response.count or 0

        return run_query("count_users", _count)
