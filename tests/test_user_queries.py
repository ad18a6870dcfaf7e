import unittest
import sys
import os
from unittest.mock import MagicMock

# Add the parent directory to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from db.error_handling import (
    Err,
    Ok,
    QueryError,
    RowNotFound,
    UniqueViolation,
    classify_error,
    run_query,
)
from db.users import UserQueries
from models.user import NewUser
from tests.fakes import FakeSupabase, api_error


def new_user(email="ali@example.com", name="Ali Reza", age=30):
    return NewUser(full_name=name, email=email, age=age)


class TestUserQueries(unittest.TestCase):
    """Test UserQueries against the in-memory client."""

    def setUp(self):
        self.client = FakeSupabase()
        self.users = UserQueries(self.client)

    def test_insert_returns_stored_row(self):
        result = self.users.insert(new_user())
        self.assertIsInstance(result, Ok)
        self.assertEqual(result.value["id"], 1)
        self.assertEqual(result.value["email"], "ali@example.com")
        self.assertEqual(result.value["age"], 30)

    def test_duplicate_email_is_unique_violation(self):
        self.users.insert(new_user())
        result = self.users.insert(new_user(name="Someone Else"))
        self.assertIsInstance(result, Err)
        self.assertIsInstance(result.error, UniqueViolation)
        self.assertEqual(result.error.code, "23505")

    def test_list_is_ordered_by_id_descending(self):
        for i in range(3):
            self.users.insert(new_user(email=f"user{i}@example.com"))
        result = self.users.list_all()
        self.assertEqual([row["id"] for row in result.value], [3, 2, 1])

    def test_list_empty_table(self):
        self.assertEqual(self.users.list_all(), Ok([]))

    def test_get_missing_row(self):
        result = self.users.get(999999)
        self.assertIsInstance(result, Err)
        self.assertIsInstance(result.error, RowNotFound)

    def test_get_selected_columns(self):
        self.users.insert(new_user())
        self.assertEqual(self.users.get(1, columns="id"), Ok({"id": 1}))

    def test_delete_reports_removed_rows(self):
        self.users.insert(new_user())
        self.assertEqual(self.users.delete(1), Ok(1))
        self.assertEqual(self.users.delete(1), Ok(0))

    def test_count(self):
        self.assertEqual(self.users.count(), Ok(0))
        self.users.insert(new_user())
        self.users.insert(new_user(email="other@example.com"))
        self.assertEqual(self.users.count(), Ok(2))

    def test_uses_configured_table(self):
        users = UserQueries(self.client, table="members")
        users.insert(new_user())
        self.assertIn("members", self.client.rows)

    def test_client_failure_becomes_query_error(self):
        self.client.fail_on["select"] = api_error("permission denied for table users", "42501")
        result = self.users.list_all()
        self.assertIsInstance(result, Err)
        self.assertIsInstance(result.error, QueryError)
        self.assertEqual(result.error.message, "permission denied for table users")


class TestClassifyError(unittest.TestCase):
    """Test the classify_error function."""

    def test_api_error_codes(self):
        self.assertIsInstance(classify_error(api_error("dup", "23505")), UniqueViolation)
        self.assertIsInstance(classify_error(api_error("no rows", "PGRST116")), RowNotFound)
        self.assertIsInstance(classify_error(api_error("boom", "XX000")), QueryError)

    def test_other_exceptions(self):
        error = classify_error(ConnectionRefusedError("connection refused"))
        self.assertIsInstance(error, QueryError)
        self.assertEqual(error.message, "connection refused")

    def test_database_errors_pass_through(self):
        original = RowNotFound("missing")
        self.assertIs(classify_error(original), original)


class TestRunQuery(unittest.TestCase):
    """Test the run_query wrapper."""

    def test_success(self):
        self.assertEqual(run_query("op", lambda: 5), Ok(5))

    def test_failure_is_returned_not_raised(self):
        func = MagicMock(side_effect=TimeoutError("timed out"))
        result = run_query("op", func)
        self.assertIsInstance(result, Err)
        self.assertEqual(result.error.message, "timed out")
        func.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
