"""
Registration operations.

Each operation validates its input, makes at most two database calls through
``UserQueries`` and matches the returned result. Failures are raised as
``RegistrationError`` subclasses carrying a localized message.
"""
import logging
from typing import Any, Dict, List

from app.translator import t
from db.error_handling import DbResult, Err, RowNotFound, UniqueViolation
from db.users import UserQueries
from models.user import UserCreate
from registration.exceptions import DuplicateEmail, NotFound, PersistenceError
from registration.validators import parse_user_id, validate_registration

log = logging.getLogger(__name__)


class RegistrationService:
    """
    User registration operations bound to one database wrapper.

    Attributes:
        users (UserQueries): Database access for the users table.
        lang (str): Language of the messages returned to callers.
    """

    def __init__(self, users: UserQueries, lang: str = "en"):
        self.users = users
        self.lang = lang

    def _failure(self, key: str, result: Err) -> PersistenceError:
        return PersistenceError(t(key, self.lang, error=result.error.message))

    def _not_found(self) -> NotFound:
        return NotFound(t("users.not_found", self.lang))

    def create_user(self, payload: UserCreate) -> Dict[str, Any]:
        """
        Register a new user.

        Raises:
            InvalidInput: If a field fails validation. Nothing is written.
            DuplicateEmail: If the email address is already registered.
            PersistenceError: On any other database failure.

        Returns:
            dict: The stored row, including the generated id.
        """
        new_user = validate_registration(payload, self.lang)

        result = self.users.insert(new_user)
        if isinstance(result, Err):
            if isinstance(result.error, UniqueViolation):
                log.info(f"Registration rejected, email already registered: {new_user.email}")
                raise DuplicateEmail(t("users.email_taken", self.lang))
            raise self._failure("errors.create", result)

        log.info(f"User registered with id {result.value.get('id')}")
        return result.value

    def list_users(self) -> List[Dict[str, Any]]:
        """Return every user, most recently created first."""
        result = self.users.list_all()
        if isinstance(result, Err):
            raise self._failure("errors.list", result)
        return result.value

    def get_user(self, raw_user_id: str) -> Dict[str, Any]:
        """
        Return the user with the given identifier.

        Identifiers that do not start with a number cannot match any row and are
        reported as not found without querying the database.
        """
        user_id = parse_user_id(raw_user_id)
        if user_id is None:
            log.debug(f"Identifier '{raw_user_id}' is not numeric")
            raise self._not_found()

        result = self.users.get(user_id)
        self._raise_for_lookup(result, "errors.get")
        return result.value

    def delete_user(self, raw_user_id: str) -> int:
        """
        Delete the user with the given identifier.

        The row is looked up before the delete is issued. If it disappears in
        between, the delete removes nothing and the user is reported as not found.

        Returns:
            int: The identifier of the deleted user.
        """
        user_id = parse_user_id(raw_user_id)
        if user_id is None:
            log.debug(f"Identifier '{raw_user_id}' is not numeric")
            raise self._not_found()

        self._raise_for_lookup(self.users.get(user_id, columns="id"), "errors.delete")

        result = self.users.delete(user_id)
        if isinstance(result, Err):
            raise self._failure("errors.delete", result)
        if result.value == 0:
            log.warning(f"User {user_id} was removed before the delete was issued")
            raise self._not_found()

        log.info(f"User {user_id} deleted")
        return user_id

    def count_users(self) -> int:
        result = self.users.count()
        if isinstance(result, Err):
            raise self._failure("errors.stats", result)
        return result.value

    def _raise_for_lookup(self, result: DbResult, error_key: str) -> None:
        if isinstance(result, Err):
            if isinstance(result.error, RowNotFound):
                raise self._not_found()
            raise self._failure(error_key, result)
