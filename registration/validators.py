"""
Validation utilities for registration input.

Checks run in a fixed order (age, name, email) and stop at the first failure.
"""

import math
import re
from typing import Any, Optional

from app.translator import t
from models.user import NewUser, UserCreate
from registration.exceptions import InvalidInput

MIN_AGE = 1
MAX_AGE = 150
MIN_NAME_LENGTH = 2

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Leading integer; anything after the digits is ignored
USER_ID_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")
# Plain ASCII decimal number, optionally with an exponent
AGE_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_age(value: Any) -> Optional[float]:
    """
    Read an age given as a number or a numeric string.

    Args:
        value: Raw value from the request body.

    Returns:
        Optional[float]: The numeric value, or None if it is missing or not a finite number.
    """
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not AGE_PATTERN.fullmatch(value):
            return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def validate_age(value: Any, lang: str = "en") -> int:
    number = parse_age(value)
    if number is None or number < MIN_AGE or number > MAX_AGE:
        raise InvalidInput(t("validation.invalid_age", lang))
    return int(number)


def validate_full_name(value: Optional[str], lang: str = "en") -> str:
    name = (value or "").strip()
    if len(name) < MIN_NAME_LENGTH:
        raise InvalidInput(t("validation.name_too_short", lang))
    return name


def validate_email(value: Optional[str], lang: str = "en") -> str:
    email = (value or "").strip()
    if not EMAIL_PATTERN.fullmatch(email):
        raise InvalidInput(t("validation.invalid_email", lang))
    return email.lower()


def validate_registration(payload: UserCreate, lang: str = "en") -> NewUser:
    """
    Validate and normalize a registration request.

    Args:
        payload (UserCreate): Request body as received.
        lang (str): Language of the error message.

    Raises:
        InvalidInput: On the first failing field, with a localized message.

    Returns:
        NewUser: Trimmed name, trimmed lowercase email and integer age.
    """
    age = validate_age(payload.age, lang)
    full_name = validate_full_name(payload.full_name, lang)
    email = validate_email(payload.email, lang)
    return NewUser(full_name=full_name, email=email, age=age)


def parse_user_id(raw: str) -> Optional[int]:
    """
    Coerce a path identifier to an integer.

    Leading digits are used and the rest is ignored, so ``"12abc"`` reads as 12.
    Returns None when the value does not start with a number.
    """
    match = USER_ID_PATTERN.match(raw)
    if match is None:
        return None
    return int(match.group(1))
