"""
User schema definitions.

Defines the loosely typed request body accepted at the HTTP boundary, the
validated value handed to the database layer, the stored record and the
success envelopes returned to the caller.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr


class UserCreate(BaseModel):
    """
    Registration request body as sent by the client form.

    Fields are optional here so that missing values are reported by the
    registration validators with their own messages, in their own order.

    Attributes:
        full_name (str | None): User's full name.
        email (str | None): User's email address.
        age (int | float | str | None): Age, as a number or a numeric string.
    """

    full_name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    age: Optional[Union[StrictInt, StrictFloat, StrictStr]] = None


class NewUser(BaseModel):
    """
    Validated and normalized registration data, ready to be inserted.

    Attributes:
        full_name (str): Trimmed full name.
        email (str): Trimmed, lowercased email address.
        age (int): Age between 1 and 150.
    """

    model_config = ConfigDict(frozen=True)

    full_name: str
    email: str
    age: int

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump()


class User(BaseModel):
    """
    Stored user record.

    Columns not listed here (e.g. ``created_at``) are passed through untouched.

    Attributes:
        id (int): Identifier generated by the database.
        full_name (str): User's full name.
        email (str): User's email address. Unique.
        age (int): User's age.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    full_name: str
    email: str
    age: int


class UserResponse(BaseModel):
    success: bool = True
    data: User


class UserCreatedResponse(UserResponse):
    message: str


class UserListResponse(BaseModel):
    success: bool = True
    total: int
    data: List[User]


class DeleteResponse(BaseModel):
    success: bool = True
    message: str


class CountResponse(BaseModel):
    success: bool = True
    total_users: int
