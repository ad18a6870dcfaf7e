"""
Request, record and response schemas.
"""
from models.user import (
    CountResponse,
    DeleteResponse,
    NewUser,
    User,
    UserCreate,
    UserCreatedResponse,
    UserListResponse,
    UserResponse,
)
