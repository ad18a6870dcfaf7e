"""
API routes for user registration.

Includes endpoints for:
- Service banner listing the available endpoints.
- Registering, listing, fetching and deleting users.
- Counting registered users.

Routes:
    GET /: Returns a welcome message and the endpoint listing.
    POST /users: Registers a new user.
    GET /users: Returns all users, most recently created first.
    GET /users/{user_id}: Returns a single user.
    DELETE /users/{user_id}: Deletes a user.
    GET /stats: Returns the number of registered users.
"""

from fastapi import APIRouter, Depends, Request

from app.translator import t
from models.user import (
    CountResponse,
    DeleteResponse,
    UserCreate,
    UserCreatedResponse,
    UserListResponse,
    UserResponse,
)
from registration.service import RegistrationService

router = APIRouter()


def get_service(request: Request) -> RegistrationService:
    """Return the registration service created at application startup."""
    return request.app.state.registration


@router.get("/", tags=["Service"])
def index(service: RegistrationService = Depends(get_service)):
    """
    Describe the service.

    Returns:
        dict: A welcome message, the service status and a map of the available endpoints.
    """
    lang = service.lang
    return {
        "message": t("api.welcome", lang),
        "status": "active",
        "endpoints": {
            "POST /users": t("api.endpoint.create", lang),
            "GET /users": t("api.endpoint.list", lang),
            "GET /users/{user_id}": t("api.endpoint.get", lang),
            "DELETE /users/{user_id}": t("api.endpoint.delete", lang),
            "GET /stats": t("api.endpoint.stats", lang),
        }
    }


@router.post("/users", response_model=UserCreatedResponse, tags=["Users"])
def create_user(payload: UserCreate, service: RegistrationService = Depends(get_service)):
    """
    Register a new user.

    Returns:
        dict: Success envelope with the stored user, including its generated id.
    """
    user = service.create_user(payload)
    return {"success": True, "message": t("users.created", service.lang), "data": user}


@router.get("/users", response_model=UserListResponse, tags=["Users"])
def list_users(service: RegistrationService = Depends(get_service)):
    users = service.list_users()
    return {"success": True, "total": len(users), "data": users}


@router.get("/users/{user_id}", response_model=UserResponse, tags=["Users"])
def get_user(user_id: str, service: RegistrationService = Depends(get_service)):
    return {"success": True, "data": service.get_user(user_id)}


@router.delete("/users/{user_id}", response_model=DeleteResponse, tags=["Users"])
def delete_user(user_id: str, service: RegistrationService = Depends(get_service)):
    deleted_id = service.delete_user(user_id)
    return {"success": True, "message": t("users.deleted", service.lang, user_id=deleted_id)}


@router.get("/stats", response_model=CountResponse, tags=["Stats"])
def stats(service: RegistrationService = Depends(get_service)):
    """
    Count registered users.

    Returns:
        dict: Success envelope with the total number of users.
    """
    return {"success": True, "total_users": service.count_users()}
