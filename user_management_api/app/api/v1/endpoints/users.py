"""
User endpoints for API v1.

CRUD and name search over the in‑memory user store.  Every handler
answers with the ``APIResponse`` envelope; failures are raised as
``HTTPException`` and rendered by the handlers installed in
``main.create_app``.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import ValidationError

from user_management_api.app.schemas.response import success_response
from user_management_api.app.schemas.user import UserCreate, UserUpdate
from user_management_api.app.services.user_service import UserService


router = APIRouter()

USER_NOT_FOUND = "User not found."
INVALID_BODY = "Invalid JSON format or missing fields."
MISSING_SEARCH_NAME = "Missing 'name' query parameter for search."


@router.get("")
async def list_users():
    """Return every user in insertion order."""
    users = await UserService.list_users()
    return success_response(data=users)


# Registered before ``/{user_id}`` so that "search" is not parsed as an id.
@router.get("/search")
async def search_users(name: Optional[str] = Query(None, description="Case-insensitive substring of the name")):
    """Find users whose name contains ``name``, ignoring case.

    Returns HTTP 400 if ``name`` is missing or empty.  No match is not
    an error: the result is simply an empty list.
    """
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_SEARCH_NAME)
    users = await UserService.search_users(name)
    return success_response(data=users)


@router.get("/{user_id}")
async def get_user(user_id: int):
    """Retrieve a single user by ID.  Returns HTTP 404 if absent."""
    user = await UserService.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return success_response(data=user)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate):
    """Create a user and return it with its server‑assigned id."""
    try:
        created = await UserService.create_user(user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return success_response(
        data=created,
        message="User created successfully.",
        code=status.HTTP_201_CREATED,
    )


@router.put("/{user_id}")
async def update_user(user_id: int, request: Request):
    """Replace a user's name, email and age.

    The raw body is read only after the user is known to exist, so an
    unknown id yields 404 even when the payload is not valid JSON.
    """
    if await UserService.get_user(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    try:
        data = UserUpdate.model_validate(await request.json())
    except (ValueError, ValidationError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_BODY)
    try:
        updated = await UserService.update_user(user_id, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return success_response(data=updated, message="User updated successfully.")


@router.delete("/{user_id}")
async def delete_user(user_id: int):
    """Delete a user by ID.  Returns HTTP 404 if absent."""
    deleted = await UserService.delete_user(user_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return success_response(message="User deleted successfully.")
