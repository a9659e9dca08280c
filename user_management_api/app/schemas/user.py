"""
Pydantic models for user data.

Fields default to empty values instead of being required so that a
payload with a missing ``name`` reaches ``UserService.validate_user``
and is rejected with a readable message rather than a generic schema
error.  Fields are validated strictly, so a wrongly typed value such
as ``"age": "30"`` is rejected by pydantic instead of being converted.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    # No coercion: "30", true or 30.0 for ``age`` is a malformed body.
    model_config = ConfigDict(strict=True)

    name: str = Field("", examples=["John Doe"])
    email: str = Field("", examples=["john@example.com"])
    age: int = Field(0, examples=[30], description="Age in years, 1 to 150")


class UserCreate(UserBase):
    """Schema for creating a user.  The id is assigned by the server."""


class UserUpdate(UserBase):
    """Schema for replacing a user's data.

    All fields are written; omitted fields are treated as empty and
    therefore fail validation.  The user id never changes.
    """


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
