"""User Schemas.

Invariants:
    - email is not checked for uniqueness anywhere
    - password is echoed back in UserResponse exactly as stored
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=255)


class UserUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, min_length=1, max_length=255)
    password: str | None = Field(None, min_length=1, max_length=255)


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    password: str
