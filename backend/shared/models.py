"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class UserRole(str, Enum):
    """Role a user acts in on the marketplace."""

    DRIVER = "driver"
    PASSENGER = "passenger"
    ADMIN = "admin"


class Identity(BaseModel):
    """
    The authenticated user of a session.

    Created on login or registration and persisted in the session's
    storage slot until logout. Every capability gate is derived from it.
    """

    id: str = Field(..., description="User ID")
    display_name: str = Field(..., description="Name shown to other users")
    email: EmailStr = Field(..., description="User's email address")
    role: UserRole = Field(default=UserRole.PASSENGER, description="Marketplace role")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
