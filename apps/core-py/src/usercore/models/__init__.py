"""Core models package."""

from usercore.models.dto import CreateUserRequest, UpdateUserRequest, UserResponse
from usercore.models.user import User, apply_update, generate_user_id

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "User",
    "UserResponse",
    "apply_update",
    "generate_user_id",
]
