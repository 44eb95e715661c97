"""Request and response models crossing the service boundary."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from usercore.models.user import User


class CreateUserRequest(BaseModel):
    """Request model for creating a user.

    Fields are optional here; a missing name or email is rejected by the
    User entity with the same errors as a malformed one.
    """

    name: str | None = Field(None, description="Full name of the user")
    email: str | None = Field(None, description="Email address of the user")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Juan Pérez",
                "email": "juan@example.com",
            }
        }
    )


class UpdateUserRequest(BaseModel):
    """Request model for updating a user. Omitted fields keep their value."""

    user_id: str = Field(..., description="Identifier of the user to update")
    name: str | None = Field(None, description="New full name")
    email: str | None = Field(None, description="New email address")


class UserResponse(BaseModel):
    """User as seen by callers of the service."""

    user_id: str = Field(..., description="Unique identifier for the user")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "user_id": "usr_m1x2y3zabc1234",
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
                "created_at": "2024-01-01T00:00:00Z",
            }
        },
    )

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Project a user entity onto the response shape."""
        return cls(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )
