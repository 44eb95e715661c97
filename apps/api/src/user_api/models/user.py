"""HTTP request bodies for the users API."""

from pydantic import BaseModel, Field


class UserPatch(BaseModel):
    """Body of PATCH /users/{user_id}. Omitted fields are left unchanged."""

    name: str | None = Field(None, description="New full name")
    email: str | None = Field(None, description="New email address")
