from pydantic import BaseModel, Field


class UserProjection(BaseModel):
    """Public view of an account. Never carries the password."""

    id: str = Field(..., description="User id")
    email: str = Field(..., description="User email")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")


class SessionProjection(BaseModel):
    """Result of a successful login."""

    user: UserProjection
    token: str = Field(..., description="Session token")
