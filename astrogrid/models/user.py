"""
User profile model.

The session-facing view of a user row: no password material.

Dependencies: pydantic
System role: Return type of the credential lookup service
"""

from typing import Any

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """Authenticated user as exposed to callers."""

    uid: int = Field(description="User primary key")
    display_name: str = Field(description="User display name")
    email: str = Field(description="Login email")
    role: str = Field(default="Observer", description="Access role")

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "UserProfile":
        return cls(
            uid=row["id"],
            display_name=row["name"],
            email=row["email"],
            role=row.get("role") or "Observer",
        )
