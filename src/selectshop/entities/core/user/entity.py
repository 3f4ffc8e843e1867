"""User domain entity."""

from enum import StrEnum
from typing import Any

from pydantic import Field

from src.selectshop.entities.core._base import Entity


class UserRole(StrEnum):
    """Visibility scope of a user.

    USER sees only what it owns; ADMIN sees every user's products.
    """

    USER = "USER"
    ADMIN = "ADMIN"


class User(Entity):
    """User entity representing an account that tracks products.

    This is the domain model that contains business logic and validation.
    It inherits from Entity to get auto-generated UUID identifiers.
    """

    username: str = Field(description="Unique login name")
    email: str | None = Field(default=None, description="User's email address")
    role: UserRole = Field(default=UserRole.USER, description="Visibility role")

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.username == other.username
            and self.email == other.email
            and self.role == other.role
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.username, self.email, self.role))
