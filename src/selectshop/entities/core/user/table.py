"""User database table model."""

from sqlalchemy import Column, String
from sqlmodel import Field

from src.selectshop.entities.core._base import EntityTable
from src.selectshop.entities.core.user.entity import UserRole


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    username: str = Field(
        sa_column=Column(String(64), nullable=False, unique=True, index=True)
    )
    email: str | None = None
    role: UserRole = Field(
        default=UserRole.USER, sa_column=Column(String(16), nullable=False)
    )
