"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity with business logic
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import User, UserRole
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserRole", "UserTable", "UserRepository"]
