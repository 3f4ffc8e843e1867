"""Ownership checks shared by every operation that touches user data."""

from typing import Protocol

from src.selectshop.entities.core.user import User


class Owned(Protocol):
    user_id: str


def is_owned_by(entity: Owned, user: User) -> bool:
    """Return True when ``user`` owns ``entity``.

    Ownership is fixed at creation, so a plain identifier comparison is
    enough. Roles play no part here: an ADMIN does not own other users' data.
    """
    return entity.user_id == user.id


def owns_all(user: User, *entities: Owned) -> bool:
    return all(is_owned_by(entity, user) for entity in entities)
