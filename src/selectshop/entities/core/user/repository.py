"""User repository for data access operations."""

from sqlmodel import Session, select

from src.selectshop.entities.core.user.entity import User
from src.selectshop.entities.core.user.table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_username(self, username: str) -> User | None:
        statement = select(UserTable).where(UserTable.username == username)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def create(self, user: User) -> User:
        row = UserTable.model_validate(user, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)
