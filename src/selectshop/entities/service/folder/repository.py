"""Folder repository for data access operations."""

from sqlmodel import Session, select

from src.selectshop.entities.service.folder.entity import Folder
from src.selectshop.entities.service.folder.table import FolderTable


class FolderRepository:
    """Data-access layer for folders."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, folder_id: str) -> Folder | None:
        row = self._session.get(FolderTable, folder_id)
        if row is None:
            return None
        return Folder.model_validate(row, from_attributes=True)

    def get_by_owner_and_name(self, user_id: str, name: str) -> Folder | None:
        statement = select(FolderTable).where(
            (FolderTable.user_id == user_id) & (FolderTable.name == name)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Folder.model_validate(row, from_attributes=True)

    def list_by_owner(self, user_id: str) -> list[Folder]:
        statement = (
            select(FolderTable)
            .where(FolderTable.user_id == user_id)
            .order_by(FolderTable.created_at, FolderTable.id)
        )
        rows = self._session.exec(statement).all()
        return [Folder.model_validate(row, from_attributes=True) for row in rows]

    def create(self, folder: Folder) -> Folder:
        row = FolderTable.model_validate(folder, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Folder.model_validate(row, from_attributes=True)
