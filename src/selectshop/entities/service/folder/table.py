"""Folder database table model."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.selectshop.entities.core._base import EntityTable


class FolderTable(EntityTable, table=True):
    """Database persistence model for folders."""

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_folder_user_name"),
    )

    name: str
    user_id: str = Field(foreign_key="usertable.id", index=True)
