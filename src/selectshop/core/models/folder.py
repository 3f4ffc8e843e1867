"""Request and view models for folders."""

from pydantic import BaseModel, Field

from src.selectshop.entities.service.folder import Folder


class FolderRequest(BaseModel):
    names: list[str] = Field(min_length=1, description="Folder names to create")


class FolderView(BaseModel):
    id: str
    name: str

    @classmethod
    def from_entity(cls, folder: Folder) -> "FolderView":
        return cls.model_validate(folder, from_attributes=True)
