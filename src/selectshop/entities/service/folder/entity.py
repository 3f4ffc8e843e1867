"""Entity: Folder."""

from pydantic import Field

from src.selectshop.entities.core._base import Entity


class Folder(Entity):
    """A user-owned, named grouping of products."""

    name: str = Field(description="Folder name, unique per owner")
    user_id: str = Field(description="Owning user ID")
