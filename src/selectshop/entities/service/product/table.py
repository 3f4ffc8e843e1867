"""Product database table model."""

from sqlmodel import Field

from src.selectshop.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    title: str
    image: str | None = None
    link: str | None = None
    lprice: int = 0
    myprice: int = 0
    user_id: str = Field(foreign_key="usertable.id", index=True)
