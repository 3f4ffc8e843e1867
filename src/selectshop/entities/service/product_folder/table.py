"""Product-folder link table model."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.selectshop.entities.core._base import EntityTable


class ProductFolderTable(EntityTable, table=True):
    """Join table between products and folders.

    The unique constraint backs up the duplicate check done by the service
    when two association requests race.
    """

    __table_args__ = (
        UniqueConstraint("product_id", "folder_id", name="uq_product_folder"),
    )

    product_id: str = Field(foreign_key="producttable.id", index=True)
    folder_id: str = Field(foreign_key="foldertable.id", index=True)
