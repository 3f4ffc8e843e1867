"""Entity: ProductFolder."""

from pydantic import Field

from src.selectshop.entities.core._base import Entity


class ProductFolder(Entity):
    """Membership of one product in one folder.

    Created once by the folder association operation and never updated.
    """

    product_id: str = Field(description="Linked product ID")
    folder_id: str = Field(description="Linked folder ID")
