"""Entity: Product."""

from typing import Any

from pydantic import Field

from src.selectshop.entities.core._base import Entity


class Product(Entity):
    """A price-watch item tracked by exactly one user.

    ``lprice`` is the lowest listed price from the catalog search and
    ``myprice`` is the user's target price, both in the smallest currency unit.
    """

    title: str = Field(description="Product name")
    image: str | None = Field(default=None, description="Image URL")
    link: str | None = Field(default=None, description="Shop link")
    lprice: int = Field(default=0, ge=0, description="Listed price")
    myprice: int = Field(default=0, ge=0, description="Target price")
    user_id: str = Field(description="Owning user ID")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.lprice == other.lprice
            and self.myprice == other.myprice
            and self.user_id == other.user_id
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.lprice,
            self.myprice,
            self.user_id,
        ))
