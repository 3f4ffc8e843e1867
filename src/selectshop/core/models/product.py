"""Request and view models for products."""

from pydantic import BaseModel, Field

from src.selectshop.entities.service.product import Product


class ProductRequest(BaseModel):
    """Registration of a new interest product picked from a catalog search."""

    title: str = Field(min_length=1)
    image: str | None = None
    link: str | None = None
    lprice: int = Field(default=0, ge=0)


class ProductMyPriceRequest(BaseModel):
    # the price floor is a business rule, checked by the service
    myprice: int


class CatalogItem(BaseModel):
    """An item as returned by the external catalog search."""

    title: str
    link: str | None = None
    image: str | None = None
    lprice: int = Field(default=0, ge=0)


class ProductView(BaseModel):
    id: str
    title: str
    image: str | None = None
    link: str | None = None
    lprice: int
    myprice: int

    @classmethod
    def from_entity(cls, product: Product) -> "ProductView":
        return cls.model_validate(product, from_attributes=True)
