"""Entity package: Product."""

from .entity import Product
from .repository import SORTABLE_FIELDS, ProductRepository
from .table import ProductTable

__all__ = ["Product", "ProductRepository", "ProductTable", "SORTABLE_FIELDS"]
