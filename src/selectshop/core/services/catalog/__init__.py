from .folder_service import FolderService
from .product_service import MIN_MY_PRICE, ProductService

__all__ = ["FolderService", "MIN_MY_PRICE", "ProductService"]
