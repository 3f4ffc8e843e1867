"""Entities module with hybrid entity-centric structure.

This module organizes entities by business concept rather than technical layer.
Each entity has its own package containing:
- entity.py: Domain model with business logic
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core.user import User, UserRepository, UserRole, UserTable
from .service.folder import Folder, FolderRepository, FolderTable
from .service.product import Product, ProductRepository, ProductTable
from .service.product_folder import (
    ProductFolder,
    ProductFolderRepository,
    ProductFolderTable,
)

__all__ = [
    "User",
    "UserRole",
    "UserTable",
    "UserRepository",
    "Product",
    "ProductTable",
    "ProductRepository",
    "Folder",
    "FolderTable",
    "FolderRepository",
    "ProductFolder",
    "ProductFolderTable",
    "ProductFolderRepository",
]
