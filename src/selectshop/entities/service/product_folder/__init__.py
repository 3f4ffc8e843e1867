"""Entity package: ProductFolder."""

from .entity import ProductFolder
from .repository import ProductFolderRepository
from .table import ProductFolderTable

__all__ = ["ProductFolder", "ProductFolderRepository", "ProductFolderTable"]
