"""Entity package: Folder."""

from .entity import Folder
from .repository import FolderRepository
from .table import FolderTable

__all__ = ["Folder", "FolderRepository", "FolderTable"]
