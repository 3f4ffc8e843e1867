"""Core services exports."""

# Catalog Services
from .catalog import MIN_MY_PRICE, FolderService, ProductService

# Database Service
from .database import DbManageService, DbSessionService, transaction

# Message Resolution
from .messages import MessageResolver

__all__ = [
    # Catalog Services
    "FolderService",
    "MIN_MY_PRICE",
    "ProductService",
    # Database Service
    "DbManageService",
    "DbSessionService",
    "transaction",
    # Message Resolution
    "MessageResolver",
]
