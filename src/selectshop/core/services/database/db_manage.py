"""Schema management for the catalog database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        # table modules register themselves with SQLModel.metadata on import
        from src.selectshop.entities import (  # noqa: F401
            FolderTable,
            ProductFolderTable,
            ProductTable,
            UserTable,
        )

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        from src.selectshop.entities import (  # noqa: F401
            FolderTable,
            ProductFolderTable,
            ProductTable,
            UserTable,
        )

        SQLModel.metadata.drop_all(self._engine)
        logger.warning("All catalog tables dropped.")
