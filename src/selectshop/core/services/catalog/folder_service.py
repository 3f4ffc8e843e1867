from loguru import logger
from sqlmodel import Session

from src.selectshop.core.exceptions import InvalidArgumentError
from src.selectshop.core.models.folder import FolderView
from src.selectshop.core.services.database.db_utils import transaction
from src.selectshop.entities.core.user import User
from src.selectshop.entities.service.folder import Folder, FolderRepository


class FolderService:
    """Creation and listing of a user's folders."""

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._folder_repo = FolderRepository(db_session)

    def add_folders(self, names: list[str], user: User) -> list[FolderView]:
        """Create one folder per name, or none at all if any name is rejected."""
        cleaned = [name.strip() for name in names]
        if not cleaned or any(not name for name in cleaned):
            raise InvalidArgumentError("Folder names must not be blank.")

        if len(set(cleaned)) != len(cleaned):
            raise InvalidArgumentError("Remove duplicate folder names.")

        taken = [
            name
            for name in cleaned
            if self._folder_repo.get_by_owner_and_name(user.id, name) is not None
        ]
        if taken:
            raise InvalidArgumentError(f"Folder already exists: {', '.join(taken)}")

        with transaction(self._db_session):
            created = [
                self._folder_repo.create(Folder(name=name, user_id=user.id))
                for name in cleaned
            ]

        logger.info("User {} created {} folder(s)", user.id, len(created))
        return [FolderView.from_entity(folder) for folder in created]

    def get_folders(self, user: User) -> list[FolderView]:
        return [
            FolderView.from_entity(folder)
            for folder in self._folder_repo.list_by_owner(user.id)
        ]
