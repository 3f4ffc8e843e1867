"""Unit tests for FolderService."""

import pytest
from sqlmodel import Session

from src.selectshop.core.exceptions import InvalidArgumentError
from src.selectshop.core.services import FolderService
from src.selectshop.entities import FolderRepository


class TestAddFolders:
    def test_creates_one_folder_per_name(self, folder_service: FolderService, session: Session, user):
        created = folder_service.add_folders(["Keyboards", "Monitors"], user)

        assert {f.name for f in created} == {"Keyboards", "Monitors"}
        stored = FolderRepository(session).list_by_owner(user.id)
        assert {f.id for f in stored} == {f.id for f in created}
        assert all(f.user_id == user.id for f in stored)

    def test_names_are_trimmed(self, folder_service: FolderService, user):
        created = folder_service.add_folders(["  Desk  "], user)

        assert created[0].name == "Desk"

    @pytest.mark.parametrize("names", [[], [""], ["ok", "   "]])
    def test_blank_names_are_rejected(self, folder_service: FolderService, session: Session, user, names):
        with pytest.raises(InvalidArgumentError, match="must not be blank"):
            folder_service.add_folders(names, user)

        assert FolderRepository(session).list_by_owner(user.id) == []

    def test_repeated_name_creates_nothing(self, folder_service: FolderService, session: Session, user):
        with pytest.raises(InvalidArgumentError, match="duplicate"):
            folder_service.add_folders(["Gifts", "Sale", " Gifts"], user)

        assert FolderRepository(session).list_by_owner(user.id) == []

    def test_existing_name_creates_nothing(
        self, folder_service: FolderService, session: Session, user, make_folder
    ):
        make_folder(user, "Gifts")

        with pytest.raises(InvalidArgumentError, match="Folder already exists: Gifts"):
            folder_service.add_folders(["New", "Gifts"], user)

        names = {f.name for f in FolderRepository(session).list_by_owner(user.id)}
        assert names == {"Gifts"}

    def test_same_name_for_different_users(self, folder_service: FolderService, user, other_user, make_folder):
        make_folder(other_user, "Gifts")

        created = folder_service.add_folders(["Gifts"], user)

        assert created[0].name == "Gifts"


class TestGetFolders:
    def test_returns_only_own_folders(self, folder_service: FolderService, user, other_user, make_folder):
        mine = make_folder(user, "Mine")
        make_folder(other_user, "Theirs")

        folders = folder_service.get_folders(user)

        assert [(f.id, f.name) for f in folders] == [(mine.id, "Mine")]

    def test_no_folders(self, folder_service: FolderService, user):
        assert folder_service.get_folders(user) == []
