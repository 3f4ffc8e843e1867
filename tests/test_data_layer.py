"""Consolidated data layer tests.

This module covers:
- Entity creation, defaults and equality
- Entity-table conversions and table constraints
- Repository operations against an in-memory SQLite database
- Paged and sorted product queries
"""

from uuid import UUID

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.selectshop.core.exceptions import InvalidArgumentError
from src.selectshop.core.models.paging import PageRequest
from src.selectshop.entities import (
    Folder,
    FolderRepository,
    Product,
    ProductFolder,
    ProductFolderRepository,
    ProductFolderTable,
    ProductRepository,
    ProductTable,
    User,
    UserRepository,
    UserRole,
    UserTable,
)


class TestEntities:
    """Test domain entities."""

    def test_user_defaults(self):
        """User should get a UUID, timestamps and the USER role by default."""
        user = User(username="alice")

        UUID(user.id)  # Raises ValueError if invalid
        assert user.role is UserRole.USER
        assert not user.is_admin
        assert user.created_at is not None

    def test_user_role_from_string(self):
        """Roles stored as text should load back into the enum."""
        user = User(username="root", role="ADMIN")

        assert user.role is UserRole.ADMIN
        assert user.is_admin

    def test_user_equality_ignores_timestamps(self):
        first = User(id="1", username="alice", email="a@example.com")
        second = User(id="1", username="alice", email="a@example.com")
        other = User(id="2", username="bob")

        assert first == second
        assert first != other
        assert hash(first) == hash(second)

    def test_product_defaults(self):
        """A freshly registered product has no target price yet."""
        product = Product(title="Mouse", lprice=5000, user_id="owner")

        assert product.myprice == 0
        assert product.image is None
        assert product.link is None

    def test_product_rejects_negative_prices(self):
        with pytest.raises(ValueError):
            Product(title="Mouse", lprice=-1, user_id="owner")

    def test_product_equality(self):
        first = Product(id="p1", title="Mouse", lprice=10, user_id="u1")
        second = Product(id="p1", title="Mouse", lprice=10, user_id="u1")

        assert first == second
        assert first != Product(id="p1", title="Mouse", lprice=10, myprice=200, user_id="u1")


class TestTables:
    """Test table models and constraints."""

    def test_table_model_from_entity(self):
        product = Product(title="Monitor", lprice=300000, user_id="owner")

        table = ProductTable.model_validate(product, from_attributes=True)

        assert table.id == product.id
        assert table.title == "Monitor"
        assert table.lprice == 300000

    def test_entity_from_table_model(self):
        table = UserTable(id="u1", username="carol", role=UserRole.ADMIN)

        user = User.model_validate(table, from_attributes=True)

        assert user.id == "u1"
        assert user.role is UserRole.ADMIN

    def test_username_is_unique(self, session: Session):
        session.add(UserTable(username="dup"))
        session.commit()

        session.add(UserTable(username="dup"))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_product_folder_pair_is_unique(self, session: Session, user, make_product, make_folder):
        product = make_product(user)
        folder = make_folder(user)

        session.add(ProductFolderTable(product_id=product.id, folder_id=folder.id))
        session.commit()

        session.add(ProductFolderTable(product_id=product.id, folder_id=folder.id))
        with pytest.raises(IntegrityError):
            session.commit()


class TestUserRepository:
    def test_create_and_get(self, session: Session):
        repo = UserRepository(session)

        created = repo.create(User(username="dave", role=UserRole.ADMIN))

        fetched = repo.get(created.id)
        assert fetched == created
        assert fetched.role is UserRole.ADMIN

    def test_get_by_username(self, session: Session, user: User):
        repo = UserRepository(session)

        assert repo.get_by_username("alice") == user
        assert repo.get_by_username("nobody") is None

    def test_get_nonexistent_user(self, session: Session):
        assert UserRepository(session).get("nonexistent-id") is None


class TestProductRepository:
    @pytest.fixture
    def product_repo(self, session: Session) -> ProductRepository:
        return ProductRepository(session)

    def test_create_product(self, product_repo: ProductRepository, user: User):
        created = product_repo.create(
            Product(title="Desk", lprice=150000, link="https://shop/desk", user_id=user.id)
        )

        assert created.title == "Desk"
        assert created.user_id == user.id
        assert product_repo.get(created.id) == created

    def test_update_product(self, product_repo: ProductRepository, user: User, make_product):
        product = make_product(user)

        product.myprice = 700
        product.link = "https://shop/new"
        updated = product_repo.update(product)

        assert updated.myprice == 700
        assert product_repo.get(product.id).link == "https://shop/new"

    def test_update_missing_product(self, product_repo: ProductRepository):
        with pytest.raises(ValueError, match="not found"):
            product_repo.update(Product(title="Ghost", user_id="nobody"))

    def test_list_by_owner_filters_other_users(
        self, product_repo: ProductRepository, user: User, other_user: User, make_product
    ):
        make_product(user, title="A")
        make_product(user, title="B")
        make_product(other_user, title="C")

        page = product_repo.list_by_owner(user.id, PageRequest(size=10))

        assert page.total == 2
        assert {p.title for p in page.items} == {"A", "B"}

    def test_list_all_sorted_descending(
        self, product_repo: ProductRepository, user: User, other_user: User, make_product
    ):
        make_product(user, title="Cheap", lprice=100)
        make_product(other_user, title="Pricey", lprice=900)
        make_product(user, title="Middle", lprice=500)

        page = product_repo.list_all(PageRequest(sort_by="lprice", ascending=False))

        assert [p.title for p in page.items] == ["Pricey", "Middle", "Cheap"]

    def test_pages_do_not_overlap(self, product_repo: ProductRepository, user: User, make_product):
        for i in range(5):
            make_product(user, title=f"Item {i}", lprice=1000)

        first = product_repo.list_by_owner(user.id, PageRequest(page=0, size=2, sort_by="lprice"))
        second = product_repo.list_by_owner(user.id, PageRequest(page=1, size=2, sort_by="lprice"))
        third = product_repo.list_by_owner(user.id, PageRequest(page=2, size=2, sort_by="lprice"))

        ids = [p.id for page in (first, second, third) for p in page.items]
        assert len(ids) == len(set(ids)) == 5
        assert first.total_pages == 3

    def test_out_of_range_page_is_empty(self, product_repo: ProductRepository, user: User, make_product):
        make_product(user)

        page = product_repo.list_by_owner(user.id, PageRequest(page=4, size=10))

        assert page.items == []
        assert page.total == 1

    def test_unknown_sort_field(self, product_repo: ProductRepository):
        with pytest.raises(InvalidArgumentError, match="user_id; DROP"):
            product_repo.list_all(PageRequest(sort_by="user_id; DROP"))

    def test_list_by_owner_and_folder(
        self, session: Session, product_repo: ProductRepository, user: User, make_product, make_folder
    ):
        in_folder = make_product(user, title="In")
        make_product(user, title="Out")
        folder = make_folder(user)
        ProductFolderRepository(session).create(
            ProductFolder(product_id=in_folder.id, folder_id=folder.id)
        )
        session.commit()

        page = product_repo.list_by_owner_and_folder(user.id, folder.id, PageRequest())

        assert [p.title for p in page.items] == ["In"]
        assert page.total == 1


class TestFolderRepository:
    def test_create_and_lookup(self, session: Session, user: User):
        repo = FolderRepository(session)

        folder = repo.create(Folder(name="Gadgets", user_id=user.id))

        assert repo.get(folder.id) == folder
        assert repo.get_by_owner_and_name(user.id, "Gadgets") == folder
        assert repo.get_by_owner_and_name(user.id, "Other") is None

    def test_list_by_owner(self, session: Session, user: User, other_user: User, make_folder):
        make_folder(user, "One")
        make_folder(user, "Two")
        make_folder(other_user, "Three")

        names = {f.name for f in FolderRepository(session).list_by_owner(user.id)}

        assert names == {"One", "Two"}


class TestProductFolderRepository:
    def test_get_by_product_and_folder(self, session: Session, user: User, make_product, make_folder):
        repo = ProductFolderRepository(session)
        product = make_product(user)
        folder = make_folder(user)

        assert repo.get_by_product_and_folder(product.id, folder.id) is None

        link = repo.create(ProductFolder(product_id=product.id, folder_id=folder.id))
        session.commit()

        assert repo.get_by_product_and_folder(product.id, folder.id) == link

        rows = session.exec(select(ProductFolderTable)).all()
        assert len(rows) == 1
