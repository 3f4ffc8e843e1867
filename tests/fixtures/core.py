from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from src.selectshop.core.services import FolderService, MessageResolver, ProductService
from src.selectshop.entities import (
    Folder,
    FolderRepository,
    Product,
    ProductRepository,
    User,
    UserRepository,
    UserRole,
)
from src.selectshop.runtime.config.config_data import MessagesConfig


@pytest.fixture
def engine() -> Generator[Engine]:
    """Fresh in-memory database with every catalog table created."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.selectshop.entities import (  # noqa: F401
        FolderTable,
        ProductFolderTable,
        ProductTable,
        UserTable,
    )

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()


@pytest.fixture
def message_resolver() -> MessageResolver:
    return MessageResolver.from_yaml(MessagesConfig().bundle, default_locale="en")


@pytest.fixture
def product_service(session: Session, message_resolver: MessageResolver) -> ProductService:
    return ProductService(session, message_resolver)


@pytest.fixture
def folder_service(session: Session) -> FolderService:
    return FolderService(session)


@pytest.fixture
def make_user(session: Session) -> Callable[..., User]:
    def _make_user(username: str, role: UserRole = UserRole.USER) -> User:
        user = UserRepository(session).create(
            User(username=username, email=f"{username}@example.com", role=role)
        )
        session.commit()
        return user

    return _make_user


@pytest.fixture
def user(make_user: Callable[..., User]) -> User:
    return make_user("alice")


@pytest.fixture
def other_user(make_user: Callable[..., User]) -> User:
    return make_user("bob")


@pytest.fixture
def admin(make_user: Callable[..., User]) -> User:
    return make_user("root", UserRole.ADMIN)


@pytest.fixture
def make_product(session: Session) -> Callable[..., Product]:
    def _make_product(
        owner: User, title: str = "Keyboard", lprice: int = 1000, myprice: int = 0
    ) -> Product:
        product = ProductRepository(session).create(
            Product(title=title, lprice=lprice, myprice=myprice, user_id=owner.id)
        )
        session.commit()
        return product

    return _make_product


@pytest.fixture
def make_folder(session: Session) -> Callable[..., Folder]:
    def _make_folder(owner: User, name: str = "Wishlist") -> Folder:
        folder = FolderRepository(session).create(Folder(name=name, user_id=owner.id))
        session.commit()
        return folder

    return _make_folder
