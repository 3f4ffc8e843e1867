from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.selectshop.core.exceptions import InvalidArgumentError, NotFoundError
from src.selectshop.core.models.paging import Page, PageRequest
from src.selectshop.core.models.product import (
    CatalogItem,
    ProductMyPriceRequest,
    ProductRequest,
    ProductView,
)
from src.selectshop.core.security import is_owned_by, owns_all
from src.selectshop.core.services.database.db_utils import transaction
from src.selectshop.core.services.messages import MessageResolver
from src.selectshop.entities.core.user import User, UserRole
from src.selectshop.entities.service.folder import Folder, FolderRepository
from src.selectshop.entities.service.product import Product, ProductRepository
from src.selectshop.entities.service.product_folder import (
    ProductFolder,
    ProductFolderRepository,
)

MIN_MY_PRICE = 100

PRODUCT_MISSING = "Product does not exist."
FOLDER_MISSING = "Folder does not exist."
NOT_OWNER = "This is not your product or not your folder."
DUPLICATE_FOLDER = "Duplicate folder."


def _page_request(page: int, size: int, sort_by: str, ascending: bool) -> PageRequest:
    try:
        return PageRequest(page=page, size=size, sort_by=sort_by, ascending=ascending)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"Invalid page request (page={page}, size={size})"
        ) from e


class ProductService:
    """Interest-product lifecycle: registration, price updates, listing and folders."""

    def __init__(
        self,
        db_session: Session,
        message_resolver: MessageResolver,
        locale: str | None = None,
    ):
        self._db_session = db_session
        self._messages = message_resolver
        self._locale = locale
        self._product_repo = ProductRepository(db_session)
        self._folder_repo = FolderRepository(db_session)
        self._link_repo = ProductFolderRepository(db_session)

    def create_product(self, request: ProductRequest, user: User) -> ProductView:
        with transaction(self._db_session):
            product = self._product_repo.create(
                Product(
                    title=request.title,
                    image=request.image,
                    link=request.link,
                    lprice=request.lprice,
                    user_id=user.id,
                )
            )
        logger.info("User {} registered product {}", user.id, product.id)
        return ProductView.from_entity(product)

    def update_my_price(
        self, product_id: str, request: ProductMyPriceRequest
    ) -> ProductView:
        myprice = request.myprice
        if myprice < MIN_MY_PRICE:
            logger.warning(
                "Rejected target price {} for product {}", myprice, product_id
            )
            raise InvalidArgumentError(
                self._messages.resolve(
                    "below.min.my.price", [MIN_MY_PRICE], "Wrong Price", self._locale
                )
            )

        with transaction(self._db_session):
            product = self._product_repo.get(product_id)
            if product is None:
                raise NotFoundError(
                    self._messages.resolve(
                        "not.found.product", None, "Not Found Product", self._locale
                    )
                )
            product.myprice = myprice
            product = self._product_repo.update(product)

        logger.info("Product {} target price set to {}", product_id, myprice)
        return ProductView.from_entity(product)

    def list_products(
        self, user: User, page: int, size: int, sort_by: str, ascending: bool
    ) -> Page[ProductView]:
        page_request = _page_request(page, size, sort_by, ascending)

        if user.role is UserRole.ADMIN:
            products = self._product_repo.list_all(page_request)
        else:
            products = self._product_repo.list_by_owner(user.id, page_request)

        return products.map(ProductView.from_entity)

    def update_from_external_search(self, product_id: str, item: CatalogItem) -> None:
        with transaction(self._db_session):
            product = self._product_repo.get(product_id)
            if product is None:
                raise NotFoundError(PRODUCT_MISSING)
            product.lprice = item.lprice
            product.image = item.image
            product.link = item.link
            self._product_repo.update(product)

        logger.debug("Product {} synchronized from catalog search", product_id)

    def add_product_to_folder(self, product_id: str, folder_id: str, user: User) -> None:
        try:
            with transaction(self._db_session):
                product = self._product_repo.get(product_id)
                if product is None:
                    raise NotFoundError(PRODUCT_MISSING)

                folder = self._folder_repo.get(folder_id)
                if folder is None:
                    raise NotFoundError(FOLDER_MISSING)

                if not owns_all(user, product, folder):
                    logger.warning(
                        "User {} tried to link product {} into folder {} without owning both",
                        user.id,
                        product_id,
                        folder_id,
                    )
                    raise InvalidArgumentError(NOT_OWNER)

                if self._link_repo.get_by_product_and_folder(product.id, folder.id) is not None:
                    raise InvalidArgumentError(DUPLICATE_FOLDER)

                self._link_repo.create(
                    ProductFolder(product_id=product.id, folder_id=folder.id)
                )
        except IntegrityError as e:
            # a concurrent request inserted the same pair after our check
            raise InvalidArgumentError(DUPLICATE_FOLDER) from e
        logger.info("Product {} added to folder {}", product_id, folder_id)

    def list_products_in_folder(
        self,
        folder_id: str,
        page: int,
        size: int,
        sort_by: str,
        ascending: bool,
        user: User,
    ) -> Page[ProductView]:
        self._get_owned_folder(folder_id, user)

        page_request = _page_request(page, size, sort_by, ascending)
        products = self._product_repo.list_by_owner_and_folder(
            user.id, folder_id, page_request
        )
        return products.map(ProductView.from_entity)

    def _get_owned_folder(self, folder_id: str, user: User) -> Folder:
        folder = self._folder_repo.get(folder_id)
        if folder is None:
            raise NotFoundError(FOLDER_MISSING)
        if not is_owned_by(folder, user):
            raise InvalidArgumentError(NOT_OWNER)
        return folder
