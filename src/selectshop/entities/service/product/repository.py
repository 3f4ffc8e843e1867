"""Product repository for data access operations."""

from sqlalchemy import func
from sqlmodel import Session, select
from sqlmodel.sql.expression import SelectOfScalar

from src.selectshop.core.exceptions import InvalidArgumentError
from src.selectshop.core.models.paging import Page, PageRequest
from src.selectshop.entities.core._base import utc_now
from src.selectshop.entities.service.product.entity import Product
from src.selectshop.entities.service.product.table import ProductTable
from src.selectshop.entities.service.product_folder.table import ProductFolderTable

SORTABLE_FIELDS = frozenset(
    {"id", "title", "lprice", "myprice", "created_at", "updated_at"}
)


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: str) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def create(self, product: Product) -> Product:
        row = ProductTable.model_validate(product, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def update(self, product: Product) -> Product:
        row = self._session.get(ProductTable, product.id)
        if row is None:
            raise ValueError(f"Product {product.id} not found")

        for field in ("title", "image", "link", "lprice", "myprice"):
            setattr(row, field, getattr(product, field))
        row.updated_at = utc_now()

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def list_all(self, page_request: PageRequest) -> Page[Product]:
        return self._paginate(select(ProductTable), page_request)

    def list_by_owner(self, user_id: str, page_request: PageRequest) -> Page[Product]:
        statement = select(ProductTable).where(ProductTable.user_id == user_id)
        return self._paginate(statement, page_request)

    def list_by_owner_and_folder(
        self, user_id: str, folder_id: str, page_request: PageRequest
    ) -> Page[Product]:
        statement = (
            select(ProductTable)
            .join(ProductFolderTable, ProductFolderTable.product_id == ProductTable.id)
            .where(
                (ProductTable.user_id == user_id)
                & (ProductFolderTable.folder_id == folder_id)
            )
        )
        return self._paginate(statement, page_request)

    def _paginate(
        self, statement: SelectOfScalar[ProductTable], page_request: PageRequest
    ) -> Page[Product]:
        if page_request.sort_by not in SORTABLE_FIELDS:
            raise InvalidArgumentError(
                f"Cannot sort products by '{page_request.sort_by}'"
            )

        count_statement = select(func.count()).select_from(statement.subquery())
        total = self._session.exec(count_statement).one()

        column = getattr(ProductTable, page_request.sort_by)
        order = column.asc() if page_request.ascending else column.desc()
        # id breaks ties so that consecutive pages never overlap
        tie_breaker = ProductTable.id.asc()
        rows = self._session.exec(
            statement.order_by(order, tie_breaker)
            .offset(page_request.offset)
            .limit(page_request.size)
        ).all()

        items = [Product.model_validate(row, from_attributes=True) for row in rows]
        return Page.of(items, total, page_request)
