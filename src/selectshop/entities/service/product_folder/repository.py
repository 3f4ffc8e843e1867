"""Product-folder link repository."""

from sqlmodel import Session, select

from src.selectshop.entities.service.product_folder.entity import ProductFolder
from src.selectshop.entities.service.product_folder.table import ProductFolderTable


class ProductFolderRepository:
    """Data-access layer for product-folder links."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_product_and_folder(
        self, product_id: str, folder_id: str
    ) -> ProductFolder | None:
        statement = select(ProductFolderTable).where(
            (ProductFolderTable.product_id == product_id)
            & (ProductFolderTable.folder_id == folder_id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return ProductFolder.model_validate(row, from_attributes=True)

    def create(self, link: ProductFolder) -> ProductFolder:
        row = ProductFolderTable.model_validate(link, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return ProductFolder.model_validate(row, from_attributes=True)
