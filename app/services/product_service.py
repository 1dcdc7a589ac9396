# app/services/product_service.py
from app.data.catalog import Catalog
from app.domain.errors import InvalidParameter, ProductNotFound
from app.domain.schemas import Product
from app.repos.product_repo import ProductRepo
from app.utils.params import parse_int
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Use case'y dla produktow (tylko query, katalog jest read-only).
    """

    def __init__(self, catalog: Catalog):
        self.repo = ProductRepo(catalog)

    def list_products(self) -> list[Product]:
        return list(self.repo.list_products())

    def get_product(self, raw_id: str) -> Product:
        """
        Look up a product by its id as received in the URL.

        Raises InvalidParameter when ``raw_id`` has no leading integer and
        ProductNotFound when the id parses but matches nothing.
        """
        product_id = parse_int(raw_id)
        if product_id is None:
            logger.info(f"Product id {raw_id!r} is not a number")
            raise InvalidParameter("product id", raw_id)

        product = self.repo.get_product(product_id)
        if not product:
            logger.info(f"Product {product_id} not found")
            raise ProductNotFound(product_id)

        return product
