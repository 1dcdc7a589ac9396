# app/repos/product_repo.py
from app.data.catalog import Catalog
from app.domain.schemas import Product


class ProductRepo:
    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def list_products(self) -> tuple[Product, ...]:
        return self.catalog.products

    def get_product(self, product_id: int) -> Product | None:
        return next((p for p in self.catalog.products if p.id == product_id), None)
