# app/data/catalog.py
from dataclasses import dataclass
from typing import Iterable

from app.data import seed
from app.domain.schemas import Product, User


def _check_unique_ids(kind: str, records) -> None:
    seen = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"Duplicate {kind} id: {record.id}")
        seen.add(record.id)


@dataclass(frozen=True)
class Catalog:
    """
    In-memory data shared by all requests.
    Built once at startup and never mutated afterwards.
    """

    products: tuple[Product, ...]
    users: tuple[User, ...]

    def __post_init__(self):
        _check_unique_ids("product", self.products)
        _check_unique_ids("user", self.users)

    @classmethod
    def build(
        cls,
        products: Iterable[Product] | None = None,
        users: Iterable[User] | None = None,
    ) -> "Catalog":
        return cls(
            products=tuple(seed.PRODUCTS if products is None else products),
            users=tuple(seed.USERS if users is None else users),
        )
