# app/repos/user_repo.py
from app.data.catalog import Catalog
from app.domain.schemas import User


class UserRepo:
    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def list_users(self) -> tuple[User, ...]:
        return self.catalog.users

    def get_users_older_than(self, age: int) -> list[User]:
        return [u for u in self.catalog.users if u.age > age]
