# app/services/user_service.py
from app.data.catalog import Catalog
from app.domain.errors import InvalidParameter
from app.domain.schemas import User
from app.repos.user_repo import UserRepo
from app.utils.params import parse_int
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, catalog: Catalog):
        self.repo = UserRepo(catalog)

    def list_users(self, age: str | None = None) -> list[User]:
        #brak albo pusty parametr = wszyscy uzytkownicy
        if not age:
            return list(self.repo.list_users())

        threshold = parse_int(age)
        if threshold is None:
            logger.info(f"Age filter {age!r} is not a number")
            raise InvalidParameter("age parameter", age)

        users = self.repo.get_users_older_than(threshold)
        logger.debug(f"{len(users)} users older than {threshold}")
        return users
