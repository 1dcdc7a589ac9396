# app/api/routers/users.py
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.api.dependencies import get_catalog, get_strict_params
from app.data.catalog import Catalog
from app.domain.errors import InvalidParameter
from app.domain.schemas import MessageOut, User
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_service(catalog: Catalog = Depends(get_catalog)):
    return UserService(catalog)


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    response_model=list[User],
    responses={400: {"model": MessageOut}},
)
@router.api_route("/", methods=["GET", "HEAD"], response_model=list[User], include_in_schema=False)
def list_users(
    age: str | None = Query(None),
    svc: UserService = Depends(get_service),
    strict: bool = Depends(get_strict_params),
):
    """
    Wszyscy uzytkownicy, albo tylko starsi niz ``age`` (age > threshold).
    """
    try:
        return svc.list_users(age)
    except InvalidParameter:
        if strict:
            return JSONResponse(status_code=400, content={"message": "Invalid age parameter"})
        #NaN nie jest wiekszy od niczego, wiec nikt nie pasuje
        return []
