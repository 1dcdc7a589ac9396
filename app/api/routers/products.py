# app/api/routers/products.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_catalog, get_strict_params
from app.data.catalog import Catalog
from app.domain.errors import InvalidParameter, ProductNotFound
from app.domain.schemas import MessageOut, Product
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(catalog: Catalog = Depends(get_catalog)):
    return ProductService(catalog)


@router.api_route("", methods=["GET", "HEAD"], response_model=list[Product])
@router.api_route("/", methods=["GET", "HEAD"], response_model=list[Product], include_in_schema=False)
def list_products(svc: ProductService = Depends(get_service)):
    return svc.list_products()


@router.api_route(
    "/{product_id}",
    methods=["GET", "HEAD"],
    response_model=Product,
    responses={404: {"model": MessageOut}, 400: {"model": MessageOut}},
)
def get_product(
    product_id: str,
    svc: ProductService = Depends(get_service),
    strict: bool = Depends(get_strict_params),
):
    try:
        return svc.get_product(product_id)
    except InvalidParameter:
        if strict:
            return JSONResponse(status_code=400, content={"message": "Invalid product id"})
        #nie-liczbowe id traktujemy jak brak produktu
        return JSONResponse(status_code=404, content={"message": "Product not found"})
    except ProductNotFound as e:
        return JSONResponse(status_code=404, content={"message": str(e)})
