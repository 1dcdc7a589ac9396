# app/api/routers/fallback.py
from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, JSONResponse

from app.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

FALLBACK_METHODS = [
    "GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT",
]


def index_response(request: Request):
    index_file = request.app.state.index_file
    if not index_file.is_file():
        logger.error(f"Index page {index_file} is missing")
        return JSONResponse(status_code=404, content={"message": "Not found"})

    logger.debug(f"{request.method} {request.url.path} -> {index_file.name}")
    return FileResponse(index_file, media_type="text/html")


@router.api_route("/{full_path:path}", methods=FALLBACK_METHODS, include_in_schema=False)
def index_page(full_path: str, request: Request):
    """
    Catch-all: every request nothing else answered gets the index page.
    Must be included after all other routers.
    """
    return index_response(request)


async def method_not_allowed_handler(request: Request, exc):
    #niestandardowe metody (np. PROPFIND) tez dostaja index
    return index_response(request)
