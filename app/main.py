# app/main.py
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from starlette.staticfiles import StaticFiles
import uvicorn

from app.api import include_routers
from app.data.catalog import Catalog
from app.utils.logging import configure_logging, get_logger
from app.utils.settings import ASSETS_DIR, HOST, INDEX_FILE, LOG_LEVEL, PORT, STRICT_PARAMS

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    #uvicorn app.main:app nie wola run(), wiec handler trzeba dodac tutaj
    configure_logging(LOG_LEVEL)
    logger.info(f"Server is running at http://localhost:{PORT}")
    yield


def add_static_files(app: FastAPI, assets_dir: Path) -> None:
    """
    Files under ``assets_dir`` win over every route, like a static
    middleware mounted in front of the router. Misses fall through.
    """
    static = StaticFiles(directory=assets_dir, html=True, check_dir=False)

    @app.middleware("http")
    async def serve_static_first(request: Request, call_next):
        if request.method in ("GET", "HEAD"):
            try:
                response = await static.get_response(static.get_path(request.scope), request.scope)
            except HTTPException:
                response = None
            #html=True podaje 404.html ze statusem 404, to tez jest miss
            if response is not None and response.status_code != 404:
                return response

        return await call_next(request)


def create_app(
    catalog: Catalog | None = None,
    assets_dir: str | Path | None = None,
    strict_params: bool | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Storefront",
        version="1.0.0",
        lifespan=lifespan,
        # docs routes would shadow the index fallback
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    assets = Path(assets_dir) if assets_dir is not None else ASSETS_DIR

    #dane read-only, budowane raz przy starcie
    app.state.catalog = catalog if catalog is not None else Catalog.build()
    app.state.index_file = assets / INDEX_FILE
    app.state.strict_params = STRICT_PARAMS if strict_params is None else strict_params

    add_static_files(app, assets)
    include_routers(app)

    return app


app = create_app()


def run():
    configure_logging(LOG_LEVEL)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
