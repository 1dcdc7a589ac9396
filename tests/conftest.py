"""
pytest configuration and fixtures.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.data.catalog import Catalog
from app.main import create_app

INDEX_HTML = "<!DOCTYPE html><html><body><h1>test index</h1></body></html>"
STYLES_CSS = "body { color: red; }"


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Assets directory with an index page, a stylesheet and a nested file."""
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "index.html").write_text(INDEX_HTML)
    (assets / "styles.css").write_text(STYLES_CSS)
    (assets / "img").mkdir()
    (assets / "img" / "logo.txt").write_text("logo")
    return assets


@pytest.fixture
def catalog() -> Catalog:
    """Catalog built from the seed data."""
    return Catalog.build()


@pytest.fixture
def app(catalog: Catalog, assets_dir: Path) -> FastAPI:
    return create_app(catalog=catalog, assets_dir=assets_dir, strict_params=False)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def strict_client(catalog: Catalog, assets_dir: Path) -> Generator[TestClient, None, None]:
    """Client for an app that answers non-numeric parameters with 400."""
    app = create_app(catalog=catalog, assets_dir=assets_dir, strict_params=True)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def index_html() -> str:
    return INDEX_HTML


@pytest.fixture
def styles_css() -> str:
    return STYLES_CSS
