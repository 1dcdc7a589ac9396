# app/api/dependencies.py
from fastapi import Request

from app.data.catalog import Catalog


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_strict_params(request: Request) -> bool:
    return request.app.state.strict_params
