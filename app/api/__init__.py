# app/api/__init__.py
from fastapi import FastAPI
from app.api.routers import products, users, fallback


def include_routers(app: FastAPI) -> None:
    app.include_router(products.router)
    app.include_router(users.router)
    #fallback zawsze ostatni, lapie wszystko
    app.include_router(fallback.router)
    app.add_exception_handler(405, fallback.method_not_allowed_handler)
