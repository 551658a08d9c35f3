# apnacart/api/__init__.py
from fastapi import FastAPI
from apnacart.api.routers import carts, health, setup, vegetables


def register_routers(app: FastAPI) -> None:
    app.include_router(health.router)
    app.include_router(vegetables.router)
    app.include_router(setup.router)
    app.include_router(carts.router)
