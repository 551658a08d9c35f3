"""Pytest configuration for apnacart tests."""

import os

# must be set before apnacart.utils.settings is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CATALOG_SERVICE_URL"] = ""
os.environ["IMAGES_DIR"] = os.path.join(os.path.dirname(__file__), "no-images")

import pytest
from fastapi.testclient import TestClient

from apnacart.data.database import Base, SessionLocal, engine
from apnacart.data.models import VegetableModel  # noqa: F401
from apnacart.domain.catalog import CatalogItem, WeightToken
from apnacart.main import create_app


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def tomato():
    return CatalogItem(id=1, name="Tomato", fixed_weight=WeightToken.GRAMS_500, image_ref="/images/Tomato.jpeg")


@pytest.fixture
def beetroot():
    return CatalogItem(id=2, name="Beetroot", fixed_weight=WeightToken.GRAMS_250, image_ref="/images/Beetroot.jpg")
