import itertools

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from services.ltti_engine.catalog import get_catalog
from services.ltti_engine.engine import LttiEngine
from src.routers.ltti import router as ltti_router, get_ltti_engine, get_session_store
from src.services.session_store import SessionStore


@pytest.fixture(scope="session")
def catalog():
    return get_catalog()

@pytest.fixture
def engine():
    return LttiEngine()

@pytest.fixture
def seed_counter():
    """Deterministic seed factory: 1000, 1001, 1002, ..."""
    counter = itertools.count(1000)
    return lambda: next(counter)

@pytest.fixture
def session_store(tmp_path, seed_counter):
    return SessionStore(str(tmp_path / "sessions"), seed_factory=seed_counter)

@pytest.fixture
def api_app(engine, session_store):
    app = FastAPI()
    app.include_router(ltti_router, prefix="/api/v1")
    app.dependency_overrides[get_ltti_engine] = lambda: engine
    app.dependency_overrides[get_session_store] = lambda: session_store
    yield app
    app.dependency_overrides.clear()

@pytest.fixture
def client(api_app):
    return TestClient(api_app)
