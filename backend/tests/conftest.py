import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.base import Base
from main import app
from services.deps import get_store
from services.row_store import HEADER, RowStore
from services.workbook import SqlWorkbook


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture()
def workbook(session_factory):
    return SqlWorkbook(session_factory)


@pytest.fixture()
def store(workbook):
    return RowStore(workbook, "graph")


@pytest.fixture()
def header_only_store(store):
    store.create()
    store.append(HEADER)
    return store


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
