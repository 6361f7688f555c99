# tests/conftest.py

import os

# Settings are read at import time, so the environment has to be ready first.
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["ENV"] = "local"
os.environ["DATABASE_URL_LOCAL"] = "sqlite://"
os.environ["VIA_CEP_API"] = "https://viacep.test/ws"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from enrollment_service import models  # noqa: F401
from enrollment_service.db.base_class import Base
from enrollment_service.db.session import get_db
from enrollment_service.main import app
from enrollment_service.services.postal_lookup import get_postal_client
from tests.utils.via_cep import FakeViaCep

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """A session on a fresh in-memory schema."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def via_cep():
    """Fake ViaCEP upstream with a couple of known CEPs."""
    fake = FakeViaCep()
    yield fake
    fake.client.close()


@pytest.fixture(scope="function")
def client(db, via_cep):
    """
    TestClient wired to the in-memory database and the fake ViaCEP.
    """

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_postal_client] = lambda: via_cep.client

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
