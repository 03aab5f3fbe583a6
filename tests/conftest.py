import os
from datetime import datetime, timezone

import pytest

# Keep the app off the on-disk database during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.purchases.actions import RecordingActionSink  # noqa: E402
from app.purchases.dependencies import get_action_sink  # noqa: E402
from app.purchases.service import PurchaseFlowController  # noqa: E402
from app.purchases.store import PurchaseRecordStore  # noqa: E402
from app.storage import models as storage_models  # noqa: E402,F401
from app.storage.service import InMemoryStorage  # noqa: E402

FIXED_NOW = datetime(2024, 5, 17, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    session = sessionmaker(autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def action_sink():
    return RecordingActionSink()


@pytest.fixture(scope="function")
def client(db_session, action_sink):
    """Create a test client with database session and recording action sink."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_action_sink] = lambda: action_sink
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def record_store(memory_storage):
    store = PurchaseRecordStore(memory_storage, key="uc_purchases")
    store.load()
    return store


@pytest.fixture
def clock():
    """Clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def controller(record_store, action_sink, clock):
    return PurchaseFlowController(record_store, action_sink, clock=clock)
