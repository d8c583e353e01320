"""
Test configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from catalog.core.config import settings
from catalog.core.database import Base, build_session_factory, init_db
from catalog.main import create_app
from catalog.storage import DbStorage, MemStorage


@pytest.fixture(scope="function")
def db_engine():
    """Fresh in-memory SQLite database for each test"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_storage(db_engine):
    return DbStorage(build_session_factory(db_engine))


@pytest.fixture
def memory_storage():
    return MemStorage(seed=False)


@pytest.fixture(params=["memory", "database"])
def storage(request):
    """Runs a test once per backend"""
    if request.param == "memory":
        return MemStorage(seed=False)
    return request.getfixturevalue("db_storage")


@pytest.fixture
def client(memory_storage):
    with TestClient(create_app(storage=memory_storage)) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    response = client.post(
        f"{settings.API_PREFIX}/auth/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}


@pytest.fixture
def sample_product_data():
    """Sample product payload for testing"""
    return {
        "name": {"en": "Jasmine Tea", "my": "စံပယ်လက်ဖက်ရည်"},
        "description": {"en": "Loose leaf jasmine tea", "my": "စံပယ်လက်ဖက်ခြောက်"},
        "quality": "high",
    }


@pytest.fixture
def sample_faq_data():
    return {
        "question": {"en": "Do you deliver?", "my": "ပို့ပေးပါသလား?"},
        "answer": {"en": "Yes, nationwide.", "my": "ဟုတ်ကဲ့၊ တစ်နိုင်ငံလုံး။"},
    }
