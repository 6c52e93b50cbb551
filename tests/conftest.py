import os

# Must be set before hr_records is imported: selects SQLite and skips seeding
os.environ["TESTING"] = "1"
os.environ["HR_SEED_SAMPLE_DATA"] = "0"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from hr_records.db import Base, get_db
from hr_records.main import app

# Force the use of SQLite for testing
TEST_DB_URL = "sqlite:///./test_hr.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fresh tables for every test
@pytest.fixture(autouse=True)
def setup_test_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

# Override the get_db dependency in FastAPI
@pytest.fixture(autouse=True)
def override_get_db():
    def _get_test_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()
    app.dependency_overrides[get_db] = _get_test_db
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()

# Independent sessions, e.g. one per worker thread
@pytest.fixture
def session_factory():
    return TestingSessionLocal

@pytest.fixture
def client():
    return TestClient(app)

def _employee_payload(**overrides):
    payload = {
        "name": "A",
        "email": "a@x.com",
        "department": "Eng",
        "role": "Dev",
        "joiningDate": "2024-01-01",
    }
    payload.update(overrides)
    return payload

@pytest.fixture
def employee_payload():
    return _employee_payload

@pytest.fixture
def create_employee(client):
    def _create(**overrides):
        resp = client.post("/api/employees", json=_employee_payload(**overrides))
        assert resp.status_code == 201, resp.json()
        return resp.json()
    return _create
