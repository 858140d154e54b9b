# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from ledger.config import settings
from ledger.database import Database
from ledger.main import create_app
from ledger.services.cleanup import CleanupService
from ledger.services.store import ProjectStore

# In-memory test database, one per test
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def database():
    """Create a fresh database with all tables"""
    db = Database(SQLALCHEMY_TEST_DATABASE_URL)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    """Creates a new database session for a test"""
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def temp_storage_dir(tmp_path):
    """Temporary storage directory for uploaded binaries"""
    (tmp_path / "uploads").mkdir()
    return tmp_path


@pytest.fixture(autouse=True)
def override_settings(temp_storage_dir):
    """Override storage settings for testing"""
    original_storage = settings.STORAGE_PATH
    original_uploads = settings.UPLOADS_PATH

    settings.STORAGE_PATH = temp_storage_dir
    settings.UPLOADS_PATH = temp_storage_dir / "uploads"

    yield

    settings.STORAGE_PATH = original_storage
    settings.UPLOADS_PATH = original_uploads


@pytest.fixture
def uploads_dir(temp_storage_dir):
    return temp_storage_dir / "uploads"


@pytest.fixture
def store(db_session, uploads_dir):
    return ProjectStore(db_session, CleanupService(uploads_dir))


@pytest.fixture
def client(database):
    """Test client bound to the test database"""
    app = create_app(database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_project(client):
    """Create a sample project through the API and return its id"""
    response = client.post(
        "/api/projects",
        json={"name": "Test Project", "client_name": "Acme"}
    )
    assert response.status_code == 200
    return response.json()["id"]


@pytest.fixture
def stored_file(uploads_dir):
    """Write a fake binary into the uploads directory and return its name"""
    def _write(name: str, content: bytes = b"fake content") -> str:
        (uploads_dir / name).write_bytes(content)
        return name
    return _write
