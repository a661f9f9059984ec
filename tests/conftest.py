import os
import shutil
import tempfile

# point the app at throwaway storage before anything from expo_portal is imported
TEST_DIR = tempfile.mkdtemp(prefix="expo_portal_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DIR}/app.db"
os.environ["UPLOAD_DIR"] = os.path.join(TEST_DIR, "uploads")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from expo_portal.core.deps import get_db
from expo_portal.core.security import hash_password
from expo_portal.db.base import Base
from expo_portal.db.seed import seed_projects
from expo_portal.main import app
from expo_portal.models.project import Project
from expo_portal.models.submission import Submission
from expo_portal.models.user import User

TEST_DB_URL = f"sqlite:///{TEST_DIR}/test_expo_portal.db"

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "password123"
# hashing is slow; every seeded account shares one hash
PASSWORD_HASH = hash_password(PASSWORD)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    shutil.rmtree(TEST_DIR, ignore_errors=True)


@pytest.fixture()
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def seed_data(db_session):
    """Seed a clean minimal dataset: two students, one admin and the demo catalogue."""
    db = db_session

    # Clear tables (child -> parent)
    db.query(Submission).delete()
    db.query(Project).delete()
    db.query(User).delete()
    db.commit()

    student = User(
        email="student1@polnes.ac.id",
        username="student1",
        full_name="Maya Putri",
        role="student",
        study_program="Teknik Informatika",
        hashed_password=PASSWORD_HASH,
    )
    other_student = User(
        email="student2@polnes.ac.id",
        username="student2",
        full_name="Eko Prasetyo",
        role="student",
        study_program="Sistem Informasi",
        hashed_password=PASSWORD_HASH,
    )
    admin = User(
        email="admin1@polnes.ac.id",
        username="admin1",
        full_name="Admin One",
        role="admin",
        hashed_password=PASSWORD_HASH,
    )
    db.add_all([student, other_student, admin])
    db.commit()
    for u in (student, other_student, admin):
        db.refresh(u)

    seed_projects(db)

    return {"student": student.id, "other_student": other_student.id, "admin": admin.id}


@pytest.fixture()
def client(seed_data):
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def login(client, email: str, password: str = PASSWORD) -> str:
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["access_token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def student_headers(client):
    return auth_header(login(client, "student1@polnes.ac.id"))


@pytest.fixture()
def other_student_headers(client):
    return auth_header(login(client, "student2@polnes.ac.id"))


@pytest.fixture()
def admin_headers(client):
    return auth_header(login(client, "admin1@polnes.ac.id"))


SUBMISSION_FORM = {
    "project_name": "Smart Parking Detector",
    "class_name": "TI-3A",
    "group_class": "Kelompok 4",
    "course": "Internet of Things",
    "lecturer": "Prof. Dr. Siti Nurhaliza, M.Kom.",
    "program_study": "Teknik Informatika",
    "grade": "A",
}


@pytest.fixture()
def make_submission(client):
    def _make(headers: dict, **overrides) -> dict:
        r = client.post("/submissions", headers=headers, data={**SUBMISSION_FORM, **overrides})
        assert r.status_code == 201, r.text
        return r.json()

    return _make
