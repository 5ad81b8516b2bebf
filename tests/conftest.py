import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import uuid
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

import main
from app.core.config import settings
from app.core.database import Base
from app.core.security import create_access_token
from app.crud.course import course as crud_course
from app.crud.user import user as crud_user
from app.utils import deps as deps_utils

test_db_url = settings.TEST_DATABASE_URL or "sqlite:///./test.db"

@pytest.fixture(scope="session")
def database_engine():
    if test_db_url.startswith("sqlite"):
        engine = create_engine(test_db_url, connect_args={"check_same_thread": False})
    else:
        engine = create_engine(test_db_url)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()
    if test_db_url == "sqlite:///./test.db" and os.path.exists("./test.db"):
        os.remove("./test.db")

@pytest.fixture(scope="function")
def db_session(database_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()

@pytest.fixture(scope="function")
def client(db_session):
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()

@pytest.fixture
def user_factory(db_session):
    def _user_factory(name: str = "Test User"):
        return crud_user.create(
            db_session,
            obj_in={"name": name, "email": f"{uuid.uuid4().hex[:10]}@campus.test"}
        )
    return _user_factory

@pytest.fixture
def course_factory(db_session):
    def _course_factory(name: str = None):
        return crud_course.create(
            db_session,
            obj_in={"name": name or f"Course {uuid.uuid4().hex[:6]}"}
        )
    return _course_factory

@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}
    return _auth_headers

@pytest.fixture
def student(user_factory):
    return user_factory("Student")

@pytest.fixture
def faculty(user_factory):
    return user_factory("Faculty")

@pytest.fixture
def course(course_factory):
    return course_factory()
