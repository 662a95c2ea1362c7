import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from institute_admin.database import Base, get_db
from institute_admin.main import app
from institute_admin.models.course import Course
from institute_admin.models.student import Student
from institute_admin.services import batch_service
from datetime import date

TEST_DB_URL = "sqlite:///./test_institute_admin.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def manager(db):
    return batch_service.get_manager(db)


@pytest.fixture
def seed_courses(db):
    courses = {
        "web": Course(name="Web Development", code="WD", duration="4 months"),
        "dm": Course(name="Digital Marketing", code="DM", duration="3 months"),
        "ds": Course(name="Data Science", code="DA", duration="6 months"),
    }
    for c in courses.values():
        db.add(c)
    db.commit()
    for c in courses.values():
        db.refresh(c)
    return courses


def add_students(db, batch_number: str, *names: str, status: str = "Active"):
    rows = [Student(name=n, course_name="Web Development", batch_number=batch_number, status=status) for n in names]
    db.add_all(rows)
    db.commit()
    for r in rows:
        db.refresh(r)
    return rows


def make_batch(manager, course="Web Development", start=date(2025, 1, 1), end=date(2025, 4, 30), today=None, **extra):
    payload = {"course_name": course, "start_date": start, "end_date": end, **extra}
    return manager.create_batch(payload, today=today or start)
