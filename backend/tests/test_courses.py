import pytest

from institute_admin.errors import ConflictError
from institute_admin.schemas.course import CourseCreate, CourseUpdate
from institute_admin.services import course_service


def test_code_defaults_to_alias_prefix(db):
    course = course_service.create_course(db, CourseCreate(name="Web Developement"))
    assert course.code == "WD"
    other = course_service.create_course(db, CourseCreate(name="Spoken English"))
    assert other.code == "SE"


def test_explicit_code_is_uppercased(db):
    course = course_service.create_course(db, CourseCreate(name="Robotics", code="rb"))
    assert course.code == "RB"


def test_duplicate_name_conflicts(db):
    course_service.create_course(db, CourseCreate(name="Data Science"))
    with pytest.raises(ConflictError):
        course_service.create_course(db, CourseCreate(name=" Data Science "))


def test_rename_keeps_code(db):
    course = course_service.create_course(db, CourseCreate(name="Tally ERP"))
    renamed = course_service.update_course(db, course.id, CourseUpdate(name="Tally Prime with GST"))
    assert renamed.code == "TE"
    assert renamed.name == "Tally Prime with GST"


def test_course_api_and_batch_prefix(client):
    created = client.post("/api/courses", json={"name": "Robotics", "code": "RB"})
    assert created.status_code == 200
    course_id = created.json()["id"]

    batch = client.post(
        "/api/batches",
        json={"course_id": course_id, "start_date": "2025-01-06", "end_date": "2025-03-28"},
    )
    assert batch.status_code == 200, batch.text
    assert batch.json()["id"] == "RBB1"
    assert batch.json()["course_name"] == "Robotics"

    client.put(f"/api/courses/{course_id}", json={"is_active": False})
    assert client.get("/api/courses", params={"active_only": True}).json() == []
    assert client.post("/api/courses", json={"name": "Robotics"}).status_code == 409
    assert client.get("/api/courses/999").status_code == 404
