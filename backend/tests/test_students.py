from datetime import date

import pytest

from institute_admin.errors import NotFoundError
from institute_admin.models.notification import Notification
from institute_admin.schemas.student import StudentCreate, StudentUpdate
from institute_admin.services import student_service
from tests.conftest import add_students, make_batch


def test_create_student_trims_batch_number_and_notifies(db):
    student = student_service.create_student(
        db, StudentCreate(name="Priya Sharma", email="priya@example.com", batch_number="  WDB1 ")
    )
    assert student.batch_number == "WDB1"
    assert student.status == "Active"

    note = db.query(Notification).one()
    assert note.noti_type == "student-admitted"
    assert note.batch_id == "WDB1"
    assert "Priya Sharma" in note.message


def test_filters_by_status_and_batch(db):
    add_students(db, "WDB1", "Asha", "Vikram")
    add_students(db, "WDB2", "Neha", status="Completed")

    assert [s.name for s in student_service.get_students(db, batch_number="WDB1")] == ["Asha", "Vikram"]
    assert [s.name for s in student_service.get_students(db, status="Completed")] == ["Neha"]


def test_completed_students_search(db):
    add_students(db, "WDB1", "Asha Rao", "Vikram Das", status="Completed")
    found = student_service.get_completed_students(db, course_name="Web Development", search="vik")
    assert [s.name for s in found] == ["Vikram Das"]


def test_manual_status_change_clears_cascade_marker(manager, db):
    make_batch(manager)
    add_students(db, "WDB1", "Asha")
    manager.run_lifecycle_automation(today=date(2025, 5, 1))
    student = student_service.get_students(db, batch_number="WDB1")[0]
    assert student.completed_by_batch == "WDB1"

    updated = student_service.update_student(db, student.id, StudentUpdate(status="Alumni"))
    assert updated.status == "Alumni"
    assert updated.completed_by_batch is None


def test_reactivate_single_student(db):
    student = add_students(db, "WDB1", "Asha", status="Completed")[0]
    reactivated = student_service.reactivate_student(db, student.id)
    assert reactivated.status == "Active"


def test_orphaned_students_ignore_blank_references(manager, db):
    make_batch(manager)
    add_students(db, "WDB1", "Kept")
    add_students(db, "GONE1", "Dangling")
    add_students(db, "", "Unassigned")
    assert [s.name for s in student_service.get_orphaned_students(db)] == ["Dangling"]


def test_missing_student(db):
    with pytest.raises(NotFoundError):
        student_service.get_student(db, 404)
    with pytest.raises(NotFoundError):
        student_service.delete_student(db, 404)


def test_student_api_crud(client):
    created = client.post("/api/students", json={"name": "Sneha", "batch_number": "DAB1", "status": "Admitted"})
    assert created.status_code == 200, created.text
    student_id = created.json()["id"]

    updated = client.put(f"/api/students/{student_id}", json={"phone": "9876543210"})
    assert updated.json()["phone"] == "9876543210"
    assert updated.json()["status"] == "Admitted"

    bad = client.post("/api/students", json={"name": "X", "status": "Graduated"})
    assert bad.status_code == 422

    assert client.delete(f"/api/students/{student_id}").status_code == 200
    assert client.get(f"/api/students/{student_id}").status_code == 404
