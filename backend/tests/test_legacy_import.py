import json

import pytest

from institute_admin.errors import DecodeError
from institute_admin.models.batch import Batch
from institute_admin.models.student import Student
from institute_admin.services.legacy_import import decode_batches, decode_students, import_legacy

BATCHES = json.dumps([
    {
        "id": "WDB1",
        "course": "Web Development",
        "startDate": "2025-01-01",
        "endDate": "2025-04-30",
        "trainer": "Anita",
        "maxStudents": 25,
        "completedAt": "2025-05-01T00:05:00.000Z",
    },
    {"id": "DMB1", "course_name": "Digital Marketing", "start_date": "2025-02-01", "end_date": "2025-07-31"},
])

STUDENTS = json.dumps([
    {"name": "Asha", "batchNumber": " WDB1 ", "status": "Completed", "course": "Web Development"},
    {"name": "Neha", "batch_number": "DMB1"},
])


def test_decode_accepts_both_key_styles():
    batches = decode_batches(BATCHES)
    assert [b.id for b in batches] == ["WDB1", "DMB1"]
    assert batches[0].trainer_name == "Anita"
    assert batches[0].completed_at.year == 2025
    assert batches[1].name == "DMB1"

    students = decode_students(STUDENTS)
    assert students[0].batch_number == "WDB1"
    assert students[1].status == "Active"


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        json.dumps({"id": "WDB1"}),
        json.dumps([{"id": "WDB1", "course": "Web Development", "startDate": "2025-01-01"}]),
        json.dumps([{"id": "WDB1", "course": "Web Development", "startDate": "x", "endDate": "2025-04-30"}]),
        json.dumps([{"course": "Web Development", "startDate": "2025-01-01", "endDate": "2025-04-30"}]),
        json.dumps([{
            "id": "WDB1", "course": "Web Development", "startDate": "2025-01-01",
            "endDate": "2025-04-30", "completedAt": "yesterday",
        }]),
    ],
)
def test_malformed_batches_raise(raw):
    with pytest.raises(DecodeError):
        decode_batches(raw)


def test_unknown_student_status_raises():
    with pytest.raises(DecodeError) as err:
        decode_students(json.dumps([{"name": "Asha", "status": "Graduated"}]))
    assert "student-records[0]" in err.value.detail


def test_empty_input_decodes_to_nothing():
    assert decode_batches("") == []
    assert decode_students("   ") == []


def test_import_skips_existing_batches(db, manager):
    manager.create_batch({"course_name": "Digital Marketing", "start_date": "2025-02-01", "end_date": "2025-07-31"})

    summary = import_legacy(db, BATCHES, STUDENTS)

    assert summary == {"batches_imported": 1, "batches_skipped": 1, "students_imported": 2}
    assert db.query(Batch).count() == 2
    assert db.query(Student).count() == 2


def test_decode_failure_writes_nothing(db):
    with pytest.raises(DecodeError):
        import_legacy(db, BATCHES, "[{}]")
    assert db.query(Batch).count() == 0


def test_wrongly_typed_field_is_rejected_before_storage(db):
    raw = json.dumps([{
        "id": "WDB9", "course": "Web Development", "startDate": "2025-01-01",
        "endDate": "2025-04-30", "maxStudents": "thirty",
    }])
    with pytest.raises(DecodeError) as err:
        import_legacy(db, raw, "")
    assert err.value.detail.startswith("batches[0].maxStudents")
    assert db.query(Batch).count() == 0


def test_imported_records_are_served_by_the_api(client, db):
    raw_batches = json.dumps([{
        "id": "WDB9", "course": "Web Development", "startDate": "2025-01-01T00:00:00.000Z",
        "endDate": "2025-04-30", "maxStudents": "30", "trainer": "",
    }])
    raw_students = json.dumps([{"name": "Asha", "phone": 9876543210, "batchNumber": "WDB9"}])
    import_legacy(db, raw_batches, raw_students)

    resp = client.get("/api/batches")
    assert resp.status_code == 200
    assert resp.json()[0]["max_students"] == 30
    assert resp.json()[0]["trainer_name"] is None
    assert resp.json()[0]["total_students"] == 1
    assert db.query(Student).one().phone == "9876543210"
