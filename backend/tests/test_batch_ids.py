"""Batch id generation: course prefixes and per-course, per-year sequences."""

from datetime import date

import pytest

from institute_admin.errors import NotFoundError, ValidationError
from institute_admin.models.batch import Batch
from institute_admin.services.batch_lifecycle import course_prefix, normalize_course_name
from tests.conftest import make_batch


@pytest.mark.parametrize(
    "course, prefix",
    [
        ("Web Development", "WD"),
        ("web developement", "WD"),
        ("Full-Stack Web Dev", "WD"),
        ("Digital Marketing + Graphic Designing", "DM"),
        ("Data Science", "DA"),
        ("Data Analytics", "DA"),
        ("Tally Prime", "TE"),
        ("Office Administration", "OA"),
        ("Python Programming", "PP"),
        ("Python", "PX"),
        ("", "CX"),
    ],
)
def test_course_prefix(course, prefix):
    assert course_prefix(course) == prefix


def test_normalize_course_name_keeps_unknown_names():
    assert normalize_course_name("  WEB DEVELOPMENT batch ") == "Web Development"
    assert normalize_course_name("Spoken English") == "Spoken English"
    assert normalize_course_name(None) == "Course"


def test_first_and_second_batch_of_a_year(manager):
    first = make_batch(manager)
    second = make_batch(manager, start=date(2025, 5, 1), end=date(2025, 8, 31))

    assert first["id"] == "WDB1"
    assert second["id"] == "WDB2"
    assert first["name"] == "WDB1"
    assert first["total_students"] == 0


def test_name_variants_share_one_sequence(manager):
    make_batch(manager, course="Web development")
    second = make_batch(manager, course="Web Developement (evening)")
    assert second["id"] == "WDB2"


def test_courses_are_numbered_independently(manager):
    make_batch(manager, course="Web Development")
    dm = make_batch(manager, course="Digital Marketing")
    assert dm["id"] == "DMB1"


def test_new_year_restarts_count_but_never_reuses_an_id(manager):
    make_batch(manager)
    make_batch(manager, start=date(2025, 6, 1), end=date(2025, 9, 30))
    next_year = make_batch(manager, start=date(2026, 1, 5), end=date(2026, 4, 30))
    # 2026 counts from one, then skips WDB1/WDB2 which already exist
    assert next_year["id"] == "WDB3"


def test_legacy_year_infixed_id_is_skipped(manager, db):
    db.add(Batch(
        id="WD251",
        course_name="Web Development",
        name="Old record",
        start_date=date(2024, 3, 1),
        end_date=date(2024, 6, 30),
        status="Completed",
    ))
    db.commit()

    created = make_batch(manager)
    assert created["id"] == "WDB2"


def test_explicit_name_is_kept(manager):
    created = make_batch(manager, name="  FSWD Morning  ")
    assert created["id"] == "WDB1"
    assert created["name"] == "FSWD Morning"


def test_course_code_drives_prefix(manager, seed_courses):
    created = manager.create_batch(
        {"course_id": seed_courses["ds"].id, "start_date": date(2025, 2, 1), "end_date": date(2025, 7, 31)},
        today=date(2025, 1, 1),
    )
    assert created["id"] == "DAB1"
    assert created["course_name"] == "Data Science"
    assert created["course_id"] == seed_courses["ds"].id


def test_unknown_course_id_is_not_found(manager):
    with pytest.raises(NotFoundError):
        manager.create_batch(
            {"course_id": 999, "start_date": date(2025, 2, 1), "end_date": date(2025, 7, 31)}
        )


def test_course_is_required(manager):
    with pytest.raises(ValidationError):
        manager.create_batch({"start_date": date(2025, 2, 1), "end_date": date(2025, 7, 31)})


def test_end_before_start_is_rejected(manager):
    with pytest.raises(ValidationError):
        make_batch(manager, start=date(2025, 5, 1), end=date(2025, 4, 1))


def test_past_dated_batch_is_created_completed(manager):
    created = make_batch(manager, today=date(2025, 12, 1))
    assert created["status"] == "Completed"
    assert created["completed_at"] is None
