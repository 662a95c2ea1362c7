"""Seed the database with demo courses, batches and students."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date, timedelta
from institute_admin.database import SessionLocal, engine, Base
import institute_admin.models  # noqa: F401

from institute_admin.models.course import Course
from institute_admin.schemas.batch import BatchCreate
from institute_admin.schemas.course import CourseCreate
from institute_admin.schemas.student import StudentCreate
from institute_admin.services import batch_service, course_service, student_service


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(Course).count() > 0:
            print("Database already seeded. Skipping.")
            return

        web = course_service.create_course(db, CourseCreate(name="Web Development", duration="4 months"))
        dm = course_service.create_course(db, CourseCreate(name="Digital Marketing", duration="3 months"))
        ds = course_service.create_course(db, CourseCreate(name="Data Science", duration="6 months"))

        today = date.today()
        running = batch_service.create_batch(db, BatchCreate(
            course_id=web.id,
            start_date=today - timedelta(days=60),
            end_date=today + timedelta(days=5),
            trainer_name="Anita Desai",
            max_students=30,
            description="Morning batch, Mon-Wed-Fri",
        ))
        upcoming = batch_service.create_batch(db, BatchCreate(
            course_id=ds.id,
            start_date=today + timedelta(days=20),
            end_date=today + timedelta(days=200),
            trainer_name="Rahul Mehta",
            max_students=35,
        ))
        finished = batch_service.create_batch(db, BatchCreate(
            course_id=dm.id,
            start_date=today - timedelta(days=120),
            end_date=today - timedelta(days=1),
            trainer_name="Meera Nair",
            max_students=25,
        ))

        students = [
            ("Priya Sharma", "priya@example.com", web.name, running["id"]),
            ("Arjun Patel", "arjun@example.com", web.name, running["id"]),
            ("Kavya Iyer", "kavya@example.com", dm.name, finished["id"]),
            ("Rohan Gupta", "rohan@example.com", dm.name, finished["id"]),
            ("Sneha Reddy", "sneha@example.com", ds.name, upcoming["id"]),
        ]
        for name, email, course_name, batch_number in students:
            student_service.create_student(db, StudentCreate(
                name=name, email=email, course_name=course_name, batch_number=batch_number,
            ))

        print("Seed data inserted successfully.")
        print(f"  Batches: {running['id']} (ending soon), {upcoming['id']} (upcoming), {finished['id']} (ended yesterday)")
        print("  Run scripts/batch_lifecycle_automation.py to complete and warn.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
