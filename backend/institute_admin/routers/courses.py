"""Course API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from institute_admin.database import get_db
from institute_admin.schemas.course import CourseCreate, CourseUpdate, CourseOut
from institute_admin.services import course_service

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("", response_model=List[CourseOut])
def list_courses(active_only: bool = False, db: Session = Depends(get_db)):
    return course_service.get_courses(db, active_only)


@router.post("", response_model=CourseOut)
def create_course(data: CourseCreate, db: Session = Depends(get_db)):
    return course_service.create_course(db, data)


@router.get("/{course_id}", response_model=CourseOut)
def get_course(course_id: int, db: Session = Depends(get_db)):
    return course_service.get_course(db, course_id)


@router.put("/{course_id}", response_model=CourseOut)
def update_course(course_id: int, data: CourseUpdate, db: Session = Depends(get_db)):
    return course_service.update_course(db, course_id, data)


@router.delete("/{course_id}")
def delete_course(course_id: int, db: Session = Depends(get_db)):
    course_service.delete_course(db, course_id)
    return {"message": "Deleted."}
