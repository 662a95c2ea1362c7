"""Student record API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from institute_admin.database import get_db
from institute_admin.schemas.student import StudentCreate, StudentUpdate, StudentOut
from institute_admin.services import student_service

router = APIRouter(prefix="/api/students", tags=["students"])


@router.get("", response_model=List[StudentOut])
def list_students(
    status: Optional[str] = None,
    batch_number: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return student_service.get_students(db, status, batch_number)


@router.post("", response_model=StudentOut)
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    return student_service.create_student(db, data)


@router.get("/completed", response_model=List[StudentOut])
def list_completed_students(
    course_name: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return student_service.get_completed_students(db, course_name, search)


@router.get("/orphaned", response_model=List[StudentOut])
def list_orphaned_students(db: Session = Depends(get_db)):
    return student_service.get_orphaned_students(db)


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: int, db: Session = Depends(get_db)):
    return student_service.get_student(db, student_id)


@router.put("/{student_id}", response_model=StudentOut)
def update_student(student_id: int, data: StudentUpdate, db: Session = Depends(get_db)):
    return student_service.update_student(db, student_id, data)


@router.delete("/{student_id}")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    student_service.delete_student(db, student_id)
    return {"message": "Deleted."}


@router.post("/{student_id}/reactivate", response_model=StudentOut)
def reactivate_student(student_id: int, db: Session = Depends(get_db)):
    return student_service.reactivate_student(db, student_id)
