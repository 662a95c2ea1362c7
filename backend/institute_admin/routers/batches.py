"""Batch API router. Validates requests and delegates to the service layer."""

from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from institute_admin.database import get_db
from institute_admin.schemas.batch import BatchCreate, BatchUpdate, BatchOut, LifecycleRunOut
from institute_admin.schemas.student import StudentOut
from institute_admin.services import batch_service, student_service

router = APIRouter(prefix="/api/batches", tags=["batches"])


@router.get("", response_model=List[BatchOut])
def list_batches(db: Session = Depends(get_db)):
    return batch_service.get_batches(db)


@router.post("", response_model=BatchOut)
def create_batch(data: BatchCreate, db: Session = Depends(get_db)):
    return batch_service.create_batch(db, data)


@router.get("/completed", response_model=List[BatchOut])
def list_completed_batches(db: Session = Depends(get_db)):
    return batch_service.get_completed_batches(db)


@router.get("/active", response_model=List[BatchOut])
def list_active_batches(db: Session = Depends(get_db)):
    return batch_service.get_active_batches(db)


@router.post("/lifecycle/run", response_model=LifecycleRunOut)
def run_lifecycle(today: date | None = Query(None), db: Session = Depends(get_db)):
    return batch_service.run_batch_lifecycle_automation(db, today)


@router.get("/{batch_id}", response_model=BatchOut)
def get_batch(batch_id: str, db: Session = Depends(get_db)):
    return batch_service.get_batch(db, batch_id)


@router.put("/{batch_id}", response_model=BatchOut)
def update_batch(batch_id: str, data: BatchUpdate, db: Session = Depends(get_db)):
    return batch_service.update_batch(db, batch_id, data)


@router.delete("/{batch_id}")
def delete_batch(batch_id: str, db: Session = Depends(get_db)):
    batch_service.delete_batch(db, batch_id)
    return {"message": "Deleted."}


@router.post("/{batch_id}/reactivate", response_model=BatchOut)
def reactivate_batch(batch_id: str, db: Session = Depends(get_db)):
    return batch_service.reactivate_batch(db, batch_id)


@router.get("/{batch_id}/students", response_model=List[StudentOut])
def list_batch_students(batch_id: str, db: Session = Depends(get_db)):
    return student_service.get_students_by_batch(db, batch_id)
