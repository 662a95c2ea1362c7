"""Lead and exam-result API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from institute_admin.database import get_db
from institute_admin.schemas.lead import ExamResultOut, ExamType, LeadOut
from institute_admin.services import lead_service

router = APIRouter(prefix="/api", tags=["leads"])


@router.get("/leads", response_model=List[LeadOut])
def list_leads(status: Optional[str] = None, db: Session = Depends(get_db)):
    return lead_service.get_leads(db, status)


@router.get("/leads/{lead_id}", response_model=LeadOut)
def get_lead(lead_id: int, db: Session = Depends(get_db)):
    return lead_service.get_lead(db, lead_id)


@router.get("/exam-results", response_model=List[ExamResultOut])
def list_exam_results(exam_type: Optional[ExamType] = None, db: Session = Depends(get_db)):
    return lead_service.get_exam_results(db, exam_type)
