"""Inbound form webhooks: enquiry leads and exam submissions."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from institute_admin.database import get_db
from institute_admin.schemas.lead import ExamSubmission, ExamWebhookOut, GoogleFormSubmission, LeadWebhookOut
from institute_admin.services import lead_service

router = APIRouter(prefix="/api/webhooks", tags=["webhooks"])


@router.post("/google-form", response_model=LeadWebhookOut)
def google_form(data: GoogleFormSubmission, response: Response, db: Session = Depends(get_db)):
    lead, created = lead_service.ingest_google_form(db, data)
    if not created:
        return {"success": False, "message": "Duplicate lead detected - not saved", "lead": lead}
    response.status_code = status.HTTP_201_CREATED
    return {"success": True, "message": "Lead saved successfully", "lead": lead}


@router.post("/exam-submission", response_model=ExamWebhookOut)
def exam_submission(data: ExamSubmission, db: Session = Depends(get_db)):
    result = lead_service.ingest_exam_submission(db, data)
    return {"success": True, "result": result}
