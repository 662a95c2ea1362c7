"""
Lead and exam-result ingestion from form webhooks.

Contacts are matched on normalized email (trimmed, lower-cased) and phone
(spaces, dashes and brackets removed). Matching is best-effort: a submission
that matches nothing creates a new record rather than failing.
"""

import logging
import re
from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from institute_admin.errors import NotFoundError, ValidationError
from institute_admin.models.lead import ExamResult, Lead
from institute_admin.models.student import Student
from institute_admin.schemas.lead import ExamSubmission, GoogleFormSubmission

logger = logging.getLogger(__name__)

NEW_ENQUIRY = "New Enquiry"

_PHONE_NOISE = re.compile(r"[\s\-()]")

# exam_type -> Lead column updated with the score
SCORE_COLUMNS = {
    "entrance_exam": "entrance_score",
    "main_exam": "final_score",
}


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def normalize_phone(phone: Optional[str]) -> str:
    return _PHONE_NOISE.sub("", (phone or "").strip())


def _phone_expr(column):
    expr = column
    for ch in (" ", "-", "(", ")"):
        expr = func.replace(expr, ch, "")
    return expr


def find_student(db: Session, email: str, phone: str) -> Optional[Student]:
    """Student with the same email, else the same phone."""
    if email:
        student = db.query(Student).filter(func.lower(func.trim(Student.email)) == email).first()
        if student:
            return student
    if phone:
        return db.query(Student).filter(_phone_expr(Student.phone) == phone).first()
    return None


def _find_lead(db: Session, email: str, phone: str, require_both: bool) -> Optional[Lead]:
    q = db.query(Lead)
    if email and phone and require_both:
        return q.filter(Lead.email == email, Lead.phone == phone).first()
    if email:
        lead = q.filter(Lead.email == email).first()
        if lead or not phone or require_both:
            return lead
    if phone:
        return db.query(Lead).filter(Lead.phone == phone).first()
    return None


def ingest_google_form(db: Session, data: GoogleFormSubmission) -> Tuple[Lead, bool]:
    """Store an enquiry. Returns ``(lead, created)``; a repeat submission returns the existing lead."""
    email = normalize_email(data.email)
    phone = normalize_phone(data.phone)
    if not email and not phone:
        raise ValidationError("Email or phone number is required.")

    # Only an exact repeat (same email and same phone) counts as a duplicate
    existing = _find_lead(db, email, phone, require_both=True)
    if existing:
        logger.info("[leads] duplicate enquiry for lead %s, not saved", existing.id)
        return existing, False

    student = find_student(db, email, phone)
    lead = Lead(
        name=data.name.strip(),
        email=email or None,
        phone=phone or None,
        course=data.course.strip() or None,
        qualification=data.qualification.strip() or None,
        source=data.source.strip() or "Google Form",
        status=NEW_ENQUIRY,
        remarks=data.remarks,
        student_id=student.id if student else None,
    )
    db.add(lead)
    db.commit()
    db.refresh(lead)
    logger.info("[leads] new enquiry %s from %s", lead.id, email or phone)
    return lead, True


def ingest_exam_submission(db: Session, data: ExamSubmission) -> ExamResult:
    """Record an exam result and attach it to the matching lead and student."""
    email = normalize_email(data.email)
    phone = normalize_phone(data.phone)
    if not email and not phone:
        raise ValidationError("Email or phone number is required.")

    student = find_student(db, email, phone)
    result = ExamResult(
        exam_type=data.exam_type,
        name=data.name,
        email=email or None,
        phone=phone or None,
        course=data.course or None,
        exam=data.exam or None,
        score=data.score,
        total_marks=data.total_marks,
        student_id=student.id if student else None,
    )
    db.add(result)

    if data.score is not None:
        lead = _find_lead(db, email, phone, require_both=False)
        if lead is None:
            lead = Lead(
                name=data.name,
                email=email or None,
                phone=phone or None,
                course=data.course or None,
                status=NEW_ENQUIRY,
                source="Exam Submission",
                student_id=student.id if student else None,
            )
            db.add(lead)
            db.flush()
            logger.info("[leads] created lead %s from %s submission", lead.id, data.exam_type)
        column = SCORE_COLUMNS.get(data.exam_type)
        if column:
            setattr(lead, column, data.score)
        if lead.student_id is None and student is not None:
            lead.student_id = student.id
        result.lead_id = lead.id
    else:
        logger.warning("[leads] %s submission from %s has no numeric score", data.exam_type, email or phone)

    db.commit()
    db.refresh(result)
    return result


def get_leads(db: Session, status: Optional[str] = None) -> List[Lead]:
    q = db.query(Lead)
    if status:
        q = q.filter(Lead.status == status)
    return q.order_by(Lead.created_at.desc(), Lead.id.desc()).all()


def get_lead(db: Session, lead_id: int) -> Lead:
    lead = db.query(Lead).filter(Lead.id == lead_id).first()
    if not lead:
        raise NotFoundError(f"Lead {lead_id} not found.")
    return lead


def get_exam_results(db: Session, exam_type: Optional[str] = None) -> List[ExamResult]:
    q = db.query(ExamResult)
    if exam_type:
        q = q.filter(ExamResult.exam_type == exam_type)
    return q.order_by(ExamResult.submitted_at.desc(), ExamResult.id.desc()).all()
