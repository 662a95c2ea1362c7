"""Webhook payloads and lead/exam-result responses."""

import re
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Literal, Optional
from datetime import datetime

ExamType = Literal["entrance_exam", "main_exam", "internal_exam"]

_NUMBER = re.compile(r"(\d+(?:\.\d+)?)")


class GoogleFormSubmission(BaseModel):
    """Form fields arrive under whatever labels the form author chose."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(default="", validation_alias=AliasChoices("name", "full_name", "Full Name", "Name"))
    email: str = Field(default="", validation_alias=AliasChoices("email", "Email", "email_address"))
    phone: str = Field(
        default="",
        validation_alias=AliasChoices("phone", "contact", "Contact", "Phone", "phone_number"),
    )
    course: str = Field(
        default="",
        validation_alias=AliasChoices("course", "course_interested", "Course Interested", "Course"),
    )
    qualification: str = Field(
        default="",
        validation_alias=AliasChoices(
            "qualification", "education_qualification", "Education Qualification", "Qualification"
        ),
    )
    source: str = Field(
        default="Google Form",
        validation_alias=AliasChoices("source", "how_did_you_hear", "How did you hear about us?", "Source"),
    )
    remarks: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("remarks", "additional_remarks", "Remarks")
    )
    age: Optional[str] = None
    gender: Optional[str] = None
    residence_area: Optional[str] = None

    @model_validator(mode="after")
    def default_remarks(self):
        if not self.remarks:
            self.remarks = (
                f"Age: {self.age or 'N/A'}, Gender: {self.gender or 'N/A'}, "
                f"Area: {self.residence_area or 'N/A'}"
            )
        return self


class ExamSubmission(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    course: str = ""
    exam: str = ""
    exam_type: ExamType = "entrance_exam"
    score: Optional[float] = None
    total_marks: Optional[float] = None

    @field_validator("score", mode="before")
    @classmethod
    def parse_score(cls, value):
        # Quiz exports send "18 / 25" or "18 points"; keep the first number
        if value is None or isinstance(value, (int, float)):
            return value
        match = _NUMBER.search(str(value))
        return float(match.group(1)) if match else None

    @field_validator("name", "email", "phone", "course", "exam", mode="after")
    @classmethod
    def strip(cls, value: str) -> str:
        return value.strip()


class LeadOut(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    course: Optional[str] = None
    qualification: Optional[str] = None
    source: Optional[str] = None
    status: str
    remarks: Optional[str] = None
    entrance_score: Optional[float] = None
    final_score: Optional[float] = None
    student_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ExamResultOut(BaseModel):
    id: int
    exam_type: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    course: Optional[str] = None
    exam: Optional[str] = None
    score: Optional[float] = None
    total_marks: Optional[float] = None
    lead_id: Optional[int] = None
    student_id: Optional[int] = None
    submitted_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LeadWebhookOut(BaseModel):
    success: bool
    message: str
    lead: LeadOut


class ExamWebhookOut(BaseModel):
    success: bool
    result: ExamResultOut
