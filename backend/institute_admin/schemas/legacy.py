"""Record shapes of the browser-storage era JSON exports (camelCase or snake_case keys)."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional
from datetime import date, datetime
from institute_admin.schemas.student import StudentStatus


def _drop_blank(data):
    # The old dashboard wrote "" for unset fields
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if v is not None and v != ""}
    return data


def _date_part(value):
    if isinstance(value, str):
        return value.strip()[:10]
    return value


class LegacyBatch(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str = Field(min_length=1)
    course: str = Field(min_length=1, validation_alias=AliasChoices("course", "course_name"))
    name: Optional[str] = None
    start_date: date = Field(validation_alias=AliasChoices("startDate", "start_date"))
    end_date: date = Field(validation_alias=AliasChoices("endDate", "end_date"))
    trainer: Optional[str] = Field(default=None, validation_alias=AliasChoices("trainer", "trainer_name"))
    max_students: Optional[int] = Field(
        default=None, ge=0, validation_alias=AliasChoices("maxStudents", "max_students")
    )
    description: Optional[str] = None
    completed_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("completedAt", "completed_at")
    )
    notification_sent_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("notificationSentAt", "notification_sent_at")
    )

    @model_validator(mode="before")
    @classmethod
    def drop_blank(cls, data):
        return _drop_blank(data)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def strip_time(cls, value):
        return _date_part(value)

    @field_validator("id")
    @classmethod
    def strip_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("id must not be blank")
        return value


class LegacyStudent(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    qualification: Optional[str] = None
    course: Optional[str] = Field(default=None, validation_alias=AliasChoices("course", "course_name"))
    batch_number: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("batchNumber", "batch_number")
    )
    batch_start: Optional[date] = Field(default=None, validation_alias=AliasChoices("batchStart", "batch_start"))
    status: StudentStatus = "Active"

    @model_validator(mode="before")
    @classmethod
    def drop_blank(cls, data):
        return _drop_blank(data)

    @field_validator("batch_start", mode="before")
    @classmethod
    def strip_time(cls, value):
        return _date_part(value)

    @field_validator("batch_number")
    @classmethod
    def trim_batch_number(cls, value: Optional[str]) -> Optional[str]:
        value = (value or "").strip()
        return value or None
