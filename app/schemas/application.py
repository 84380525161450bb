import re
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from typing import Optional
from datetime import date, datetime, timezone
from uuid import UUID

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as UTC with second precision, e.g. 2024-05-01T09:30:00Z."""
    if value.tzinfo is None:
        # SQLite hands back naive values; they were written as UTC
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_applied_date(v) -> Optional[date]:
    """
    Decode an applied_date request value.

    Only a YYYY-MM-DD string is a date; an empty string or null means no date.
    Numbers, datetimes and other shapes are rejected.
    """
    if v is None:
        return None
    if not isinstance(v, str):
        raise ValueError("applied_date must be a YYYY-MM-DD string")
    if not v.strip():
        return None
    if not _DATE_RE.match(v):
        raise ValueError("applied_date must be a YYYY-MM-DD string")
    return date.fromisoformat(v)


class ApplicationCreateRequest(BaseModel):
    """
    Body of POST /applications.

    Unknown fields are rejected. company and role are checked for emptiness
    by the CRUD layer, so they are optional here.
    """
    model_config = ConfigDict(extra="forbid")

    company: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    source: Optional[str] = None
    applied_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator("applied_date", mode="before")
    @classmethod
    def strict_applied_date(cls, v):
        return parse_applied_date(v)


class ApplicationUpdateRequest(BaseModel):
    """Body of PATCH /applications/{id}. Blank values leave the stored value as is."""
    model_config = ConfigDict(extra="forbid")

    status: Optional[str] = None
    notes: Optional[str] = None
    applied_date: Optional[date] = None

    @field_validator("applied_date", mode="before")
    @classmethod
    def strict_applied_date(cls, v):
        return parse_applied_date(v)


class ApplicationResponse(BaseModel):
    """Schema for application response"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: str
    company: str
    role: str
    status: str
    source: Optional[str] = None
    applied_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("source", "notes")
    def serialize_text(self, value: Optional[str]) -> str:
        return value or ""

    @field_serializer("applied_date")
    def serialize_date(self, value: Optional[date]) -> str:
        return value.strftime(DATE_FORMAT) if value else ""

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)
