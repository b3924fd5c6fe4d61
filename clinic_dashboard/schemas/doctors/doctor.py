# clinic_dashboard/schemas/doctors/doctor.py
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, Dict, Optional
import re

from ..common.common import Entity, FormModel, canonical_choice
from ..patients.patient import EMAIL_RE

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
PERSONNEL_STATUSES = ["Active", "On Leave", "Inactive"]

TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class DayAvailability(BaseModel):
    start: str = "09:00"
    end: str = "17:00"
    available: bool = False


class Doctor(Entity):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    specialization: str = ""
    license_number: Optional[str] = None
    status: str = "Active"
    availability: Dict[str, DayAvailability] = {}
    consultation_fee: Optional[float] = None
    experience: Optional[str] = None
    rating: Optional[float] = None


class DayAvailabilityForm(FormModel):
    start: str = "09:00"
    end: str = "17:00"
    available: bool = False

    @field_validator("start", "end")
    @classmethod
    def validate_time(cls, v):
        if not TIME_RE.match(v):
            raise ValueError("Time must use HH:MM")
        return v

    @model_validator(mode="after")
    def check_range(self):
        if self.available and self.start >= self.end:
            raise ValueError("End time must be after start time")
        return self


def default_availability() -> Dict[str, Dict[str, Any]]:
    """Weekdays open 09:00-17:00, weekend closed"""
    return {
        day: {"start": "09:00", "end": "17:00", "available": day not in ("saturday", "sunday")}
        for day in WEEKDAYS
    }


class DoctorForm(FormModel):
    name: str = Field(min_length=2, max_length=255)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    specialization: str = Field(max_length=255)
    license_number: str = Field(max_length=255)
    status: str = "Active"
    consultation_fee: Optional[float] = Field(default=None, ge=0)
    availability: Dict[str, DayAvailabilityForm] = Field(default_factory=default_availability)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        if not EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v.lower()

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return canonical_choice(v, PERSONNEL_STATUSES, "Status")

    @field_validator("availability", mode="before")
    @classmethod
    def fill_weekdays(cls, v):
        if v is None:
            return default_availability()
        if not isinstance(v, dict):
            raise ValueError("Availability must map weekdays to hours")
        unknown = [day for day in v if day.lower() not in WEEKDAYS]
        if unknown:
            raise ValueError(f"Unknown weekday: {', '.join(unknown)}")
        merged = default_availability()
        for day, hours in v.items():
            merged[day.lower()] = hours
        return merged


def default_doctor_draft() -> Dict[str, Any]:
    return {
        "name": "",
        "email": "",
        "phone": "",
        "specialization": "",
        "license_number": "",
        "status": "Active",
        "consultation_fee": "",
        "availability": default_availability(),
    }
