# clinic_dashboard/schemas/appointments/appointment.py
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional
from datetime import datetime, timedelta

from ..common.common import Entity, FormModel

APPOINTMENT_TYPES = ["consultation", "follow-up", "emergency", "routine", "procedure", "lab-test"]
APPOINTMENT_STATUSES = ["scheduled", "confirmed", "in-progress", "completed", "cancelled", "no-show", "checked-in"]
APPOINTMENT_PRIORITIES = ["low", "normal", "high", "urgent", "emergency"]


def _one_of(value: Optional[str], allowed: List[str], what: str) -> Optional[str]:
    if value is None:
        return value
    key = value.strip().lower().replace("_", "-")
    if key not in allowed:
        raise ValueError(f"{what} must be one of: {', '.join(allowed)}")
    return key


class Appointment(Entity):
    patient_id: Optional[int] = None
    patient_name: str = ""
    doctor_id: Optional[int] = None
    doctor_name: str = ""
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    duration: Optional[int] = None
    type: str = "consultation"
    status: str = "scheduled"
    priority: str = "normal"
    room_id: Optional[int] = None
    room_name: Optional[str] = None
    reason: Optional[str] = None
    notes: Optional[str] = None


class AppointmentForm(FormModel):
    patient_id: int = Field(gt=0)
    doctor_id: int = Field(gt=0)
    start_at: datetime
    duration: int = Field(default=30, ge=15, le=480)
    type: str = "consultation"
    status: str = "scheduled"
    priority: str = "normal"
    room_id: Optional[int] = Field(default=None, gt=0)
    reason: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("type")
    @classmethod
    def validate_type(cls, v):
        return _one_of(v, APPOINTMENT_TYPES, "Type")

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return _one_of(v, APPOINTMENT_STATUSES, "Status")

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v):
        return _one_of(v, APPOINTMENT_PRIORITIES, "Priority")

    @property
    def end_at(self) -> datetime:
        return self.start_at + timedelta(minutes=self.duration)


def default_appointment_draft() -> Dict[str, Any]:
    return {
        "patient_id": "",
        "doctor_id": "",
        "start_at": "",
        "duration": "30",
        "type": "consultation",
        "status": "scheduled",
        "priority": "normal",
        "room_id": "",
        "reason": "",
        "notes": "",
    }


class CalendarEvent(BaseModel):
    id: int
    title: str
    start: datetime
    end: Optional[datetime] = None
    status: str
    type: str
    doctor: Optional[str] = None
    room: Optional[str] = None
    color: str
