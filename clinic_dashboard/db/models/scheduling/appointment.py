# clinic_dashboard/db/models/scheduling/appointment.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime


class AppointmentRow(SQLModel, table=True):
    __tablename__ = "appointments"
    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: int = Field(foreign_key="patients.id", index=True)
    doctor_id: int = Field(foreign_key="doctors.id", index=True)
    room_id: Optional[int] = Field(default=None, foreign_key="rooms.id")
    start_at: datetime = Field(index=True)
    duration: int = Field(default=30)
    end_at: datetime
    type: str = Field(default="consultation")
    status: str = Field(default="scheduled")
    priority: str = Field(default="normal")
    reason: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
