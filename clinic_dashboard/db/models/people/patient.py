# clinic_dashboard/db/models/people/patient.py
from typing import Any, Dict, List, Optional
from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field
from datetime import date, datetime


class PatientRow(SQLModel, table=True):
    __tablename__ = "patients"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    dob: date
    sex: str
    # contact/emergency/insurance blocks are stored as they are edited: one JSON object each
    contact: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    emergency_contact: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    insurance: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    allergies: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    medical_history: Optional[str] = None
    status: str = Field(default="active")
    last_visit: Optional[date] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
