# clinic_dashboard/db/models/people/doctor.py
from typing import Any, Dict, Optional
from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field
from datetime import datetime


class DoctorRow(SQLModel, table=True):
    __tablename__ = "doctors"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    phone: Optional[str] = None
    specialization: str
    license_number: str
    status: str = Field(default="Active")
    consultation_fee: Optional[float] = None
    availability: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    experience: Optional[str] = None
    rating: float = Field(default=0.0)
    created_at: datetime = Field(default_factory=datetime.utcnow)
