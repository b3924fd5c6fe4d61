# clinic_dashboard/db/models/people/staff.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import date, datetime


class StaffRow(SQLModel, table=True):
    __tablename__ = "staff"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    phone: Optional[str] = None
    role: str
    department: str
    status: str = Field(default="Active")
    join_date: date = Field(default_factory=date.today)
    created_at: datetime = Field(default_factory=datetime.utcnow)
