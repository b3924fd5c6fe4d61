# clinic_dashboard/db/models/scheduling/room.py
from typing import List, Optional
from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field
from datetime import datetime


class RoomRow(SQLModel, table=True):
    __tablename__ = "rooms"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    type: str = Field(default="Consultation")
    capacity: int = Field(default=1)
    status: str = Field(default="Available")
    equipment: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    doctor: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
