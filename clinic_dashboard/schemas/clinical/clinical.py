# clinic_dashboard/schemas/clinical/clinical.py
# Read-only resources: listed and viewed, never edited from the dashboard
from pydantic import BaseModel
from typing import List, Optional
import datetime as dt

from ..common.common import Entity


class Message(Entity):
    patient_id: Optional[int] = None
    patient_name: str = ""
    subject: str
    content: str = ""
    type: str = "in-app"
    status: str = "unread"
    priority: str = "normal"
    sent_at: Optional[dt.datetime] = None
    is_starred: bool = False
    attachments: int = 0


class LabParameter(BaseModel):
    parameter: str
    value: str
    unit: Optional[str] = None
    reference_range: Optional[str] = None
    status: str = "normal"


class LabResult(Entity):
    patient_id: Optional[int] = None
    patient_name: str = ""
    test_name: str
    test_type: str = "other"
    ordered_by: str = ""
    date: Optional[dt.date] = None
    status: str = "pending"
    results: List[LabParameter] = []
    notes: Optional[str] = None
    attachments: int = 0


class MedSample(Entity):
    medication_name: str
    manufacturer: str = ""
    representative: str = ""
    representative_email: Optional[str] = None
    sample_type: str = "other"
    quantity: int = 0
    expiry_date: Optional[dt.date] = None
    received_date: Optional[dt.date] = None
    status: str = "available"
    description: Optional[str] = None
    dosage: Optional[str] = None
    is_starred: bool = False


class MedicalRecord(Entity):
    patient_id: Optional[int] = None
    patient_name: str = ""
    record_type: str = "consultation"
    title: str
    date: Optional[dt.date] = None
    doctor: str = ""
    status: str = "draft"
    summary: str = ""
    attachments: int = 0
    tags: List[str] = []
