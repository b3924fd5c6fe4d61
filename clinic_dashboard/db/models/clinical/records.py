# clinic_dashboard/db/models/clinical/records.py
# Tables behind the read-only dashboard pages and the patient health-records view
from typing import Any, Dict, List, Optional
from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field
import datetime as dt


class MessageRow(SQLModel, table=True):
    __tablename__ = "messages"
    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: Optional[int] = Field(default=None, foreign_key="patients.id")
    patient_name: str = ""
    subject: str
    content: str = ""
    type: str = Field(default="in-app")
    status: str = Field(default="unread")
    priority: str = Field(default="normal")
    sent_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    is_starred: bool = Field(default=False)
    attachments: int = Field(default=0)


class LabResultRow(SQLModel, table=True):
    __tablename__ = "lab_results"
    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: Optional[int] = Field(default=None, foreign_key="patients.id")
    patient_name: str = ""
    test_name: str
    test_type: str = Field(default="other")
    ordered_by: str = ""
    date: Optional[dt.date] = None
    status: str = Field(default="pending")
    results: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    notes: Optional[str] = None
    attachments: int = Field(default=0)


class MedSampleRow(SQLModel, table=True):
    __tablename__ = "med_samples"
    id: Optional[int] = Field(default=None, primary_key=True)
    medication_name: str
    manufacturer: str = ""
    representative: str = ""
    representative_email: Optional[str] = None
    sample_type: str = Field(default="other")
    quantity: int = Field(default=0)
    expiry_date: Optional[dt.date] = None
    received_date: Optional[dt.date] = None
    status: str = Field(default="available")
    description: Optional[str] = None
    dosage: Optional[str] = None
    is_starred: bool = Field(default=False)


class MedicalRecordRow(SQLModel, table=True):
    __tablename__ = "medical_records"
    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: Optional[int] = Field(default=None, foreign_key="patients.id")
    patient_name: str = ""
    record_type: str = Field(default="consultation")
    title: str
    date: Optional[dt.date] = None
    doctor: str = ""
    status: str = Field(default="draft")
    summary: str = ""
    attachments: int = Field(default=0)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))


class EncounterRow(SQLModel, table=True):
    __tablename__ = "encounters"
    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: int = Field(foreign_key="patients.id", index=True)
    encounter_number: Optional[str] = None
    visit_type: str = Field(default="consultation")
    reason_for_visit: Optional[str] = None
    status: str = Field(default="completed")
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class PrescriptionRow(SQLModel, table=True):
    __tablename__ = "prescriptions"
    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: int = Field(foreign_key="patients.id", index=True)
    prescription_number: Optional[str] = None
    status: str = Field(default="active")
    diagnosis: Optional[str] = None
    issued_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
