# clinic_dashboard/schemas/patients/patient.py
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional
from datetime import date
import re

from ..common.common import Entity, FormModel, split_tags
from ..appointments.appointment import Appointment

PATIENT_SEXES = ["male", "female", "other"]
PATIENT_STATUSES = ["active", "inactive", "pending"]

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ContactBlock(BaseModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class EmergencyContact(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[str] = None


class InsuranceBlock(BaseModel):
    provider: Optional[str] = None
    policy_number: Optional[str] = None
    group_number: Optional[str] = None


class Patient(Entity):
    name: str
    dob: Optional[date] = None
    sex: Optional[str] = None
    contact: ContactBlock = ContactBlock()
    emergency_contact: EmergencyContact = EmergencyContact()
    insurance: InsuranceBlock = InsuranceBlock()
    allergies: List[str] = []
    medical_history: Optional[str] = None
    status: str = "active"
    last_visit: Optional[date] = None


class ContactForm(FormModel):
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=500)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        if v is not None and not EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v


class EmergencyContactForm(FormModel):
    name: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    relationship: Optional[str] = Field(default=None, max_length=100)


class InsuranceForm(FormModel):
    provider: Optional[str] = Field(default=None, max_length=255)
    policy_number: Optional[str] = Field(default=None, max_length=100)
    group_number: Optional[str] = Field(default=None, max_length=100)


class PatientForm(FormModel):
    name: str = Field(min_length=2, max_length=255)
    dob: date
    sex: str
    contact: ContactForm = ContactForm()
    emergency_contact: EmergencyContactForm = EmergencyContactForm()
    insurance: InsuranceForm = InsuranceForm()
    allergies: List[str] = []
    medical_history: Optional[str] = None
    status: str = "active"

    @field_validator("dob")
    @classmethod
    def validate_dob(cls, v):
        if v >= date.today():
            raise ValueError("Date of birth must be before today")
        return v

    @field_validator("sex")
    @classmethod
    def validate_sex(cls, v):
        v = v.lower()
        if v not in PATIENT_SEXES:
            raise ValueError(f"Sex must be one of: {', '.join(PATIENT_SEXES)}")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        v = v.lower()
        if v not in PATIENT_STATUSES:
            raise ValueError(f"Status must be one of: {', '.join(PATIENT_STATUSES)}")
        return v

    @field_validator("allergies", mode="before")
    @classmethod
    def parse_allergies(cls, v):
        return split_tags(v)


def default_patient_draft() -> Dict[str, Any]:
    return {
        "name": "",
        "dob": "",
        "sex": "",
        "contact": {"phone": "", "email": "", "address": ""},
        "emergency_contact": {"name": "", "phone": "", "relationship": ""},
        "insurance": {"provider": "", "policy_number": "", "group_number": ""},
        "allergies": [],
        "medical_history": "",
        "status": "active",
    }


class Encounter(BaseModel):
    id: int
    encounter_number: Optional[str] = None
    visit_type: str
    reason_for_visit: Optional[str] = None
    status: str
    created_at: Optional[str] = None


class Prescription(BaseModel):
    id: int
    prescription_number: Optional[str] = None
    status: str
    diagnosis: Optional[str] = None
    issued_at: Optional[str] = None


class PatientHealthRecords(BaseModel):
    patient: Patient
    appointments: List[Appointment] = []
    encounters: List[Encounter] = []
    prescriptions: List[Prescription] = []

    @field_validator("appointments", "encounters", "prescriptions", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return v or []
