# clinic_dashboard/schemas/staff/staff.py
from pydantic import Field, field_validator
from typing import Any, Dict, Optional
from datetime import date

from ..common.common import Entity, FormModel, canonical_choice
from ..doctors.doctor import PERSONNEL_STATUSES
from ..patients.patient import EMAIL_RE

STAFF_ROLES = ["Doctor", "Nurse", "Receptionist", "Administrator"]


class StaffMember(Entity):
    name: str
    email: str
    phone: Optional[str] = None
    role: str
    department: str = ""
    status: str = "Active"
    join_date: Optional[date] = None


class StaffForm(FormModel):
    name: str = Field(min_length=2, max_length=255)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    role: str
    department: str = Field(min_length=1, max_length=255)
    status: str = "Active"

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        if not EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v.lower()

    @field_validator("role")
    @classmethod
    def validate_role(cls, v):
        return canonical_choice(v, STAFF_ROLES, "Role")

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return canonical_choice(v, PERSONNEL_STATUSES, "Status")


def default_staff_draft() -> Dict[str, Any]:
    return {
        "name": "",
        "email": "",
        "phone": "",
        "role": "",
        "department": "",
        "status": "Active",
    }
