# clinic_dashboard/resources.py
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel

from .application.services.list_controller import DateFilter, DateRangeFilter, EqualsFilter
from .schemas import (
    Appointment, AppointmentForm, default_appointment_draft,
    Patient, PatientForm, default_patient_draft,
    Doctor, DoctorForm, default_doctor_draft,
    Room, RoomForm, default_room_draft,
    StaffMember, StaffForm, default_staff_draft,
    Message, LabResult, MedSample, MedicalRecord,
)


def _no_draft() -> Dict[str, Any]:
    return {}


@dataclass(frozen=True)
class ResourceDefinition:
    """Everything a page needs to know about one CRUD-managed entity type"""
    name: str
    label: str
    plural: str
    list_key: str
    entity: Type[BaseModel]
    search_fields: Tuple[str, ...]
    filters: Tuple[Any, ...] = ()
    form: Optional[Type[BaseModel]] = None
    default_draft: Callable[[], Dict[str, Any]] = field(default=_no_draft)

    @property
    def read_only(self) -> bool:
        return self.form is None

    @property
    def path(self) -> str:
        return f"/{self.name}"

    def item_path(self, entity_id: int) -> str:
        return f"/{self.name}/{entity_id}"


APPOINTMENTS = ResourceDefinition(
    name="appointments",
    label="appointment",
    plural="appointments",
    list_key="appointments",
    entity=Appointment,
    form=AppointmentForm,
    default_draft=default_appointment_draft,
    search_fields=("patient_name", "doctor_name", "reason"),
    filters=(
        EqualsFilter("status", "status"),
        EqualsFilter("type", "type"),
        EqualsFilter("priority", "priority"),
        DateFilter("date", "start_at"),
        DateRangeFilter("date_range", "start_at"),
    ),
)

PATIENTS = ResourceDefinition(
    name="patients",
    label="patient",
    plural="patients",
    list_key="patients",
    entity=Patient,
    form=PatientForm,
    default_draft=default_patient_draft,
    search_fields=("name", "contact.email", "contact.phone"),
    filters=(
        EqualsFilter("status", "status"),
        EqualsFilter("sex", "sex"),
    ),
)

DOCTORS = ResourceDefinition(
    name="doctors",
    label="doctor",
    plural="doctors",
    list_key="doctors",
    entity=Doctor,
    form=DoctorForm,
    default_draft=default_doctor_draft,
    search_fields=("name", "email", "specialization"),
    filters=(
        EqualsFilter("specialization", "specialization"),
        EqualsFilter("status", "status"),
    ),
)

ROOMS = ResourceDefinition(
    name="rooms",
    label="room",
    plural="rooms",
    list_key="rooms",
    entity=Room,
    form=RoomForm,
    default_draft=default_room_draft,
    search_fields=("name", "type"),
    filters=(
        EqualsFilter("status", "status"),
        EqualsFilter("type", "type"),
    ),
)

STAFF = ResourceDefinition(
    name="staff",
    label="staff member",
    plural="staff members",
    list_key="staff",
    entity=StaffMember,
    form=StaffForm,
    default_draft=default_staff_draft,
    search_fields=("name", "email", "department"),
    filters=(
        EqualsFilter("role", "role"),
        EqualsFilter("status", "status"),
    ),
)

MESSAGES = ResourceDefinition(
    name="messages",
    label="message",
    plural="messages",
    list_key="messages",
    entity=Message,
    search_fields=("subject", "patient_name", "content"),
    filters=(
        EqualsFilter("type", "type"),
        EqualsFilter("status", "status"),
        EqualsFilter("priority", "priority"),
    ),
)

LAB_RESULTS = ResourceDefinition(
    name="lab-results",
    label="lab result",
    plural="lab results",
    list_key="lab_results",
    entity=LabResult,
    search_fields=("test_name", "patient_name", "ordered_by"),
    filters=(
        EqualsFilter("type", "test_type"),
        EqualsFilter("status", "status"),
    ),
)

MED_SAMPLES = ResourceDefinition(
    name="med-samples",
    label="medication sample",
    plural="medication samples",
    list_key="med_samples",
    entity=MedSample,
    search_fields=("medication_name", "manufacturer", "representative"),
    filters=(
        EqualsFilter("type", "sample_type"),
        EqualsFilter("status", "status"),
    ),
)

RECORDS = ResourceDefinition(
    name="records",
    label="medical record",
    plural="medical records",
    list_key="records",
    entity=MedicalRecord,
    search_fields=("title", "patient_name", "summary"),
    filters=(
        EqualsFilter("type", "record_type"),
        EqualsFilter("status", "status"),
    ),
)

RESOURCES: Dict[str, ResourceDefinition] = {
    r.name: r
    for r in (APPOINTMENTS, PATIENTS, DOCTORS, ROOMS, STAFF, MESSAGES, LAB_RESULTS, MED_SAMPLES, RECORDS)
}
