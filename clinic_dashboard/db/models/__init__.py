# Models package (re-export feature modules for stable imports)
from .people.patient import PatientRow
from .people.doctor import DoctorRow
from .people.staff import StaffRow
from .scheduling.room import RoomRow
from .scheduling.appointment import AppointmentRow
from .clinical.records import (
    MessageRow,
    LabResultRow,
    MedSampleRow,
    MedicalRecordRow,
    EncounterRow,
    PrescriptionRow,
)

__all__ = [
    "PatientRow",
    "DoctorRow",
    "StaffRow",
    "RoomRow",
    "AppointmentRow",
    "MessageRow",
    "LabResultRow",
    "MedSampleRow",
    "MedicalRecordRow",
    "EncounterRow",
    "PrescriptionRow",
]
