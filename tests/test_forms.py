from datetime import date, datetime, timedelta
import pytest
from pydantic import ValidationError

from clinic_dashboard.exceptions import normalize_errors, validation_errors_from_pydantic
from clinic_dashboard.schemas import (
    AppointmentForm,
    DoctorForm,
    PatientForm,
    RoomForm,
    StaffForm,
    default_appointment_draft,
    default_availability,
    split_tags,
)


def _errors(form_cls, data):
    with pytest.raises(ValidationError) as exc:
        form_cls.model_validate(data)
    return normalize_errors(validation_errors_from_pydantic(exc.value.errors(), skip_prefixes=()))


def test_appointment_form_coerces_form_strings_and_derives_end():
    draft = default_appointment_draft()
    draft.update(patient_id="1", doctor_id="2", start_at="2024-01-15T09:00:00", duration="45", type="Follow_Up")
    form = AppointmentForm.model_validate(draft)
    assert form.patient_id == 1
    assert form.type == "follow-up"
    assert form.room_id is None
    assert form.end_at == datetime(2024, 1, 15, 9, 45)
    assert "room_id" not in form.payload()


def test_edit_payload_sends_blank_optional_fields_as_null():
    draft = default_appointment_draft()
    draft.update(patient_id="1", doctor_id="2", start_at="2024-01-15T09:00:00", room_id="", notes="  ")
    form = AppointmentForm.model_validate(draft)
    assert "notes" not in form.payload()
    edit = form.payload(clear_blanks=True)
    assert edit["room_id"] is None
    assert edit["notes"] is None
    assert edit["reason"] is None
    assert edit["patient_id"] == 1
    assert edit["start_at"] == "2024-01-15T09:00:00"


def test_appointment_form_reports_each_bad_field():
    draft = default_appointment_draft()
    draft.update(doctor_id="2", start_at="2024-01-15T09:00:00", duration="5", priority="whenever")
    errors = _errors(AppointmentForm, draft)
    assert set(errors) == {"patient_id", "duration", "priority"}
    assert errors["priority"].startswith("Priority must be one of")


def test_patient_form_rules():
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    errors = _errors(PatientForm, {"name": "J", "dob": tomorrow, "sex": "unknown", "contact": {"email": "nope"}})
    assert set(errors) == {"name", "dob", "sex", "contact.email"}
    assert errors["dob"] == "Date of birth must be before today"

    form = PatientForm.model_validate({
        "name": "John Doe", "dob": "1980-02-01", "sex": "Male",
        "contact": {"email": "jd@example.com", "phone": ""},
        "allergies": "Penicillin, , Latex, Penicillin",
    })
    assert form.sex == "male"
    assert form.allergies == ["Penicillin", "Latex"]
    assert form.contact.phone is None


def test_doctor_availability_must_cover_known_weekdays():
    base = {"name": "Dr. Lee", "email": "Lee@Clinic.com", "specialization": "Dermatology", "license_number": "MD-1"}
    form = DoctorForm.model_validate({**base, "availability": {"Saturday": {"start": "10:00", "end": "12:00", "available": True}}})
    assert form.email == "lee@clinic.com"
    assert set(form.availability) == set(default_availability())
    assert form.availability["saturday"].available is True

    errors = _errors(DoctorForm, {**base, "availability": {"funday": {}}})
    assert "availability" in errors

    errors = _errors(DoctorForm, {**base, "availability": {"monday": {"start": "17:00", "end": "09:00", "available": True}}})
    assert errors == {"availability.monday": "End time must be after start time"}


def test_closed_day_may_have_any_hours():
    form = DoctorForm.model_validate({
        "name": "Dr. Lee", "email": "lee@clinic.com", "specialization": "Dermatology", "license_number": "MD-1",
        "availability": {"sunday": {"start": "17:00", "end": "09:00", "available": False}},
    })
    assert form.availability["sunday"].available is False


def test_room_and_staff_choices_are_case_insensitive():
    room = RoomForm.model_validate({"name": "Room 9", "type": "lab", "status": "MAINTENANCE", "capacity": "4"})
    assert (room.type, room.status, room.capacity) == ("Lab", "Maintenance", 4)

    staff = StaffForm.model_validate({"name": "Lisa Rodriguez", "email": "lisa@clinic.com", "role": "nurse",
                                      "department": "Emergency", "status": "on leave"})
    assert (staff.role, staff.status) == ("Nurse", "On Leave")

    errors = _errors(StaffForm, {"name": "Lisa Rodriguez", "email": "lisa@clinic.com", "role": "Janitor", "department": "x"})
    assert set(errors) == {"role"}


def test_split_tags():
    assert split_tags(None) == []
    assert split_tags(" a, b ,a,,") == ["a", "b"]
    assert split_tags(["x", " x ", "y"]) == ["x", "y"]
